"""add_profile_version

Revision ID: 9e3f6b2a7c15
Revises: 4c1d9a7e2b60
Create Date: 2026-10-19 16:40:02.771930

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9e3f6b2a7c15'
down_revision: Union[str, Sequence[str], None] = '4c1d9a7e2b60'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Add the optimistic-lock counter to profiles."""
    op.add_column(
        'profiles',
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )


def downgrade() -> None:
    """Drop the optimistic-lock counter."""
    op.drop_column('profiles', 'version')

"""create_social_tables

Revision ID: 4c1d9a7e2b60
Revises:
Create Date: 2026-10-19 10:12:44.318502

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d9a7e2b60'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles, posts and comments tables."""
    op.create_table('profiles',
        sa.Column('id', sa.String(length=128), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=False, server_default=''),
        sa.Column('photo_url', sa.String(length=500), nullable=False, server_default=''),
        sa.Column('phone', sa.String(length=50), nullable=False, server_default=''),
        sa.Column('user_name', sa.String(length=100), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('category', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('followers', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('following', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('gender', sa.String(length=20), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('posts',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('creator_id', sa.String(length=128), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('share', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('photo_url', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('hashtag', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('cate_id', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('reaction', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('mention', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['creator_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_posts_creator_created', 'posts', ['creator_id', 'created_at'], unique=False)

    op.create_table('comments',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('post_id', sa.String(length=64), nullable=False),
        sa.Column('author_id', sa.String(length=128), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_comments_post_id', 'comments', ['post_id'], unique=False)


def downgrade() -> None:
    """Drop comments, posts and profiles tables."""
    op.drop_index('ix_comments_post_id', table_name='comments')
    op.drop_table('comments')
    op.drop_index('ix_posts_creator_created', table_name='posts')
    op.drop_table('posts')
    op.drop_table('profiles')

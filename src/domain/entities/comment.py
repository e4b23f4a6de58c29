"""Comment domain entity."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Comment:
    """Domain entity for a Comment attached to a Post."""

    content: str
    post_id: str
    author_id: str
    id: str = field(default_factory=lambda: str(uuid4()))

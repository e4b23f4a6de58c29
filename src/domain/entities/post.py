"""Post domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.entities.comment import Comment


@dataclass
class Post:
    """Domain entity for a Post."""

    creator_id: str
    content: str
    id: str = field(default_factory=lambda: str(uuid4()))
    share: set[str] = field(default_factory=set)
    photo_url: list[str] = field(default_factory=list)
    hashtag: list[str] = field(default_factory=list)
    cate_id: list[str] = field(default_factory=list)
    reaction: list[str] = field(default_factory=list)
    # Populated by detail reads only; comments are owned by the comment store
    comments: list[Comment] = field(default_factory=list)
    mention: set[str] = field(default_factory=set)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    deleted_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.share = set(self.share or ())
        self.mention = set(self.mention or ())
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

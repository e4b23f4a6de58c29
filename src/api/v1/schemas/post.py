"""Pydantic schemas for Post API."""

from datetime import datetime

from pydantic import Field

from api.v1.schemas.comment import CommentResponse
from api.v1.schemas.common import CamelModel
from domain.entities.page import Page
from domain.entities.post import Post


class PostBody(CamelModel):
    """Schema for creating or updating a Post. The creator comes from the token."""

    id: str | None = None
    content: str = ""
    share: list[str] = Field(default_factory=list)
    photo_url: list[str] = Field(default_factory=list)
    hashtag: list[str] = Field(default_factory=list)
    cate_id: list[str] = Field(default_factory=list)
    reaction: list[str] = Field(default_factory=list)
    mention: list[str] = Field(default_factory=list)


class PostResponse(CamelModel):
    """Schema for Post response."""

    id: str
    creator_id: str
    content: str
    share: list[str]
    photo_url: list[str]
    hashtag: list[str]
    cate_id: list[str]
    reaction: list[str]
    comments: list[CommentResponse]
    mention: list[str]
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls(
            id=post.id,
            creator_id=post.creator_id,
            content=post.content,
            share=sorted(post.share),
            photo_url=post.photo_url,
            hashtag=post.hashtag,
            cate_id=post.cate_id,
            reaction=post.reaction,
            comments=[CommentResponse.from_entity(c) for c in post.comments],
            mention=sorted(post.mention),
            created_at=post.created_at,
            updated_at=post.updated_at,
            deleted_at=post.deleted_at,
        )


class PostDetailResponse(CamelModel):
    data: PostResponse


class PostListResponse(CamelModel):
    data: list[PostResponse]


class PostPageResponse(CamelModel):
    """One page of posts; ``endpage`` is the index of the last page."""

    data: list[PostResponse]
    endpage: int

    @classmethod
    def from_page(cls, page: Page[Post]) -> "PostPageResponse":
        return cls(
            data=[PostResponse.from_entity(p) for p in page.data],
            endpage=page.endpage,
        )

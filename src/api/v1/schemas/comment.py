"""Pydantic schemas for Comment API."""

from api.v1.schemas.common import CamelModel
from domain.entities.comment import Comment


class CommentCreate(CamelModel):
    """Schema for creating a Comment. The author comes from the token."""

    id: str | None = None
    content: str = ""
    post_id: str = ""


class CommentBody(CamelModel):
    """Comment payload for update and delete; ``id`` must match the query id."""

    id: str = ""
    content: str = ""


class CommentResponse(CamelModel):
    """Schema for Comment response."""

    id: str
    content: str
    post_id: str
    author_id: str

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            post_id=comment.post_id,
            author_id=comment.author_id,
        )


class CommentDetailResponse(CamelModel):
    data: CommentResponse


class CommentListResponse(CamelModel):
    data: list[CommentResponse]

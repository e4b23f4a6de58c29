"""Comment API routes."""

from fastapi import APIRouter, Depends, Query, status

from api.dependencies.auth import BearerToken
from api.v1.dependencies import get_comment_interop
from api.v1.schemas.comment import (
    CommentBody,
    CommentCreate,
    CommentDetailResponse,
    CommentListResponse,
    CommentResponse,
)
from api.v1.schemas.common import MessageResponse
from domain.entities.comment import Comment
from domain.interop.comment_interop import CommentInterop

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post(
    "",
    response_model=CommentDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
)
async def create_comment(
    body: CommentCreate,
    token: BearerToken,
    interop: CommentInterop = Depends(get_comment_interop),
) -> CommentDetailResponse:
    if body.id:
        comment = Comment(id=body.id, content=body.content, post_id=body.post_id, author_id="")
    else:
        comment = Comment(content=body.content, post_id=body.post_id, author_id="")
    created = await interop.create_comment(token, comment)
    return CommentDetailResponse(data=CommentResponse.from_entity(created))


@router.put("", response_model=CommentDetailResponse, summary="Edit a comment")
async def update_comment(
    body: CommentBody,
    token: BearerToken,
    id: str = Query(""),
    interop: CommentInterop = Depends(get_comment_interop),
) -> CommentDetailResponse:
    """Edit a comment; the body's ``id`` must equal the ``id`` query parameter."""
    comment = Comment(id=body.id, content=body.content, post_id="", author_id="")
    updated = await interop.update_comment(token, id, comment)
    return CommentDetailResponse(data=CommentResponse.from_entity(updated))


@router.delete("", response_model=MessageResponse, summary="Delete a comment")
async def delete_comment(
    body: CommentBody,
    token: BearerToken,
    id: str = Query(""),
    interop: CommentInterop = Depends(get_comment_interop),
) -> MessageResponse:
    """Delete a comment; the body's ``id`` must equal the ``id`` query parameter."""
    comment = Comment(id=body.id, content=body.content, post_id="", author_id="")
    await interop.delete_comment(token, id, comment)
    return MessageResponse(message="Comment deleted")


@router.get("", response_model=CommentDetailResponse, summary="Get a comment")
async def get_comment(
    token: BearerToken,
    id: str = Query(""),
    interop: CommentInterop = Depends(get_comment_interop),
) -> CommentDetailResponse:
    comment = await interop.get_comment_by_id(token, id)
    return CommentDetailResponse(data=CommentResponse.from_entity(comment))


@router.get("/all", response_model=CommentListResponse, summary="List all comments")
async def list_comments(
    token: BearerToken,
    interop: CommentInterop = Depends(get_comment_interop),
) -> CommentListResponse:
    comments = await interop.get_comments(token)
    return CommentListResponse(data=[CommentResponse.from_entity(c) for c in comments])


@router.get("/post", response_model=CommentListResponse, summary="Comments on a post")
async def list_post_comments(
    token: BearerToken,
    post_id: str = Query("", alias="postId"),
    interop: CommentInterop = Depends(get_comment_interop),
) -> CommentListResponse:
    comments = await interop.get_comments_by_post_id(token, post_id)
    return CommentListResponse(data=[CommentResponse.from_entity(c) for c in comments])

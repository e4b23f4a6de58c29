"""Post API routes.

Pagination parameters are received as raw strings and validated by the
domain layer so every listing rejects bad input the same way.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies.auth import BearerToken
from api.v1.dependencies import get_post_interop
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.post import (
    PostBody,
    PostDetailResponse,
    PostListResponse,
    PostPageResponse,
    PostResponse,
)
from core.exceptions import ErrorCode, ValidationError
from domain.entities.post import Post
from domain.interop.post_interop import PostInterop

router = APIRouter(prefix="/posts", tags=["posts"])

PageParam = Query(None)
SizeParam = Query(None)


def _to_entity(body: PostBody, require_id: bool = False) -> Post:
    if not body.model_fields_set:
        raise ValidationError("body", "Body is invalid", ErrorCode.INVALID_POST_BODY)
    if require_id and not body.id:
        raise ValidationError("id", "Post id is invalid", ErrorCode.ID_EMPTY)
    data = body.model_dump(exclude={"id"})
    if body.id:
        return Post(id=body.id, creator_id="", **data)
    return Post(creator_id="", **data)


@router.get("", response_model=PostDetailResponse, summary="Get a post with comments")
async def get_post(
    token: BearerToken,
    id: str = Query(""),
    interop: PostInterop = Depends(get_post_interop),
) -> PostDetailResponse:
    post = await interop.get_detail(id, token)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.get("/by-id", response_model=PostDetailResponse, summary="Get a post")
async def get_post_by_id(
    token: BearerToken,
    post_id: str = Query("", alias="postId"),
    interop: PostInterop = Depends(get_post_interop),
) -> PostDetailResponse:
    post = await interop.get_post_by_id(post_id, token)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.get("/all", response_model=PostListResponse, summary="List all posts")
async def list_posts(
    token: BearerToken,
    interop: PostInterop = Depends(get_post_interop),
) -> PostListResponse:
    posts = await interop.get_all_post(token)
    return PostListResponse(data=[PostResponse.from_entity(p) for p in posts])


@router.get("/mention", response_model=PostPageResponse, summary="Posts mentioning a profile")
async def list_mentions(
    token: BearerToken,
    mention: str = Query(""),
    page: Optional[str] = PageParam,
    size: Optional[str] = SizeParam,
    interop: PostInterop = Depends(get_post_interop),
) -> PostPageResponse:
    result = await interop.get_by_mention_id(mention, token, page, size)
    return PostPageResponse.from_page(result)


@router.get("/mine", response_model=PostPageResponse, summary="The caller's posts")
async def list_mine(
    token: BearerToken,
    page: Optional[str] = PageParam,
    size: Optional[str] = SizeParam,
    interop: PostInterop = Depends(get_post_interop),
) -> PostPageResponse:
    result = await interop.get_mine(token, page, size)
    return PostPageResponse.from_page(result)


@router.get("/user", response_model=PostPageResponse, summary="Posts by a creator")
async def list_by_creator(
    token: BearerToken,
    creator_id: str = Query("", alias="creatorId"),
    page: Optional[str] = PageParam,
    size: Optional[str] = SizeParam,
    interop: PostInterop = Depends(get_post_interop),
) -> PostPageResponse:
    result = await interop.get_all_by_uid(token, creator_id, page, size)
    return PostPageResponse.from_page(result)


@router.get("/newfeeds", response_model=PostPageResponse, summary="Posts in a category")
async def list_by_category(
    token: BearerToken,
    cate_id: str = Query("", alias="cateId"),
    page: Optional[str] = PageParam,
    size: Optional[str] = SizeParam,
    interop: PostInterop = Depends(get_post_interop),
) -> PostPageResponse:
    result = await interop.get_by_cate_id(cate_id, token, page, size)
    return PostPageResponse.from_page(result)


@router.get("/share", response_model=PostPageResponse, summary="Posts shared to the caller")
async def list_shared(
    token: BearerToken,
    page: Optional[str] = PageParam,
    size: Optional[str] = SizeParam,
    interop: PostInterop = Depends(get_post_interop),
) -> PostPageResponse:
    result = await interop.get_share(token, page, size)
    return PostPageResponse.from_page(result)


@router.post(
    "",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
)
async def create_post(
    body: PostBody,
    token: BearerToken,
    interop: PostInterop = Depends(get_post_interop),
) -> PostDetailResponse:
    post = await interop.create(_to_entity(body), token)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.put("", response_model=PostDetailResponse, summary="Update a post")
async def update_post(
    body: PostBody,
    token: BearerToken,
    interop: PostInterop = Depends(get_post_interop),
) -> PostDetailResponse:
    post = await interop.update(_to_entity(body, require_id=True), token)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.delete("", response_model=MessageResponse, summary="Delete a post")
async def delete_post(
    token: BearerToken,
    id: str = Query(""),
    interop: PostInterop = Depends(get_post_interop),
) -> MessageResponse:
    await interop.delete(id, token)
    return MessageResponse(message="Post deleted")

"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    COMMENT_ID_MISMATCH = "COMMENT_ID_MISMATCH"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    FIELD_EMPTY = "FIELD_EMPTY"
    ID_EMPTY = "ID_EMPTY"
    INVALID_CONTENT = "INVALID_CONTENT"
    INVALID_POST_BODY = "INVALID_POST_BODY"
    EMPTY_PAGE = "EMPTY_PAGE"
    PAGE_NOT_A_NUMBER = "PAGE_NOT_A_NUMBER"
    NEGATIVE_PAGE = "NEGATIVE_PAGE"
    INVALID_SIZE = "INVALID_SIZE"

    # Conflict errors (409)
    PROFILE_EXISTS = "PROFILE_EXISTS"
    POST_EXISTS = "POST_EXISTS"
    COMMENT_EXISTS = "COMMENT_EXISTS"
    CONCURRENT_UPDATE = "CONCURRENT_UPDATE"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class ValidationError(AppException):
    """A required field is missing or a parameter is malformed."""

    def __init__(
        self,
        field: str,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        value: Any | None = None,
    ) -> None:
        details: dict[str, Any] = {"field": field}
        if value is not None:
            details["value"] = value
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class ProfileAlreadyExistsError(AppException):
    """A profile with the same id is already stored."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_EXISTS,
            message="Profile already exists",
            status_code=409,
            details={"profile_id": profile_id},
        )


class ProfileNotFoundError(AppException):
    """Profile not found."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"Profile not found: {profile_id}",
            status_code=404,
            details={"profile_id": profile_id},
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message=f"Post not found: {post_id}",
            status_code=404,
            details={"post_id": post_id},
        )


class CommentNotFoundError(AppException):
    """Comment not found."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message=f"Comment not found: {comment_id}",
            status_code=404,
            details={"comment_id": comment_id},
        )


class CommentAlreadyExistsError(AppException):
    """A comment with the same id is already stored."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_EXISTS,
            message="Comment already created",
            status_code=409,
            details={"comment_id": comment_id},
        )


class CommentIdMismatchError(AppException):
    """The addressed comment id differs from the id carried by the payload."""

    def __init__(self, comment_id: str, payload_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_ID_MISMATCH,
            message="Comment id does not match the payload id",
            status_code=404,
            details={"comment_id": comment_id, "payload_id": payload_id},
        )


class PostAlreadyExistsError(AppException):
    """A post with the same id is stored, soft-deleted ones included."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_EXISTS,
            message="Post already exists",
            status_code=409,
            details={"post_id": post_id},
        )


class ConcurrentUpdateError(AppException):
    """A row changed between the read and the write of a transaction."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.CONCURRENT_UPDATE,
            message="Profile was modified concurrently, retry the request",
            status_code=409,
            details={"profile_id": profile_id},
        )

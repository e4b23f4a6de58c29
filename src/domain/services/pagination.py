"""Validation of page/size query parameters."""

from typing import Any

from core.exceptions import ErrorCode, ValidationError


def _to_int(value: Any) -> int | None:
    """Coerce an integer or a string of digits; anything else yields None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def validate_pagination(page: Any, size: Any) -> tuple[int, int]:
    """Return ``(page, size)`` as ints or raise ValidationError.

    ``page`` is a 0-based index and must be >= 0; ``size`` must be > 0.
    Query-string values arrive as strings and are accepted when numeric.
    """
    if page is None or page == "":
        raise ValidationError("page", "Page is empty", ErrorCode.EMPTY_PAGE)

    page_number = _to_int(page)
    if page_number is None:
        raise ValidationError(
            "page", "Page must be a number", ErrorCode.PAGE_NOT_A_NUMBER, value=page
        )
    if page_number < 0:
        raise ValidationError(
            "page", "Page cannot be negative", ErrorCode.NEGATIVE_PAGE, value=page_number
        )

    size_number = _to_int(size) if size not in (None, "") else None
    if size_number is None:
        raise ValidationError(
            "size", "Size must be a number", ErrorCode.INVALID_SIZE, value=size
        )
    if size_number <= 0:
        raise ValidationError(
            "size", "Size must be greater than 0", ErrorCode.INVALID_SIZE, value=size_number
        )

    return page_number, size_number

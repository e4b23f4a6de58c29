"""Paginated result value object."""

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


def last_page_index(total: int, size: int) -> int:
    """Index of the last valid page for ``total`` items; 0 when empty."""
    if total <= 0:
        return 0
    return math.ceil(total / size) - 1


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of results plus the index of the final page."""

    data: list[T] = field(default_factory=list)
    endpage: int = 0

"""
Paginator - fixed-size, 1-indexed result pages.
"""
import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def page_count(total: int, per_page: int) -> int:
    """Number of pages, never less than 1."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    return max(1, math.ceil(total / per_page))


def paginate(items: Sequence[T], page: int, per_page: int) -> list[T]:
    """Slice one page out of items. Out-of-range pages are empty."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    if page < 1:
        return []
    start = (page - 1) * per_page
    return list(items[start:start + per_page])

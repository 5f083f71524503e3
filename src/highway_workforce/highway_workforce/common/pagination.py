from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of a sorted collection. ``page`` is 1-based."""

    items: List[T] = field(default_factory=list)
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        if self.total_items == 0:
            return 0
        return (self.total_items + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(
    items: Iterable[T],
    *,
    page: int = DEFAULT_PAGE,
    size: int = DEFAULT_PAGE_SIZE,
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
) -> Page[T]:
    if page < 1:
        raise ValidationError("page must be >= 1")
    if size < 1:
        raise ValidationError("size must be >= 1")

    ordered = sorted(items, key=key, reverse=reverse) if key else list(items)
    start = (page - 1) * size
    return Page(items=ordered[start : start + size], page=page, size=size, total_items=len(ordered))


def page_params(args) -> tuple[int, int]:
    """Read ``page``/``size`` from request args (a Mapping with ``get``)."""
    try:
        page = int(args.get("page") or DEFAULT_PAGE)
        size = int(args.get("size") or DEFAULT_PAGE_SIZE)
    except (TypeError, ValueError):
        raise ValidationError("page and size must be integers")
    return page, size

"""
Pagination value objects shared by repository ports and query handlers.

Pages are 1-based on the outside; repositories work with offset/limit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from board_backend.config.settings import Config

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    size: int = 10

    def __post_init__(self):
        if self.page < 1:
            raise ValueError(f"Page must be >= 1, got {self.page}")
        if not 1 <= self.size <= Config.BOARD_MAX_PAGE_SIZE:
            raise ValueError(
                f"Page size must be between 1 and {Config.BOARD_MAX_PAGE_SIZE}, "
                f"got {self.size}"
            )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size

    @property
    def limit(self) -> int:
        return self.size


@dataclass
class Page(Generic[T]):
    items: list[T]
    page: int
    size: int
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.total == 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        """Return a page with the same paging info and transformed items."""
        return Page(
            items=[fn(item) for item in self.items],
            page=self.page,
            size=self.size,
            total=self.total,
        )

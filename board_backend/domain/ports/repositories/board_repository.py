"""
Board Repository Port - Interface for board persistence.
Implementation: board_backend/infrastructure/persistence/prisma_board_repository.py

get_by_id returns soft-deleted boards too; hiding them is the caller's job.
page/search only ever return ACTIVE boards, ordered by ascending id.
"""

from abc import ABC, abstractmethod
from typing import Optional

from board_backend.domain.entities.board import Board
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.pagination import Page, PageRequest


class BoardRepository(ABC):
    @abstractmethod
    async def get_by_id(self, board_id: BoardId) -> Optional[Board]: ...

    @abstractmethod
    async def save(self, board: Board) -> Board:
        """Insert (id is None) or update; returns the board as persisted."""
        ...

    @abstractmethod
    async def page(self, page_request: PageRequest) -> Page[Board]: ...

    @abstractmethod
    async def search(self, keyword: str, page_request: PageRequest) -> Page[Board]:
        """Like page(), restricted to boards whose title or author matches keyword."""
        ...

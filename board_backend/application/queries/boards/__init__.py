"""Board queries."""

from board_backend.application.queries.boards.read_board import (
    ReadBoardQuery,
    ReadBoardHandler,
)
from board_backend.application.queries.boards.page_boards import (
    PageBoardsQuery,
    PageBoardsHandler,
    SearchBoardsQuery,
    SearchBoardsHandler,
)

__all__ = [
    "ReadBoardQuery",
    "ReadBoardHandler",
    "PageBoardsQuery",
    "PageBoardsHandler",
    "SearchBoardsQuery",
    "SearchBoardsHandler",
]

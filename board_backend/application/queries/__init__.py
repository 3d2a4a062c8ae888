"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- boards/ -> read_board, page_boards (page + keyword search)
"""

from board_backend.application.queries.boards import (
    ReadBoardQuery,
    ReadBoardHandler,
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

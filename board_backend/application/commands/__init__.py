"""
COMMANDS - Write operations (CQRS)

Each command has:
- Command class: Input data for the write
- Handler class: Executes the write

Subfolders:
- boards/ -> register_board, update_board, delete_board
"""

from board_backend.application.commands.boards import (
    RegisterBoardCommand,
    RegisterBoardHandler,
    UpdateBoardCommand,
    UpdateBoardHandler,
    DeleteBoardCommand,
    DeleteBoardHandler,
)

__all__ = [
    "RegisterBoardCommand",
    "RegisterBoardHandler",
    "UpdateBoardCommand",
    "UpdateBoardHandler",
    "DeleteBoardCommand",
    "DeleteBoardHandler",
]

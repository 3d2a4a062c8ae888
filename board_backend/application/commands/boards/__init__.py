"""Board commands."""

from .register_board import RegisterBoardCommand, RegisterBoardHandler
from .update_board import UpdateBoardCommand, UpdateBoardHandler
from .delete_board import DeleteBoardCommand, DeleteBoardHandler

__all__ = [
    "RegisterBoardCommand",
    "RegisterBoardHandler",
    "UpdateBoardCommand",
    "UpdateBoardHandler",
    "DeleteBoardCommand",
    "DeleteBoardHandler",
]

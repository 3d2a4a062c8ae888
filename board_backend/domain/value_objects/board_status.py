"""
BoardStatus - explicit soft-delete state of a board.

DELETED boards keep their row; the deletion time travels with the entity
as metadata (Board.deleted_at).
"""

from enum import Enum


class BoardStatus(str, Enum):
    ACTIVE = "ACTIVE"
    DELETED = "DELETED"

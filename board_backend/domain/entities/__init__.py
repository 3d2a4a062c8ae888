"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from board_backend.domain.entities.member import Member
from board_backend.domain.entities.board import Board

__all__ = [
    "Member",
    "Board",
]

"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- board.py -> BoardDTO, BoardPageDTO, BoardCreateRequest, BoardUpdateRequest

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from board_backend.application.dto.board import (
    BoardDTO,
    BoardPageDTO,
    BoardCreateRequest,
    BoardUpdateRequest,
)

__all__ = [
    "BoardDTO",
    "BoardPageDTO",
    "BoardCreateRequest",
    "BoardUpdateRequest",
]

"""
API Routers - FastAPI endpoint definitions.
"""

from board_backend.presentation.api.boards import router as boards_router

__all__ = [
    "boards_router",
]

"""
Persistence Layer - Database implementations.

Contains Prisma repository implementations for domain ports.
"""

from board_backend.infrastructure.persistence.prisma_board_repository import (
    PrismaBoardRepository,
)
from board_backend.infrastructure.persistence.prisma_member_repository import (
    PrismaMemberRepository,
)

__all__ = [
    "PrismaBoardRepository",
    "PrismaMemberRepository",
]

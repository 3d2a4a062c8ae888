"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the use cases need
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from board_backend.domain.ports.repositories.board_repository import BoardRepository
from board_backend.domain.ports.repositories.member_repository import MemberRepository

__all__ = [
    "BoardRepository",
    "MemberRepository",
]

"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the board use cases
need, without specifying HOW it's done.

Subfolders:
- repositories/  -> Data persistence interfaces (boards, members)
- (root files)   -> Other external service interfaces (image store)
"""

from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.ports.repositories import BoardRepository, MemberRepository

__all__ = [
    "ImageStore",
    "BoardRepository",
    "MemberRepository",
]

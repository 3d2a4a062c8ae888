"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.member_id import MemberId
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.board_status import BoardStatus
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.domain.value_objects.pagination import Page, PageRequest

__all__ = [
    "BoardId",
    "MemberId",
    "Category",
    "BoardStatus",
    "ImageUpload",
    "Page",
    "PageRequest",
]

"""
Board Entity - a single post on the message board.

Lifecycle:
- Board.create(...)       -> new ACTIVE board, id assigned on first save
- board.update(...)       -> full replace of member/title/content/category/image
- board.record_deletion() -> soft delete (status DELETED + deleted_at)

There is no other mutation path and rows are never physically removed.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from board_backend.domain.entities.member import Member
from board_backend.domain.exceptions.validation_error import DomainValidationError
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.board_status import BoardStatus
from board_backend.domain.value_objects.category import Category


@dataclass
class Board:
    member: Member
    title: str
    content: str
    category: Category
    image_url: str
    id: Optional[BoardId] = None
    status: BoardStatus = BoardStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        member: Member,
        title: str,
        content: str,
        category: Category,
        image_url: str,
    ) -> Board:
        """Factory method to create a new, not yet persisted Board."""
        _validate(member, title, content, category, image_url)
        return cls(
            member=member,
            title=title,
            content=content,
            category=category,
            image_url=image_url,
        )

    def update(
        self,
        member: Member,
        title: str,
        content: str,
        category: Category,
        image_url: str,
    ) -> Board:
        """Replace every mutable field. Previous values are never merged in."""
        _validate(member, title, content, category, image_url)
        self.member = member
        self.title = title
        self.content = content
        self.category = category
        self.image_url = image_url
        return self

    def record_deletion(self, deleted_at: datetime) -> None:
        if deleted_at is None:
            raise DomainValidationError("Deletion time is required")
        self.status = BoardStatus.DELETED
        self.deleted_at = deleted_at

    @property
    def is_deleted(self) -> bool:
        return self.status is BoardStatus.DELETED


def _validate(
    member: Member,
    title: str,
    content: str,
    category: Category,
    image_url: str,
) -> None:
    if member is None:
        raise DomainValidationError("Board must have an owning member")
    if not title or not title.strip():
        raise DomainValidationError("Board title cannot be blank")
    if content is None:
        raise DomainValidationError("Board content is required")
    if not isinstance(category, Category):
        raise DomainValidationError(f"Invalid category: {category!r}")
    if not image_url or not image_url.strip():
        raise DomainValidationError("Board image URL cannot be empty")

"""
Prisma Board Repository Implementation.

Guidelines:
- Implements BoardRepository port from domain layer
- Maps between Prisma models and domain entities
- All methods are async

Mapping:
- Prisma model fields: id, member_id, title, content, category, image_url,
  created_at, updated_at, deleted_at
- Domain entity: Board with value objects (BoardId, Category, BoardStatus)
- deleted_at NOT NULL <-> BoardStatus.DELETED
- created_at / updated_at are owned by the database and never written here
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from board_backend.domain.entities.board import Board
from board_backend.domain.ports.repositories import BoardRepository
from board_backend.domain.value_objects.board_id import BoardId
from board_backend.domain.value_objects.board_status import BoardStatus
from board_backend.domain.value_objects.category import Category
from board_backend.domain.value_objects.pagination import Page, PageRequest
from board_backend.infrastructure.persistence.prisma_member_repository import (
    member_to_entity,
)

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Board as PrismaBoard

_INCLUDE_MEMBER = {"member": True}
_ORDER_BY_ID = {"id": "asc"}


class PrismaBoardRepository(BoardRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaBoard) -> Board:
        """Map Prisma record (with member included) to domain entity."""
        return Board(
            id=BoardId(record.id),
            member=member_to_entity(record.member),
            title=record.title,
            content=record.content,
            category=Category(record.category),
            image_url=record.image_url,
            status=BoardStatus.DELETED if record.deleted_at else BoardStatus.ACTIVE,
            created_at=record.created_at,
            updated_at=record.updated_at,
            deleted_at=record.deleted_at,
        )

    def _to_data(self, board: Board) -> Dict[str, Any]:
        return {
            "member": {"connect": {"id": board.member.id.value}},
            "title": board.title,
            "content": board.content,
            "category": board.category.value,
            "image_url": board.image_url,
            "deleted_at": board.deleted_at if board.is_deleted else None,
        }

    async def get_by_id(self, board_id: BoardId) -> Optional[Board]:
        """Get board by ID, soft-deleted or not."""
        record = await self._prisma.board.find_unique(
            where={"id": board_id.value},
            include=_INCLUDE_MEMBER,
        )
        return self._to_entity(record) if record else None

    async def save(self, board: Board) -> Board:
        data = self._to_data(board)
        if board.id is None:
            record = await self._prisma.board.create(data=data, include=_INCLUDE_MEMBER)
        else:
            record = await self._prisma.board.update(
                where={"id": board.id.value},
                data=data,
                include=_INCLUDE_MEMBER,
            )
            if record is None:
                raise LookupError(f"Board {board.id.value} disappeared during update")
        return self._to_entity(record)

    async def page(self, page_request: PageRequest) -> Page[Board]:
        return await self._find_page({"deleted_at": None}, page_request)

    async def search(self, keyword: str, page_request: PageRequest) -> Page[Board]:
        """Case-insensitive substring match on title or author nickname."""
        contains = {"contains": keyword, "mode": "insensitive"}
        where = {
            "deleted_at": None,
            "OR": [
                {"title": contains},
                {"member": {"is": {"nickname": contains}}},
            ],
        }
        return await self._find_page(where, page_request)

    async def _find_page(
        self, where: Dict[str, Any], page_request: PageRequest
    ) -> Page[Board]:
        records = await self._prisma.board.find_many(
            where=where,
            skip=page_request.offset,
            take=page_request.limit,
            order=_ORDER_BY_ID,
            include=_INCLUDE_MEMBER,
        )
        total = await self._prisma.board.count(where=where)
        return Page(
            items=[self._to_entity(record) for record in records],
            page=page_request.page,
            size=page_request.size,
            total=total,
        )

"""
Prisma Member Repository - read-only lookup of board owners.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from board_backend.domain.entities.member import Member
from board_backend.domain.ports.repositories import MemberRepository
from board_backend.domain.value_objects.member_id import MemberId

if TYPE_CHECKING:
    from prisma import Prisma
    from prisma.models import Member as PrismaMember


def member_to_entity(record: PrismaMember) -> Member:
    return Member(id=MemberId(record.id), nickname=record.nickname)


class PrismaMemberRepository(MemberRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_id(self, member_id: MemberId) -> Optional[Member]:
        record = await self._prisma.member.find_unique(where={"id": member_id.value})
        return member_to_entity(record) if record else None

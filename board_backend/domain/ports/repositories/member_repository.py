"""
Member Repository Port - read-only lookup into the member subsystem.
"""

from abc import ABC, abstractmethod
from typing import Optional

from board_backend.domain.entities.member import Member
from board_backend.domain.value_objects.member_id import MemberId


class MemberRepository(ABC):
    @abstractmethod
    async def get_by_id(self, member_id: MemberId) -> Optional[Member]: ...

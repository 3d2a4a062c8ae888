"""
Member Entity - owner of board posts.

Owned by the member subsystem. Boards only rely on its id (equality and
hashing go through the id) and the nickname used by keyword search.
"""

from dataclasses import dataclass, field

from board_backend.domain.value_objects.member_id import MemberId


@dataclass(eq=False)
class Member:
    id: MemberId
    nickname: str = field(default="")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Member):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

"""
MemberId Value Object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MemberId:
    value: int  # member primary key

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid member ID: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"Member ID must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

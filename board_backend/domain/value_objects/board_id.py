"""
BoardId Value Object - numeric board identity assigned by persistence.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class BoardId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid board ID: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"Board ID must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

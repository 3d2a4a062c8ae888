"""
ImageUpload Value Object - an uploaded image as received from the client.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """A part that was sent but carries no bytes."""
        return not self.content

    @property
    def size(self) -> int:
        return len(self.content)

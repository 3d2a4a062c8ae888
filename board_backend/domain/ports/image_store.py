"""
Image Store Port - Interface for durable storage of uploaded board images.
Implementation: board_backend/infrastructure/storage/local_image_store.py
"""

from abc import ABC, abstractmethod

from board_backend.domain.value_objects.image_upload import ImageUpload


class ImageStore(ABC):
    @abstractmethod
    def upload(self, image: ImageUpload) -> str:
        """Store the image and return the URL it can be served from."""
        ...

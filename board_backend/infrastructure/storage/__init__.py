"""Storage - local disk implementations."""

from board_backend.infrastructure.storage.file_storage_service import FileStorageService
from board_backend.infrastructure.storage.local_image_store import LocalImageStore

__all__ = [
    "FileStorageService",
    "LocalImageStore",
]

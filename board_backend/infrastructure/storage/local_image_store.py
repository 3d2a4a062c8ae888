"""
LocalImageStore - ImageStore port backed by the local upload directory.

Uploaded images land in {upload_path}/{image_dir}/ and the returned URL is
that path joined with "/", the same base the default image URL is built on.
"""

import logging
import os

from board_backend.domain.ports.image_store import ImageStore
from board_backend.domain.value_objects.image_upload import ImageUpload
from board_backend.infrastructure.storage.file_storage_service import FileStorageService

logger = logging.getLogger(__name__)


class LocalImageStore(ImageStore):
    def __init__(self, storage: FileStorageService, image_dir: str = "boards"):
        self._storage = storage
        self._image_dir = image_dir

    def upload(self, image: ImageUpload) -> str:
        if image.is_empty:
            raise ValueError("Cannot store an empty image")

        directory = self._storage.create_upload_dir(self._image_dir)
        file_path = self._storage.save_file(
            content=image.content,
            directory=directory,
            filename=image.filename,
        )
        url = "/".join(
            [self._storage.upload_base.rstrip("/"), self._image_dir, os.path.basename(file_path)]
        )
        logger.info(f"[ImageStore] Stored {image.filename!r} ({image.size} bytes) at {url}")
        return url

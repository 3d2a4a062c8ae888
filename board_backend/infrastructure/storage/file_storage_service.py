"""
FileStorageService - Pure disk I/O operations.

Saves uploaded bytes below the upload base directory. This is a SYNC
service - no database, no async.
"""

import os
import re
import logging
from datetime import datetime

logger = logging.getLogger(__name__)


class FileStorageService:
    """
    Pure file system operations service.

    All methods are synchronous since file I/O in Python is sync.
    """

    def __init__(self, upload_base: str):
        """
        Initialize FileStorageService.

        Args:
            upload_base: Base directory for uploads (Config.UPLOAD_PATH)
        """
        self.upload_base = upload_base

    def save_file(
        self,
        content: bytes,
        directory: str,
        filename: str,
        make_unique: bool = True,
    ) -> str:
        """
        Save file content to disk.

        Args:
            content: File content as bytes
            directory: Target directory (will be created if not exists)
            filename: Original filename
            make_unique: If True, prepend timestamp to make filename unique

        Returns:
            Path to saved file
        """
        os.makedirs(directory, exist_ok=True)

        safe_filename = self._sanitize_filename(filename)
        if make_unique:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S%f")
            safe_filename = f"{timestamp}_{safe_filename}"

        file_path = os.path.join(directory, safe_filename)

        with open(file_path, "wb") as f:
            f.write(content)

        logger.debug(f"[FileStorage] Saved file: {file_path} ({len(content)} bytes)")
        return file_path

    def create_upload_dir(self, *parts: str) -> str:
        """
        Create a directory below the upload base.

        Directory structure: {upload_base}/{part}/{part}/...
        """
        directory = os.path.join(self.upload_base, *parts)
        os.makedirs(directory, exist_ok=True)
        return directory

    def _sanitize_filename(self, filename: str) -> str:
        """Replace characters that are unsafe in file names."""
        safe = re.sub(r"[^\w\-_\. ]", "_", filename or "")
        safe = safe.strip()
        if not safe:
            safe = "unnamed_file"
        return safe

"""
Upload Storage

Strategies for staging an uploaded file while it is being extracted:
fully in memory, or in a temporary file that is removed right after.
"""

import os
import uuid
from contextlib import contextmanager
from typing import Iterator

from docanalyzer.models import UploadedFile
from docanalyzer.utils.file_helpers import clean_filename, ensure_dir, resolve_mime_type
from docanalyzer.utils.logging_utils import get_logger

logger = get_logger(__name__)

STORAGE_MEMORY = "memory"
STORAGE_DISK = "disk"


class MemoryStorage:
    """Keeps the upload as a bytes buffer for the lifetime of the request."""

    name = STORAGE_MEMORY

    @contextmanager
    def stage(self, file_storage) -> Iterator[UploadedFile]:
        content = file_storage.read()
        yield UploadedFile(
            content=content,
            mime_type=resolve_mime_type(file_storage.mimetype, file_storage.filename),
            filename=clean_filename(file_storage.filename),
        )


class TempFileStorage:
    """Saves the upload under a temp folder and deletes it when the block exits."""

    name = STORAGE_DISK

    def __init__(self, folder: str):
        self.folder = folder

    @contextmanager
    def stage(self, file_storage) -> Iterator[UploadedFile]:
        ensure_dir(self.folder)
        filename = clean_filename(file_storage.filename)
        path = os.path.join(self.folder, f"{uuid.uuid4().hex}_{filename}")
        try:
            file_storage.save(path)
            with open(path, "rb") as f:
                content = f.read()
            logger.debug(f"Staged upload at {path} ({len(content)} bytes)")
            yield UploadedFile(
                content=content,
                mime_type=resolve_mime_type(file_storage.mimetype, file_storage.filename),
                filename=filename,
                path=path,
            )
        finally:
            if os.path.exists(path):
                try:
                    os.remove(path)
                    logger.debug("Cleaned temp processing file")
                except OSError as e_clean:
                    logger.warning(f"Temp file cleanup error: {e_clean}")


def create_storage(mode: str, temp_folder: str):
    if (mode or STORAGE_MEMORY).lower() == STORAGE_DISK:
        return TempFileStorage(temp_folder)
    return MemoryStorage()

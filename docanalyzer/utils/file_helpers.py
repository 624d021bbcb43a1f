"""
File handling utilities for the Legal Document Analyzer.
"""

import os
import re
import uuid
import mimetypes
import logging
from unidecode import unidecode

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def ensure_dir(dir_path: str):
    """Ensures that a directory exists, creating it if necessary."""
    try:
        os.makedirs(dir_path, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create directory '{dir_path}': {e}")
        raise


def clean_filename(filename: str) -> str:
    """
    Cleans a filename by removing potentially problematic characters and
    ensuring it's a valid name for most filesystems.
    Uses unidecode for broader character support before basic sanitization.
    """
    if not filename:
        return f"document_{uuid.uuid4().hex[:8]}"

    ascii_filename = unidecode(filename)

    safe_filename = ascii_filename.replace(" ", "_")

    safe_filename = re.sub(r'[^\w\s.-]', '', safe_filename).strip()

    if not safe_filename:
        return f"document_{uuid.uuid4().hex[:8]}"

    max_len = 200
    if len(safe_filename) > max_len:
        name, ext = os.path.splitext(safe_filename)
        safe_filename = name[:max_len - len(ext) - 1] + ext
    return safe_filename


def resolve_mime_type(declared: str | None, filename: str | None) -> str:
    """Prefer the declared MIME type, otherwise guess from the file extension."""
    if declared and declared != DEFAULT_MIME_TYPE:
        return declared
    guessed, _ = mimetypes.guess_type(filename or "")
    return guessed or declared or DEFAULT_MIME_TYPE

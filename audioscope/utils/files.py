"""Helpers for validating audio files before decoding."""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {
    ".aif",
    ".aiff",
    ".flac",
    ".m4a",
    ".mp3",
    ".ogg",
    ".opus",
    ".wav",
    ".webm",
}


def extract_extension(filename: Optional[str | Path]) -> Optional[str]:
    if not filename:
        return None
    suffix = Path(filename).suffix.lower()
    return suffix or None


def is_supported(filename: Optional[str | Path]) -> bool:
    return extract_extension(filename) in SUPPORTED_EXTENSIONS


def file_size_bytes(path: str | Path) -> int:
    return os.path.getsize(path)


def exceeds_limit(path: str | Path, max_bytes: Optional[int]) -> bool:
    """Return True if ``path`` is larger than ``max_bytes`` (no limit when None)."""

    if max_bytes is None:
        return False
    size = file_size_bytes(path)
    if size > max_bytes:
        logger.debug("File %s is %d bytes, limit is %d", path, size, max_bytes)
        return True
    return False


def pick_filename(original_name: Optional[str | Path], default_ext: str = ".wav") -> str:
    """Return a short name for displaying the analysed file."""

    if original_name:
        name = os.path.basename(str(original_name))
        if name:
            return name
    clean_ext = default_ext if default_ext.startswith(".") else f".{default_ext}"
    return f"audio{clean_ext}"


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "extract_extension",
    "is_supported",
    "file_size_bytes",
    "exceeds_limit",
    "pick_filename",
]

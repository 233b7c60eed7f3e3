"""Helper utilities for file handling."""

from .files import (
    exceeds_limit,
    extract_extension,
    is_supported,
    pick_filename,
)

__all__ = [
    "exceeds_limit",
    "extract_extension",
    "is_supported",
    "pick_filename",
]

"""Exceptions raised by the analysis pipeline."""
from __future__ import annotations


class AnalysisError(RuntimeError):
    """Raised when audio analysis cannot be completed."""


__all__ = ["AnalysisError"]

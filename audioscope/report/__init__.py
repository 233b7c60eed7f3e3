"""Plain-text presentation of analysis results."""
from .messages import format_analysis_result, processing_error, unsupported_file

__all__ = ["format_analysis_result", "processing_error", "unsupported_file"]

"""Audio descriptor extraction."""
from .analyzer import AnalysisResult, analyze_file, analyze_signal, format_duration_seconds
from .envelope import DynamicRange, compute_dynamic_range, compute_envelope
from .errors import AnalysisError
from .keys import best_key, detect_keys, format_key_display, rank_keys
from .loader import Signal, load_signal
from .periodicity import autocorrelate
from .pitch import auto_correlate_pitch, compute_pitch_histogram
from .spectrum import BandEnergy, FrequencyAnalysis, analyze_frequency, compute_spectrum
from .tempo import estimate_bpm

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "BandEnergy",
    "DynamicRange",
    "FrequencyAnalysis",
    "Signal",
    "analyze_file",
    "analyze_signal",
    "analyze_frequency",
    "auto_correlate_pitch",
    "autocorrelate",
    "best_key",
    "compute_dynamic_range",
    "compute_envelope",
    "compute_pitch_histogram",
    "compute_spectrum",
    "detect_keys",
    "estimate_bpm",
    "format_duration_seconds",
    "format_key_display",
    "load_signal",
    "rank_keys",
]

import numpy as np
import pytest

from audioscope.audio_processing.pitch import auto_correlate_pitch, compute_pitch_histogram

SR = 44100


def _sine(freq: float, samples: int, amplitude: float = 1.0, phase: float = 0.0) -> np.ndarray:
    t = np.arange(samples) / SR
    return amplitude * np.sin(2 * np.pi * freq * t + phase)


@pytest.mark.parametrize("freq", [220.0, 440.0])
def test_detects_sine_fundamental(freq: float) -> None:
    detected = auto_correlate_pitch(_sine(freq, 2048), SR)

    assert detected is not None
    assert abs(detected - freq) < 0.02 * freq


def test_silence_has_no_pitch() -> None:
    assert auto_correlate_pitch(np.zeros(2048), SR) is None


def test_quiet_frame_is_gated() -> None:
    assert auto_correlate_pitch(_sine(440.0, 2048, amplitude=0.005), SR) is None


def test_empty_frame_has_no_pitch() -> None:
    assert auto_correlate_pitch([], SR) is None


def test_noise_has_no_pitch() -> None:
    noise = np.random.default_rng(11).uniform(-1.0, 1.0, size=2048)

    assert auto_correlate_pitch(noise, SR) is None


def test_detection_is_repeatable() -> None:
    frame = _sine(330.0, 2048, phase=0.4)

    assert auto_correlate_pitch(frame, SR) == auto_correlate_pitch(frame, SR)


def test_pitch_histogram_counts_frames() -> None:
    samples = _sine(440.0, SR * 4)

    histogram = compute_pitch_histogram(samples, SR)

    assert len(histogram) == 12
    assert histogram[9] == (SR * 4) // 2048
    assert sum(histogram) == histogram[9]


def test_pitch_histogram_skips_partial_and_silent_frames() -> None:
    samples = np.concatenate([np.zeros(4096), _sine(261.63, 2048), np.zeros(1000)])

    histogram = compute_pitch_histogram(samples, SR)

    assert histogram[0] == 1
    assert sum(histogram) == 1

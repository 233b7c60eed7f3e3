import numpy as np
import pytest

from audioscope.audio_processing.notes import round_half_up
from audioscope.audio_processing.periodicity import autocorrelate
from audioscope.audio_processing.tempo import estimate_bpm, tempo_lag_window

SR = 44100
RATE = SR / 1024


def _pulse_train(period: int, length: int) -> np.ndarray:
    envelope = np.zeros(length, dtype=float)
    envelope[::period] = 1.0
    return envelope


def test_autocorrelate_small_signal() -> None:
    assert autocorrelate([1.0, 2.0, 3.0]).tolist() == [14.0, 8.0, 3.0]
    assert autocorrelate([1.0, 2.0, 3.0], 2).tolist() == [14.0, 8.0]
    assert autocorrelate([1.0, 2.0, 3.0], 10).tolist() == [14.0, 8.0, 3.0]
    assert autocorrelate([], 5).size == 0


def test_lag_window_for_default_range() -> None:
    assert tempo_lag_window(SR, 1024) == (14, 43)


@pytest.mark.parametrize("period", [15, 20, 27, 36, 40])
def test_pulse_train_tempo_is_exact(period: int) -> None:
    envelope = _pulse_train(period, 400)

    assert estimate_bpm(envelope, SR, 1024) == round_half_up(60 * RATE / period)


def test_pulse_train_at_twenty_frames() -> None:
    assert estimate_bpm(_pulse_train(20, 400), SR, 1024) == 129


def test_integer_frame_rate_gives_round_tempo() -> None:
    # 40 envelope frames per second, one beat every 20 frames.
    assert estimate_bpm(_pulse_train(20, 400), 40960, 1024) == 120


def test_first_lag_wins_ties() -> None:
    envelope = np.zeros(30, dtype=float)
    envelope[[0, 14, 29]] = 1.0

    # Lags 14, 15 and 29 each pair up exactly one set of pulses.
    assert autocorrelate(envelope)[[14, 15, 29]].tolist() == [1.0, 1.0, 1.0]
    assert estimate_bpm(envelope, SR, 1024) == round_half_up(60 * RATE / 14)


def test_silent_envelope_is_indeterminate() -> None:
    assert estimate_bpm(np.zeros(200), SR, 1024) is None


def test_short_envelope_is_indeterminate() -> None:
    assert estimate_bpm([], SR, 1024) is None
    assert estimate_bpm([0.5], SR, 1024) is None
    assert estimate_bpm(np.ones(8), SR, 1024) is None


def test_custom_bpm_range() -> None:
    envelope = _pulse_train(20, 400)

    # 40 fps: 100..150 BPM maps to lags 16..24.
    assert estimate_bpm(envelope, 40960, 1024, bpm_min=100, bpm_max=150) == 120


def test_invalid_arguments() -> None:
    with pytest.raises(ValueError):
        estimate_bpm(np.ones(100), 0, 1024)
    with pytest.raises(ValueError):
        estimate_bpm(np.ones(100), SR, 1024, bpm_min=180, bpm_max=60)

import math

import numpy as np
import pytest

from audioscope.audio_processing.envelope import (
    DynamicRange,
    compute_dynamic_range,
    compute_envelope,
)


def test_envelope_length_and_non_negative() -> None:
    rng = np.random.default_rng(7)
    for length in (0, 1, 1023, 1024, 1025, 5000):
        samples = rng.uniform(-1.0, 1.0, size=length)
        envelope = compute_envelope(samples, 1024)

        assert len(envelope) == math.ceil(length / 1024)
        assert np.all(envelope >= 0)


def test_empty_buffer_gives_empty_envelope() -> None:
    assert compute_envelope([]).size == 0


def test_short_tail_uses_fixed_divisor_by_default() -> None:
    samples = np.full(2500, 0.5)

    envelope = compute_envelope(samples, 1024)

    assert envelope[0] == pytest.approx(0.5)
    assert envelope[1] == pytest.approx(0.5)
    assert envelope[2] == pytest.approx(0.5 * math.sqrt(452 / 1024))


def test_short_tail_with_actual_sample_count() -> None:
    samples = np.full(2500, 0.5)

    envelope = compute_envelope(samples, 1024, fixed_divisor=False)

    assert envelope == pytest.approx([0.5, 0.5, 0.5])


def test_invalid_frame_size() -> None:
    with pytest.raises(ValueError):
        compute_envelope([0.1, 0.2], 0)


def test_dynamic_range_of_known_buffer() -> None:
    result = compute_dynamic_range([-0.5, 0.3, 0.9, -0.9])

    assert result is not None
    assert result.min == pytest.approx(-0.9)
    assert result.max == pytest.approx(0.9)
    assert result.range == pytest.approx(1.8)


def test_dynamic_range_of_silence() -> None:
    assert compute_dynamic_range(np.zeros(8192)) == DynamicRange(0.0, 0.0, 0.0)


def test_dynamic_range_of_empty_buffer_is_indeterminate() -> None:
    assert compute_dynamic_range([]) is None

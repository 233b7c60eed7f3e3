import numpy as np
import pytest

from audioscope.audio_processing.keys import (
    KEY_NAMES,
    best_key,
    detect_keys,
    format_key_display,
    rank_keys,
)
from audioscope.audio_processing.profiles import KRUMHANSL_MAJOR, KRUMHANSL_MINOR, NOTES_SHARP


def _rotated(profile: list[float], tonic: int) -> list[float]:
    return [profile[(12 + j - tonic) % 12] for j in range(12)]


@pytest.mark.parametrize("tonic", range(12))
def test_major_profile_histogram_scores_its_tonic_highest(tonic: int) -> None:
    scores = detect_keys(_rotated(KRUMHANSL_MAJOR, tonic))
    expected = f"{NOTES_SHARP[tonic]} Major"

    top = scores[expected]
    assert all(value < top for name, value in scores.items() if name != expected)
    assert best_key(scores) == expected


@pytest.mark.parametrize("tonic", range(12))
def test_minor_profile_histogram_scores_its_tonic_highest(tonic: int) -> None:
    scores = detect_keys(_rotated(KRUMHANSL_MINOR, tonic))

    assert best_key(scores) == f"{NOTES_SHARP[tonic]} Minor"


def test_scores_cover_all_keys_and_sum_to_hundred() -> None:
    scores = detect_keys([3, 0, 1, 0, 2, 1, 0, 2, 0, 1, 0, 1])

    assert list(scores) == KEY_NAMES
    assert len(scores) == 24
    assert sum(scores.values()) == pytest.approx(100.0)
    assert all(value >= 0 for value in scores.values())


def test_scaling_histogram_does_not_change_scores() -> None:
    histogram = np.array([3, 0, 1, 0, 2, 1, 0, 2, 0, 1, 0, 1], dtype=float)

    assert detect_keys(histogram) == pytest.approx(detect_keys(histogram * 17.5))


def test_empty_histogram_gives_equal_zero_scores() -> None:
    scores = detect_keys([0.0] * 12)

    assert len(scores) == 24
    assert set(scores.values()) == {0.0}
    assert best_key(scores) is None


def test_wrong_histogram_length() -> None:
    with pytest.raises(ValueError):
        detect_keys([1.0] * 11)


def test_rank_keys_keeps_order_for_ties() -> None:
    ranked = rank_keys({"C Major": 10.0, "G Major": 30.0, "A Minor": 10.0, "E Minor": 30.0})

    assert [name for name, _ in ranked] == ["G Major", "E Minor", "C Major", "A Minor"]


def test_key_display_with_enharmonic() -> None:
    assert format_key_display("A# Minor") == "A# Minor (Bb Minor)"
    assert format_key_display("F# Major") == "F# Major (Gb Major)"
    assert format_key_display("C Major") == "C Major"

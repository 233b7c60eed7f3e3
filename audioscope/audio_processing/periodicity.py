"""Product-sum autocorrelation used to find energy periodicity."""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np


def autocorrelate(signal: Sequence[float] | np.ndarray, max_lag: Optional[int] = None) -> np.ndarray:
    """Return ``ac[lag] = sum(signal[i] * signal[i + lag])`` for ``lag < max_lag``.

    Sums are not divided by the number of overlapping terms, so long lags
    naturally score lower; callers bound the lag range they search.
    ``max_lag`` defaults to, and is clamped at, ``len(signal)``.
    """

    data = np.asarray(signal, dtype=float)
    n = data.size
    limit = n if max_lag is None else max(0, min(int(max_lag), n))

    if limit == 0:
        return np.zeros(0, dtype=float)
    full = np.correlate(data, data, mode="full")
    return full[n - 1 : n - 1 + limit]


__all__ = ["autocorrelate"]

"""Local maxima in an ordered score series.

Each sample is compared against its immediate neighbours (previous, current,
next):
    - first sample: a peak if >= its successor
    - last sample:  a peak if >= its predecessor
    - interior:     a peak if >= its predecessor and > its successor

A plateau is therefore reported once, on its last sample (the one right
before the value drops). Separate maxima with equal values are all reported.
"""

from __future__ import annotations

from typing import List, Sequence

from .errors import EmptySeriesError


def local_maxima_indices(sequence: Sequence[float]) -> List[int]:
    """Positions of the local maxima of *sequence*, in order."""
    n = len(sequence)
    if n == 0:
        raise EmptySeriesError("Cannot find peaks in an empty series")
    if n == 1:
        return [0]

    indices: List[int] = []
    for i in range(n):
        curr = sequence[i]
        if i == 0:
            is_peak = curr >= sequence[1]
        elif i == n - 1:
            is_peak = curr >= sequence[i - 1]
        else:
            is_peak = curr >= sequence[i - 1] and curr > sequence[i + 1]
        if is_peak:
            indices.append(i)
    return indices


def local_maxima(sequence: Sequence[float]) -> List[float]:
    """Values of the local maxima of *sequence*, in encounter order."""
    return [sequence[i] for i in local_maxima_indices(sequence)]

"""Errors raised by the scoring pipeline.

These are data-quality problems with a recording, not system failures. The
caller can record more frames or relax thresholds and try again.
"""

from __future__ import annotations

from typing import List, Optional


class ScoringError(ValueError):
    """Base class for recordings that cannot be scored."""


class EmptySeriesError(ScoringError):
    """A score series (or recording) with no samples."""


class InsufficientAttemptsError(ScoringError):
    """No detected peak reached the phase threshold."""

    def __init__(self, phase: str, threshold: float, peaks: Optional[List[float]] = None):
        self.phase = phase
        self.threshold = float(threshold)
        self.peaks = list(peaks or [])
        super().__init__(
            f"Insufficient qualifying attempts for the {phase} phase: "
            f"{len(self.peaks)} peak(s) detected, none >= {self.threshold:g}"
        )

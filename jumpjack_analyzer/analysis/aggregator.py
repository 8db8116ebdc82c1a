"""Reduce a phase's score series to one feedback angle.

Steps for a single phase:
    1. find the local maxima of the series (each one is an attempt at the pose)
    2. keep peaks at or above the phase threshold (the rest are transition noise)
    3. average the survivors
    4. map the average back to an arm angle with the phase's inverse
    5. top/bottom report the distance from ``max_hand_angle``; middle reports
       the angle off level directly
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from ..config.scoring_config import ScoringConfig
from .errors import InsufficientAttemptsError
from .peaks import local_maxima
from .phase_scoring import Phase, inverse_score

logger = logging.getLogger(__name__)


@dataclass
class PhaseResult:
    """Aggregated outcome for one phase.

    ``feedback_angle`` is None only when the phase could not be scored, in
    which case ``error`` says why.
    """
    phase: Phase
    threshold: float
    feedback_angle: Optional[float] = None
    mean_score: Optional[float] = None
    peaks: List[float] = field(default_factory=list)
    qualifying_peaks: List[float] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.feedback_angle is not None


def qualifying_peaks(peaks: Sequence[float], threshold: float) -> List[float]:
    """Peaks at or above *threshold*."""
    return [float(p) for p in peaks if p >= threshold]


def feedback_angle(phase: Phase, mean_score: float, cfg: ScoringConfig) -> float:
    """Degrees away from the ideal pose for *phase*, given an averaged peak score."""
    angle = inverse_score(phase, mean_score, cfg)
    if phase is Phase.MIDDLE:
        return angle
    return abs(cfg.max_hand_angle - angle)


def aggregate_phase(
    series: Sequence[float],
    phase: Phase,
    threshold: float,
    cfg: Optional[ScoringConfig] = None,
) -> PhaseResult:
    """
    Turn one phase's score series into a feedback angle.

    Args:
        series: Scores for *phase*, one per frame, in recording order
        phase: Phase the series belongs to
        threshold: Minimum peak score counted as a real attempt
        cfg: Scoring configuration (for ``max_hand_angle``)

    Returns:
        PhaseResult with the feedback angle set

    Raises:
        EmptySeriesError: if *series* is empty
        InsufficientAttemptsError: if no peak reaches *threshold*
    """
    cfg = cfg or ScoringConfig()

    peaks = [float(p) for p in local_maxima(list(series))]
    kept = qualifying_peaks(peaks, threshold)
    logger.debug(
        "%s: %d peak(s), %d >= %.1f", phase.value, len(peaks), len(kept), threshold
    )
    if not kept:
        raise InsufficientAttemptsError(phase.value, threshold, peaks)

    mean_score = float(np.mean(kept))
    return PhaseResult(
        phase=phase,
        threshold=float(threshold),
        feedback_angle=feedback_angle(phase, mean_score, cfg),
        mean_score=mean_score,
        peaks=peaks,
        qualifying_peaks=kept,
    )

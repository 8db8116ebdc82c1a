"""Per-frame jumping jack phase scores.

Each frame gets three scores, one per reference phase:
    top     arms raised, both arm angles toward +90
    middle  neutral "T" pose, both arm angles toward 0
    bottom  arms lowered, both arm angles toward -90

Scores are squared arm angles, so larger is closer to the phase. Top and
bottom share the same magnitude and use the sign to tell them apart.

The inverse functions map a score back to a single arm angle for feedback.
They assume both arms had the same angle magnitude, so for asymmetric poses
they return a blend of the two, not either arm's real angle. They are lossy
one-way conversions, not exact inverses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

import numpy as np

from ..config.scoring_config import ScoringConfig
from ..core.skeleton import Frame
from .geometry import arm_angles

logger = logging.getLogger(__name__)

_DEFAULT_SCORING = ScoringConfig()


class Phase(Enum):
    """Reference poses of a jumping jack cycle."""
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class PhaseScores:
    """Scores of one frame against each phase."""
    top: float
    middle: float
    bottom: float

    def for_phase(self, phase: Phase) -> float:
        return getattr(self, phase.value)


@dataclass(frozen=True)
class ScoreSeriesSet:
    """Per-phase score series for a whole recording, in recording order."""
    top: np.ndarray
    middle: np.ndarray
    bottom: np.ndarray
    timestamps: np.ndarray

    def for_phase(self, phase: Phase) -> np.ndarray:
        return getattr(self, phase.value)

    def __len__(self) -> int:
        return int(len(self.timestamps))


# ── Scores ───────────────────────────────────────────────────────────

def score_middle(frame: Frame, cfg: ScoringConfig = _DEFAULT_SCORING) -> float:
    """Highest when both arms are level. Negative once the arms are, on
    aggregate, further off level than ``max_hand_angle``."""
    right, left = arm_angles(frame.skeleton)
    return float(cfg.max_deviation - (right ** 2 + left ** 2))


def score_top(frame: Frame) -> float:
    """Highest when both arms point straight up.

    Negated when both arms are below shoulder height.
    """
    right, left = arm_angles(frame.skeleton)
    score = right ** 2 + left ** 2
    if right < 0.0 and left < 0.0:
        return float(-score)
    return float(score)


def score_bottom(frame: Frame) -> float:
    """Highest when both arms point straight down.

    Negated when both arms are above shoulder height.
    """
    right, left = arm_angles(frame.skeleton)
    score = right ** 2 + left ** 2
    if right > 0.0 and left > 0.0:
        return float(-score)
    return float(score)


def score_frame(frame: Frame, cfg: ScoringConfig = _DEFAULT_SCORING) -> PhaseScores:
    return PhaseScores(
        top=score_top(frame),
        middle=score_middle(frame, cfg),
        bottom=score_bottom(frame),
    )


def score_recording(
    frames: Iterable[Frame],
    cfg: ScoringConfig = _DEFAULT_SCORING,
) -> ScoreSeriesSet:
    """Score every frame and split the results into one series per phase."""
    frames = tuple(frames)
    scores = [score_frame(f, cfg) for f in frames]
    logger.debug("Scored %d frames", len(scores))
    return ScoreSeriesSet(
        top=np.array([s.top for s in scores], dtype=np.float64),
        middle=np.array([s.middle for s in scores], dtype=np.float64),
        bottom=np.array([s.bottom for s in scores], dtype=np.float64),
        timestamps=np.array([f.timestamp for f in frames], dtype=np.int64),
    )


# ── Inverses (score -> equivalent arm angle) ─────────────────────────

def inverse_middle(score: float, cfg: ScoringConfig = _DEFAULT_SCORING) -> float:
    """Arm angle off level that, applied to both arms, gives *score*."""
    return float(np.sqrt(abs((score - cfg.max_deviation) / -2.0)))


def inverse_top(score: float) -> float:
    """Arm angle magnitude that, applied to both arms, gives *score*."""
    return float(np.sqrt(abs(score / 2.0)))


def inverse_bottom(score: float) -> float:
    """Arm angle magnitude that, applied to both arms, gives *score*."""
    return float(np.sqrt(abs(score / 2.0)))


def inverse_score(phase: Phase, score: float, cfg: ScoringConfig = _DEFAULT_SCORING) -> float:
    if phase is Phase.MIDDLE:
        return inverse_middle(score, cfg)
    if phase is Phase.TOP:
        return inverse_top(score)
    return inverse_bottom(score)

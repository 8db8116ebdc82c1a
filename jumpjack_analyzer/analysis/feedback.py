"""Coaching messages from feedback angles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .aggregator import PhaseResult
from .phase_scoring import Phase


class Status(Enum):
    """Quality status for a phase."""
    UNKNOWN = "unknown"
    GOOD = "good"
    BAD = "bad"


# Correction wording per phase; {angle} is the rounded feedback angle.
CORRECTION_TEMPLATES = {
    Phase.TOP: "Raise your arms {angle} degrees higher at the top",
    Phase.MIDDLE: "Keep your arms level: they trailed horizontal by {angle} degrees",
    Phase.BOTTOM: "Bring your arms {angle} degrees lower at the bottom",
}

GOOD_MESSAGES = {
    Phase.TOP: "Great reach at the top",
    Phase.MIDDLE: "Nice level arms through the middle",
    Phase.BOTTOM: "Good full swing at the bottom",
}


@dataclass(frozen=True)
class FeedbackMessage:
    phase: Phase
    status: Status
    message: str
    angle: Optional[float] = None


def format_feedback(phase: Phase, angle: float, tolerance: float = 5.0) -> FeedbackMessage:
    """Pass when *angle* is under *tolerance*, otherwise a correction."""
    if angle < tolerance:
        return FeedbackMessage(phase, Status.GOOD, GOOD_MESSAGES[phase], float(angle))
    text = CORRECTION_TEMPLATES[phase].format(angle=int(round(angle)))
    return FeedbackMessage(phase, Status.BAD, text, float(angle))


def feedback_for_result(result: PhaseResult, tolerance: float = 5.0) -> FeedbackMessage:
    if not result.ok:
        return FeedbackMessage(
            result.phase,
            Status.UNKNOWN,
            f"Not enough clear {result.phase.value} positions to score. Record a few more reps.",
        )
    return format_feedback(result.phase, result.feedback_angle, tolerance)

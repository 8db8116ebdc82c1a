"""Jumping jack scoring configuration.

All angles, thresholds and tolerances are centralised here so that tuning the
scoring never requires touching analysis code.

Coordinate convention (phone held upright, filming the subject):
    +X to the subject's right on screen, +Y up, +Z toward the camera.
"""

from __future__ import annotations
from dataclasses import dataclass, field


# =====================================================================
# Pose scoring
# =====================================================================

@dataclass(frozen=True)
class ScoringConfig:
    """Reference angles for the three jumping jack phases."""

    # Arm elevation (degrees above/below shoulder height) treated as the
    # ideal extreme for the top and bottom phases.
    max_hand_angle: float = 60.0

    @property
    def max_deviation(self) -> float:
        """Best possible middle-phase score (both arms level)."""
        return 2.0 * self.max_hand_angle ** 2


# =====================================================================
# Peak qualification
# =====================================================================

@dataclass(frozen=True)
class ThresholdConfig:
    """Minimum peak score for a peak to count as a genuine attempt.

    Peaks below these values are transition noise between phases.
    """

    top: float = 3200.0      # ~40 deg per arm
    middle: float = 6000.0   # ~24 deg per arm off level
    bottom: float = 3200.0

    def for_phase(self, phase: str) -> float:
        return float(getattr(self, phase))


# =====================================================================
# Feedback
# =====================================================================

@dataclass(frozen=True)
class FeedbackConfig:
    """Pass/fail tolerance for feedback messages."""

    tolerance_deg: float = 5.0


# =====================================================================
# Master Configuration
# =====================================================================

@dataclass(frozen=True)
class AnalyzerConfig:
    """Top-level configuration aggregating all sub-configs."""

    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    feedback: FeedbackConfig = field(default_factory=FeedbackConfig)


# Default configuration instance
DEFAULT_CONFIG = AnalyzerConfig()

"""Analysis module: angles, phase scores, peaks and feedback."""

from .errors import ScoringError, EmptySeriesError, InsufficientAttemptsError
from .geometry import joint_angle, arm_angles, display_angles, format_degrees
from .phase_scoring import (
    Phase,
    PhaseScores,
    ScoreSeriesSet,
    score_top,
    score_middle,
    score_bottom,
    score_frame,
    score_recording,
    inverse_top,
    inverse_middle,
    inverse_bottom,
    inverse_score,
)
from .peaks import local_maxima, local_maxima_indices
from .aggregator import PhaseResult, aggregate_phase, feedback_angle, qualifying_peaks
from .feedback import Status, FeedbackMessage, format_feedback, feedback_for_result
from .analyzer import JumpingJackAnalyzer, JumpingJackReport

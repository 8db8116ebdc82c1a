"""End-to-end scoring of a jumping jack recording."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ..config.scoring_config import AnalyzerConfig, DEFAULT_CONFIG
from ..core.skeleton import Frame
from .aggregator import PhaseResult, aggregate_phase
from .errors import EmptySeriesError, InsufficientAttemptsError
from .feedback import FeedbackMessage, feedback_for_result
from .phase_scoring import Phase, ScoreSeriesSet, score_recording

logger = logging.getLogger(__name__)


@dataclass
class JumpingJackReport:
    """Per-phase results plus the raw score series for diagnostics."""
    scores: ScoreSeriesSet
    results: Dict[Phase, PhaseResult] = field(default_factory=dict)
    feedback: Dict[Phase, FeedbackMessage] = field(default_factory=dict)

    def feedback_angle(self, phase: Phase) -> Optional[float]:
        return self.results[phase].feedback_angle

    @property
    def num_frames(self) -> int:
        return len(self.scores)


class JumpingJackAnalyzer:
    """Score a finished recording and produce feedback for every phase."""

    def __init__(self, cfg: AnalyzerConfig = DEFAULT_CONFIG):
        self.cfg = cfg

    def analyze_phase(self, scores: ScoreSeriesSet, phase: Phase) -> PhaseResult:
        """Aggregate one phase; a phase without qualifying peaks is reported, not raised."""
        threshold = self.cfg.thresholds.for_phase(phase.value)
        try:
            return aggregate_phase(scores.for_phase(phase), phase, threshold, self.cfg.scoring)
        except InsufficientAttemptsError as e:
            logger.warning("%s", e)
            return PhaseResult(phase=phase, threshold=threshold, peaks=e.peaks, error=str(e))

    def analyze(self, frames: Iterable[Frame]) -> JumpingJackReport:
        """
        Run the full pipeline over a recording.

        Args:
            frames: Recorded frames in capture order

        Returns:
            JumpingJackReport with one result and one message per phase

        Raises:
            EmptySeriesError: if the recording has no frames
        """
        scores = score_recording(frames, self.cfg.scoring)
        if len(scores) == 0:
            raise EmptySeriesError("Recording has no frames to score")

        report = JumpingJackReport(scores=scores)
        for phase in Phase:
            result = self.analyze_phase(scores, phase)
            report.results[phase] = result
            report.feedback[phase] = feedback_for_result(result, self.cfg.feedback.tolerance_deg)

        logger.info(
            "Scored %d frames: %s",
            len(scores),
            ", ".join(
                f"{p.value}={r.feedback_angle:.1f}" if r.ok else f"{p.value}=n/a"
                for p, r in report.results.items()
            ),
        )
        return report

from __future__ import annotations

from jumpjack_analyzer.analysis.aggregator import PhaseResult
from jumpjack_analyzer.analysis.feedback import (
    Status,
    feedback_for_result,
    format_feedback,
)
from jumpjack_analyzer.analysis.phase_scoring import Phase


class TestFormatFeedback:
    def test_below_tolerance_passes(self):
        msg = format_feedback(Phase.TOP, 4.9)
        assert msg.status == Status.GOOD
        assert msg.angle == 4.9

    def test_at_tolerance_fails(self):
        msg = format_feedback(Phase.TOP, 5.0)
        assert msg.status == Status.BAD
        assert msg.message == "Raise your arms 5 degrees higher at the top"

    def test_angle_is_rounded(self):
        msg = format_feedback(Phase.MIDDLE, 12.6)
        assert msg.message == "Keep your arms level: they trailed horizontal by 13 degrees"

    def test_bottom_wording(self):
        msg = format_feedback(Phase.BOTTOM, 21.2)
        assert msg.message == "Bring your arms 21 degrees lower at the bottom"

    def test_custom_tolerance(self):
        assert format_feedback(Phase.BOTTOM, 8.0, tolerance=10.0).status == Status.GOOD
        assert format_feedback(Phase.BOTTOM, 8.0, tolerance=2.0).status == Status.BAD


class TestFeedbackForResult:
    def test_scored_result(self):
        result = PhaseResult(phase=Phase.TOP, threshold=3200.0, feedback_angle=2.0)
        msg = feedback_for_result(result)
        assert msg.status == Status.GOOD
        assert msg.phase is Phase.TOP

    def test_unscored_result(self):
        result = PhaseResult(phase=Phase.BOTTOM, threshold=3200.0, error="no attempts")
        msg = feedback_for_result(result)
        assert msg.status == Status.UNKNOWN
        assert msg.angle is None
        assert "bottom" in msg.message

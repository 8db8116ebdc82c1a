from __future__ import annotations

import math

import pytest

from jumpjack_analyzer.analysis.aggregator import (
    aggregate_phase,
    feedback_angle,
    qualifying_peaks,
)
from jumpjack_analyzer.analysis.errors import EmptySeriesError, InsufficientAttemptsError
from jumpjack_analyzer.analysis.phase_scoring import Phase, inverse_middle
from jumpjack_analyzer.config.scoring_config import ScoringConfig


SERIES = [100.0, 6500.0, 200.0, 5800.0, 50.0]


class TestAggregatePhase:
    def test_middle_peaks_averaged(self):
        result = aggregate_phase(SERIES, Phase.MIDDLE, threshold=5800.0)
        assert result.peaks == [6500.0, 5800.0]
        assert result.qualifying_peaks == [6500.0, 5800.0]
        assert result.mean_score == pytest.approx(6150.0)
        assert result.feedback_angle == pytest.approx(inverse_middle(6150.0))
        assert result.ok
        assert result.error is None

    def test_threshold_is_inclusive_and_filters_lower_peaks(self):
        result = aggregate_phase(SERIES, Phase.MIDDLE, threshold=6000.0)
        assert result.peaks == [6500.0, 5800.0]
        assert result.qualifying_peaks == [6500.0]
        assert result.mean_score == pytest.approx(6500.0)

        exact = aggregate_phase(SERIES, Phase.MIDDLE, threshold=6500.0)
        assert exact.qualifying_peaks == [6500.0]

    def test_no_qualifying_peak_raises(self):
        with pytest.raises(InsufficientAttemptsError) as excinfo:
            aggregate_phase(SERIES, Phase.MIDDLE, threshold=7000.0)
        err = excinfo.value
        assert err.phase == "middle"
        assert err.threshold == 7000.0
        assert err.peaks == [6500.0, 5800.0]
        assert "Insufficient qualifying attempts" in str(err)

    def test_empty_series_raises(self):
        with pytest.raises(EmptySeriesError):
            aggregate_phase([], Phase.TOP, threshold=0.0)

    def test_top_feedback_is_distance_from_max_hand_angle(self):
        # mean 2 * 50^2 -> 50 degrees -> 10 short of 60
        result = aggregate_phase([0.0, 5000.0, 0.0, 5000.0, 0.0], Phase.TOP, threshold=3200.0)
        assert result.feedback_angle == pytest.approx(10.0)

    def test_top_feedback_overshoot_is_positive(self):
        # 70 degrees overshoots 60 by 10
        result = aggregate_phase([0.0, 9800.0, 0.0], Phase.TOP, threshold=3200.0)
        assert result.feedback_angle == pytest.approx(10.0)

    def test_bottom_feedback(self):
        result = aggregate_phase([0.0, 1800.0, 0.0], Phase.BOTTOM, threshold=1000.0)
        assert result.feedback_angle == pytest.approx(30.0)

    def test_uses_configured_max_hand_angle(self):
        cfg = ScoringConfig(max_hand_angle=50.0)
        result = aggregate_phase([0.0, 5000.0, 0.0], Phase.TOP, threshold=0.0, cfg=cfg)
        assert result.feedback_angle == pytest.approx(0.0)

    def test_result_carries_threshold_and_phase(self):
        result = aggregate_phase([7200.0], Phase.MIDDLE, threshold=6000.0)
        assert result.phase is Phase.MIDDLE
        assert result.threshold == 6000.0
        assert result.feedback_angle == pytest.approx(0.0)


class TestHelpers:
    def test_qualifying_peaks(self):
        assert qualifying_peaks([1.0, 5.0, 3.0, 5.0], 3.0) == [5.0, 3.0, 5.0]
        assert qualifying_peaks([], 3.0) == []

    def test_feedback_angle_range(self):
        cfg = ScoringConfig()
        for phase in Phase:
            for score in (-9000.0, -7200.0, 0.0, 3200.0, 7200.0):
                angle = feedback_angle(phase, score, cfg)
                assert 0.0 <= angle <= 90.0
                assert not math.isnan(angle)

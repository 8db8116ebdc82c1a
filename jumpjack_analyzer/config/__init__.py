"""Configuration module for the jumping jack analyzer."""

from .scoring_config import (
    AnalyzerConfig,
    ScoringConfig,
    ThresholdConfig,
    FeedbackConfig,
    DEFAULT_CONFIG,
)
from .joints import (
    JOINTS,
    JOINT_NAMES,
    NUM_JOINTS,
    DISPLAY_SEGMENTS,
)

"""Jumping jack form analysis from 3D skeleton recordings."""

__version__ = "0.1.0"

from .core import Point3D, Plane, Skeleton, Frame, RecordingSession
from .analysis import JumpingJackAnalyzer, JumpingJackReport, Phase
from .config import AnalyzerConfig, DEFAULT_CONFIG

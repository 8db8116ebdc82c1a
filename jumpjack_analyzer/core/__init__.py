"""Core data types and the recording buffer."""

from .skeleton import Point3D, Plane, Skeleton, Frame
from .recording import RecordingSession

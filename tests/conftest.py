import sys
from pathlib import Path

import numpy as np
import pytest


# Ensure the repo root is importable when tests are run without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jumpjack_analyzer.core.skeleton import Frame, Point3D, Skeleton  # noqa: E402


ARM_LENGTH_M = 0.6


def _hand_at(shoulder: Point3D, angle_deg: float, side: float) -> Point3D:
    """Hand position at *angle_deg* elevation, reaching out sideways (side=+1 right, -1 left)."""
    rad = np.radians(angle_deg)
    return Point3D(
        x=shoulder.x + side * ARM_LENGTH_M * float(np.cos(rad)),
        y=shoulder.y + ARM_LENGTH_M * float(np.sin(rad)),
        z=shoulder.z,
    )


def _make_skeleton(right_angle: float = 0.0, left_angle: float = 0.0) -> Skeleton:
    """Standing subject with both arms at the given elevations (degrees)."""
    r_sh = Point3D(0.2, 1.45, 0.0)
    l_sh = Point3D(-0.2, 1.45, 0.0)
    return Skeleton(
        right_hand=_hand_at(r_sh, right_angle, 1.0),
        left_hand=_hand_at(l_sh, left_angle, -1.0),
        right_foot=Point3D(0.15, 0.05, 0.0),
        left_foot=Point3D(-0.15, 0.05, 0.0),
        right_shoulder=r_sh,
        left_shoulder=l_sh,
        hip=Point3D(0.0, 0.95, 0.0),
        head=Point3D(0.0, 1.7, 0.0),
    )


@pytest.fixture
def make_frame():
    """Factory: make_frame(right_angle, left_angle=None, timestamp=0)."""
    def _factory(right_angle: float = 0.0, left_angle=None, timestamp: int = 0) -> Frame:
        if left_angle is None:
            left_angle = right_angle
        return Frame(skeleton=_make_skeleton(right_angle, left_angle), timestamp=timestamp)
    return _factory


@pytest.fixture
def make_recording(make_frame):
    """Factory: one frame per arm angle, timestamps 0, 1, 2, ..."""
    def _factory(angles):
        return [make_frame(a, timestamp=i) for i, a in enumerate(angles)]
    return _factory

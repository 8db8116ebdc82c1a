"""Angle extraction from 3D joint positions.

All functions are pure and operate on a single skeleton. Angles are signed
elevations: the angle between the segment origin->end point and a reference
plane, positive on the plane's positive side.

Convention: phone held upright filming the subject, +X right, +Y up,
+Z toward the camera. In the ``XZ`` plane an arm at shoulder height reads 0,
straight up reads +90 and straight down reads -90.
"""

from __future__ import annotations

import math
from typing import Dict, Tuple

import numpy as np

from ..config.joints import DISPLAY_SEGMENTS
from ..core.skeleton import Plane, Point3D, Skeleton


# ── Signed plane angle ───────────────────────────────────────────────

def joint_angle(
    end_point: Point3D,
    origin: Point3D,
    plane: Plane = Plane.XZ,
    *,
    yz_sign_axis: str = "z",
) -> float:
    """Signed angle (degrees) of origin->end_point relative to *plane*.

    Always in [-90, 90]; exactly ±90 only when the in-plane length is zero,
    and 0 for zero displacement.

    ``YZ`` takes its sign from the z delta by default, which is also one of
    its in-plane axes. Pass ``yz_sign_axis="x"`` to sign it by the x delta
    instead.
    """
    dx, dy, dz = end_point - origin

    if plane is Plane.XY:
        tangent = np.hypot(dx, dy)
        signed = dz
    elif plane is Plane.XZ:
        tangent = np.hypot(dx, dz)
        signed = dy
    elif plane is Plane.YZ:
        tangent = np.hypot(dy, dz)
        if yz_sign_axis == "z":
            signed = dz
        elif yz_sign_axis == "x":
            signed = dx
        else:
            raise ValueError(f"yz_sign_axis must be 'z' or 'x', got {yz_sign_axis!r}")
    else:
        raise ValueError(f"Unknown plane: {plane!r}")

    return float(np.degrees(np.arctan2(signed, tangent)))


def arm_angles(skeleton: Skeleton) -> Tuple[float, float]:
    """(right, left) hand elevation relative to the matching shoulder."""
    right = joint_angle(skeleton.right_hand, skeleton.right_shoulder, Plane.XZ)
    left = joint_angle(skeleton.left_hand, skeleton.left_shoulder, Plane.XZ)
    return right, left


# ── Display readouts ─────────────────────────────────────────────────

def display_angles(skeleton: Skeleton) -> Dict[str, float]:
    """Hand and foot angles shown alongside the live capture.

    Foot angles are informational only; scoring uses the arms.
    """
    return {
        label: joint_angle(skeleton.joint(end), skeleton.joint(origin), Plane.XZ)
        for label, (end, origin) in DISPLAY_SEGMENTS.items()
    }


def format_degrees(deg: float) -> str:
    """Truncate to one decimal (toward -inf) for display, e.g. ``"-12.4 degrees"``."""
    return f"{math.floor(10.0 * deg) / 10.0} degrees"

"""Skeleton snapshot types shared across the pipeline.

A ``Frame`` is one timestamped snapshot of the eight tracked joints. The
capture layer builds frames; everything downstream only reads them. The dict
form produced by ``to_dict`` matches the recording export field for field:

    {"skeleton": {"rightHand": {"x": .., "y": .., "z": ..}, ...}, "timestamp": 12}
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict

import numpy as np

from ..config.joints import JOINTS, JOINT_NAMES


class Plane(Enum):
    """Reference plane for signed angles.

    The two named axes form the horizontal reference; the remaining axis
    decides the sign.
    """
    XY = "xy"
    XZ = "xz"
    YZ = "yz"


@dataclass(frozen=True)
class Point3D:
    """A joint position in sensor units (meters)."""
    x: float
    y: float
    z: float

    def __sub__(self, other: "Point3D") -> np.ndarray:
        return self.as_array() - other.as_array()

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_dict(self) -> Dict[str, float]:
        return {"x": float(self.x), "y": float(self.y), "z": float(self.z)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Point3D":
        try:
            coords = [float(data[axis]) for axis in ("x", "y", "z")]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Point needs numeric x, y, z: {data!r}") from e
        if not all(math.isfinite(c) for c in coords):
            raise ValueError(f"Point coordinates must be finite: {data!r}")
        return cls(*coords)


@dataclass(frozen=True)
class Skeleton:
    """All eight tracked joints. No joint is optional."""
    right_hand: Point3D
    left_hand: Point3D
    right_foot: Point3D
    left_foot: Point3D
    right_shoulder: Point3D
    left_shoulder: Point3D
    hip: Point3D
    head: Point3D

    def joint(self, name: str) -> Point3D:
        """Look up a joint by attribute name (``right_hand``) or export key (``rightHand``)."""
        attr = name if name in JOINTS else JOINT_NAMES.get(name)
        if attr is None:
            raise KeyError(f"Unknown joint: {name}")
        return getattr(self, attr)

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {JOINTS[f.name]: getattr(self, f.name).to_dict() for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skeleton":
        if not isinstance(data, dict):
            raise ValueError(f"Skeleton must be a mapping, got {type(data).__name__}")
        missing = [key for key in JOINTS.values() if key not in data]
        if missing:
            raise ValueError(f"Skeleton is missing joints: {', '.join(missing)}")
        return cls(**{attr: Point3D.from_dict(data[key]) for attr, key in JOINTS.items()})


@dataclass(frozen=True)
class Frame:
    """One timestamped skeleton snapshot.

    ``timestamp`` is the capture layer's counter; only its ordering matters.
    """
    skeleton: Skeleton
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {"skeleton": self.skeleton.to_dict(), "timestamp": int(self.timestamp)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Frame":
        if not isinstance(data, dict) or "skeleton" not in data or "timestamp" not in data:
            raise ValueError("Frame needs 'skeleton' and 'timestamp' fields")
        timestamp = data["timestamp"]
        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise ValueError(f"Frame timestamp must be an integer: {timestamp!r}")
        return cls(skeleton=Skeleton.from_dict(data["skeleton"]), timestamp=timestamp)

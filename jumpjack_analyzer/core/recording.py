"""Recording buffer for captured frames."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .skeleton import Frame

logger = logging.getLogger(__name__)


class RecordingSession:
    """
    Append-only frame buffer owned by one capture session.

    Frames are only kept while recording. Starting a new recording discards
    the previous frames. Scoring reads ``frames``, which is a tuple snapshot,
    so later appends can never change what a scorer is iterating over.
    """

    def __init__(self):
        self.is_recording = False
        self._frames: List[Frame] = []
        self._last_timestamp: Optional[int] = None

    def start(self):
        """Clear the buffer and begin accepting frames."""
        self._frames.clear()
        self._last_timestamp = None
        self.is_recording = True
        logger.debug("Recording started")

    def stop(self) -> Tuple[Frame, ...]:
        """Stop accepting frames and return the final recording."""
        self.is_recording = False
        logger.info("Recording stopped with %d frames", len(self._frames))
        return self.frames

    def add(self, frame: Frame) -> bool:
        """
        Append a frame if a recording is in progress.

        Args:
            frame: Frame from the capture layer

        Returns:
            True if the frame was recorded, False when not recording
        """
        if not self.is_recording:
            return False

        if self._last_timestamp is not None and frame.timestamp < self._last_timestamp:
            raise ValueError(
                f"Frame timestamp went backwards: {frame.timestamp} < {self._last_timestamp}"
            )

        self._frames.append(frame)
        self._last_timestamp = frame.timestamp
        return True

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def reset(self):
        """Drop all frames and stop recording."""
        self._frames.clear()
        self._last_timestamp = None
        self.is_recording = False

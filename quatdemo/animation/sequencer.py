"""
Animation sequencer for segment-by-segment rotation playback.

The sequencer owns only its playback state. The rotation sequence belongs
to the caller and is passed in on every call, so the caller may edit it
between frames.

Segment `index` interpolates from the composition of entries 0..index to
that composition followed by entry index + 1. Earlier segments stay fixed
while the current one is animated.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from quatdemo.rotation.quaternion import Quaternion, compose_all, slerp

logger = logging.getLogger(__name__)

# One sixtieth of a segment per frame (60 Hz tick)
DEFAULT_TIME_STEP = 1.0 / 60.0

# Accumulated elapsed time this close to 1 counts as a completed segment
ELAPSED_TOLERANCE = 1e-9


class PlaybackState(Enum):
    """Sequencer states."""
    IDLE = "idle"
    PLAYING = "playing"


class AnimationSequencer:
    """Plays back an ordered list of rotations one segment at a time."""

    def __init__(self, time_step: float = DEFAULT_TIME_STEP):
        """
        Initialize an idle sequencer.

        Args:
            time_step: Segment fraction advanced per tick when tick() is
                called without an explicit dt
        """
        if time_step <= 0:
            raise ValueError(f"time_step must be positive, got {time_step}")

        self.time_step = time_step
        self.active = False
        self.index = 0
        self.elapsed = 0.0

    @property
    def state(self) -> PlaybackState:
        return PlaybackState.PLAYING if self.active else PlaybackState.IDLE

    @property
    def is_active(self) -> bool:
        return self.active

    def reset(self) -> None:
        """Return to idle with the cursor at the first segment."""
        self.active = False
        self.index = 0
        self.elapsed = 0.0

    def start(self, sequence: Sequence[Quaternion]) -> None:
        """
        Begin playback from the first segment.

        A sequence with fewer than two rotations has no segment to
        interpolate, so the sequencer stays idle.

        Args:
            sequence: Rotations to play back
        """
        self.reset()
        if len(sequence) < 2:
            logger.debug(f"Nothing to animate in a sequence of {len(sequence)} rotation(s)")
            return

        self.active = True
        logger.debug(f"Playback started over {len(sequence) - 1} segment(s)")

    def stop(self) -> None:
        """Force playback to end; the resting rotation is the full composition."""
        if self.active:
            logger.debug(f"Playback stopped at segment {self.index}")
        self.active = False

    def tick(self, sequence: Sequence[Quaternion], dt: Optional[float] = None) -> None:
        """
        Advance playback by one frame.

        Args:
            sequence: Rotations being played back
            dt: Segment fraction to advance (defaults to time_step)
        """
        if not self.active:
            return
        if self.index + 1 >= len(sequence):
            # The sequence was shortened between frames
            logger.warning(
                f"Segment {self.index} no longer exists in a sequence of {len(sequence)}, stopping playback"
            )
            self.active = False
            return

        self.elapsed += self.time_step if dt is None else dt

        while self.active and self.elapsed + ELAPSED_TOLERANCE >= 1.0:
            self.index += 1
            self.elapsed = max(0.0, self.elapsed - 1.0)

            if self.index >= len(sequence) - 1:
                self.active = False
                logger.debug("Playback finished")

    def current_rotation(self, sequence: Sequence[Quaternion]) -> Quaternion:
        """
        Rotation to display for the current frame.

        Args:
            sequence: Rotations being played back

        Returns:
            Full composition when idle; otherwise the slerp between the
            settled prefix and the prefix extended by the next rotation
        """
        if self.active and self.index + 1 < len(sequence):
            base = compose_all(sequence[:self.index + 1])
            target = base * sequence[self.index + 1]
            return slerp(base, target, self.elapsed)

        return compose_all(sequence)


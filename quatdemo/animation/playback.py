"""
Offline playback of a rotation sequence.

Runs the animation sequencer frame by frame until it comes to rest and
collects what a renderer would have been handed each frame:
- play_sequence: Per-frame rotations with segment index and progress
- playback_rotation_matrices: Stack frame rotations into (N, 4, 4) matrices
- frame_times: Wall-clock time of each frame for a given frame rate
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from quatdemo.rotation.quaternion import Quaternion
from .sequencer import AnimationSequencer, DEFAULT_TIME_STEP

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaybackFrame:
    """Rotation shown on a single rendered frame."""
    frame: int
    time: float  # Seconds since playback started
    index: int  # Segment being interpolated (last segment + 1 once at rest)
    elapsed: float  # Progress through the segment, in [0, 1)
    rotation: Quaternion


def frame_times(num_frames: int, frame_rate: float = 60.0) -> NDArray[np.float64]:
    """Times in seconds of `num_frames` consecutive frames at `frame_rate`."""
    if frame_rate <= 0:
        raise ValueError(f"frame_rate must be positive, got {frame_rate}")
    return np.arange(num_frames, dtype=np.float64) / frame_rate


def play_sequence(
    sequence: Sequence[Quaternion],
    time_step: float = DEFAULT_TIME_STEP,
    frame_rate: float = 60.0,
    max_frames: Optional[int] = None
) -> List[PlaybackFrame]:
    """
    Animate a rotation sequence to completion.

    One frame is recorded per tick while playing, followed by a final frame
    holding the resting rotation (the composition of the whole sequence).

    Args:
        sequence: Rotations to play back
        time_step: Segment fraction advanced per frame
        frame_rate: Frames per second, used only for frame timestamps
        max_frames: Optional cap on recorded playing frames

    Returns:
        List of PlaybackFrame in display order
    """
    if frame_rate <= 0:
        raise ValueError(f"frame_rate must be positive, got {frame_rate}")

    sequencer = AnimationSequencer(time_step=time_step)
    sequencer.start(sequence)

    # (index, elapsed, rotation) per frame; timestamps are attached at the end
    samples = []
    while sequencer.active:
        if max_frames is not None and len(samples) >= max_frames:
            logger.warning(f"Playback truncated after {max_frames} frames")
            sequencer.stop()
            break

        samples.append((sequencer.index, sequencer.elapsed, sequencer.current_rotation(sequence)))
        sequencer.tick(sequence)

    samples.append((max(len(sequence) - 1, 0), 0.0, sequencer.current_rotation(sequence)))

    times = frame_times(len(samples), frame_rate)
    frames = [
        PlaybackFrame(frame=i, time=float(times[i]), index=index, elapsed=elapsed, rotation=rotation)
        for i, (index, elapsed, rotation) in enumerate(samples)
    ]

    logger.info(f"Played {len(sequence)} rotation(s) in {len(frames)} frames")
    return frames


def playback_rotation_matrices(frames: Sequence[PlaybackFrame]) -> NDArray[np.float64]:
    """
    Convert frame rotations to homogeneous rotation matrices.

    Args:
        frames: Frames returned by play_sequence

    Returns:
        Array of shape (N, 4, 4)
    """
    matrices = np.zeros((len(frames), 4, 4))
    for i, frame in enumerate(frames):
        matrices[i] = frame.rotation.to_rotation_matrix()
    return matrices

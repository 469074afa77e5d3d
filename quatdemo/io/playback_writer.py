"""
Data export utilities for playback results.

Writes the frames produced by a playback run to CSV so the rotation path
can be inspected or replayed by external tools.
"""

import logging
from pathlib import Path
from datetime import datetime
from typing import Optional, Sequence
import numpy as np

from quatdemo.animation.playback import PlaybackFrame

logger = logging.getLogger(__name__)

PLAYBACK_HEADER = "Frame,Time_Seconds,Segment_Index,Elapsed,W,X,Y,Z"


def save_playback_frames(
    output_dir: Path,
    frames: Sequence[PlaybackFrame],
    timestamp: Optional[str] = None
) -> Path:
    """
    Save playback frames to CSV.

    Args:
        output_dir: Directory to save CSV file
        frames: Frames returned by play_sequence
        timestamp: Optional HHMM timestamp string. If not provided, generates current time.

    Returns:
        Path to the saved CSV file

    Raises:
        ValueError: If no frames are given
        RuntimeError: If CSV saving fails
    """
    if len(frames) == 0:
        raise ValueError("Empty frames list provided")

    logger.info("Saving playback frames to CSV...")

    try:
        if timestamp is None:
            timestamp = datetime.now().strftime("%H%M")
        data_path = Path(output_dir) / f"{timestamp}_playback_{len(frames)}frames.csv"

        data_array = np.array([
            [f.frame, f.time, f.index, f.elapsed, f.rotation.w, f.rotation.x, f.rotation.y, f.rotation.z]
            for f in frames
        ], dtype=np.float64)

        np.savetxt(
            data_path, data_array, delimiter=',', header=PLAYBACK_HEADER, comments='',
            fmt=['%d', '%.6f', '%d', '%.6f', '%.9f', '%.9f', '%.9f', '%.9f']
        )

        logger.info(f"Data saved: {data_path}")
        return data_path

    except Exception as e:
        logger.error(f"Failed to save playback frames: {e}")
        raise RuntimeError(f"Failed to save playback frames: {e}") from e

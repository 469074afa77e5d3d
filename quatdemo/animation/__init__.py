"""
Animation module for rotation playback.

Main components:
- AnimationSequencer: Segment-by-segment slerp playback state machine
- RotationSequence: Editable, never-empty list of rotation steps
- play_sequence: Run a sequence to completion and collect frames
- playback_rotation_matrices: Convert frames to 4x4 rotation matrices
"""

from .sequencer import AnimationSequencer, PlaybackState, DEFAULT_TIME_STEP
from .rotation_sequence import RotationSequence
from .playback import (
    PlaybackFrame,
    frame_times,
    play_sequence,
    playback_rotation_matrices,
)

__all__ = [
    'AnimationSequencer',
    'PlaybackState',
    'DEFAULT_TIME_STEP',
    'RotationSequence',
    'PlaybackFrame',
    'frame_times',
    'play_sequence',
    'playback_rotation_matrices',
]

"""
Quaternion Demo
===============

Rotation representation and interpolation engine for the interactive
quaternion demo: unit quaternions and the slerp-based animation sequencer
that plays back an ordered list of rotations.
"""

from .rotation import Quaternion, compose, compose_all, slerp
from .animation import AnimationSequencer, PlaybackState, RotationSequence

__version__ = "0.1.0"

__all__ = [
    'Quaternion',
    'compose',
    'compose_all',
    'slerp',
    'AnimationSequencer',
    'PlaybackState',
    'RotationSequence',
]

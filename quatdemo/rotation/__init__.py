"""
Rotation module for the quaternion demo.

Provides the unit quaternion value type and its free-function helpers:
- Construction from Euler angles and axis-angle
- Composition and rotation matrices
- SLERP between rotations
"""

from .quaternion import (
    Quaternion,
    identity,
    from_euler_angles,
    from_axis_angle,
    compose,
    compose_all,
    slerp,
)

__all__ = [
    'Quaternion',
    'identity',
    'from_euler_angles',
    'from_axis_angle',
    'compose',
    'compose_all',
    'slerp',
]

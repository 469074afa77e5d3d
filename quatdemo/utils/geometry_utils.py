"""
Geometry utilities for rotation editing and matrix construction.

Provides:
- normalize_axis: Normalize a rotation axis, flagging degenerate input
- homogeneous_matrix: Embed a 3x3 rotation in a 4x4 homogeneous matrix
- build_rotation_matrix: Create 4x4 rotation matrices with Rodrigues' formula
"""

import numpy as np
import logging
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)


def normalize_axis(axis: Union[Sequence[float], np.ndarray],
                   tolerance: float = 1e-9) -> Optional[np.ndarray]:
    """
    Scale a rotation axis to unit length.

    Args:
        axis: 3D axis vector (any non-zero length).
        tolerance: Length below which the axis is treated as degenerate.

    Returns:
        Unit axis, or None when the axis has (near) zero length.
    """
    axis = np.asarray(axis, dtype=np.float64)
    if axis.shape != (3,):
        raise ValueError(f"Rotation axis must be a 3-element vector, got shape {axis.shape}")

    length = np.linalg.norm(axis)
    if length < tolerance:
        logger.debug(f"Degenerate rotation axis {axis.tolist()}")
        return None

    return axis / length


def homogeneous_matrix(rotation: np.ndarray) -> np.ndarray:
    """Embed a 3x3 rotation matrix into a 4x4 homogeneous matrix."""
    rotation = np.asarray(rotation, dtype=np.float64)
    if rotation.shape != (3, 3):
        raise ValueError(f"Expected a 3x3 rotation matrix, got shape {rotation.shape}")

    rotation_matrix = np.eye(4)
    rotation_matrix[:3, :3] = rotation
    return rotation_matrix


def build_rotation_matrix(angle_deg: float, rotation_axis: np.ndarray) -> np.ndarray:
    """
    Build 4x4 homogeneous rotation matrix for the given angle around an axis.

    Uses Rodrigues' rotation formula. The rotation is about the origin.

    Args:
        angle_deg: Rotation angle in degrees.
        rotation_axis: Axis of rotation (3D vector, will be normalized).

    Returns:
        4x4 homogeneous rotation matrix.
    """
    axis = normalize_axis(rotation_axis)
    if axis is None:
        return np.eye(4)

    angle_rad = np.radians(angle_deg)
    cos_a, sin_a = np.cos(angle_rad), np.sin(angle_rad)

    # Cross-product matrix of the axis
    K = np.array([
        [0, -axis[2], axis[1]],
        [axis[2], 0, -axis[0]],
        [-axis[1], axis[0], 0]
    ])

    R = np.eye(3) + sin_a * K + (1 - cos_a) * np.dot(K, K)

    return homogeneous_matrix(R)

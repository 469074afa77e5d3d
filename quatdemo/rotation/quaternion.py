"""
Unit quaternion rotations for the quaternion demo.

Provides the immutable Quaternion value type used throughout the demo:
- Construction from Euler angles, axis-angle, arrays and rotation matrices
- Composition (Hamilton product, applied right-to-left to vectors)
- Conversion to 4x4 homogeneous rotation matrices
- SLERP between two rotations along the shorter arc

Components are stored scalar-first: [w, x, y, z].

Euler angle convention (Z-Y-X, aerospace):
    yaw about +Z, pitch about +Y, roll about +X, composed as
    q = q_yaw * q_pitch * q_roll, so roll is applied to a vector first
    and yaw last.
"""

import math
import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np
import quaternion  # numpy-quaternion library

from quatdemo.utils.geometry_utils import homogeneous_matrix

logger = logging.getLogger(__name__)

# Squared axis length below which from_axis_angle returns the identity
DEGENERATE_AXIS_TOLERANCE = 1e-12

# Dot product above which slerp falls back to normalized linear interpolation
SLERP_LINEAR_THRESHOLD = 0.9995


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion w + xi + yj + zk (value type, never mutated)."""
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def identity(cls) -> 'Quaternion':
        """Return the 'no rotation' quaternion (1, 0, 0, 0)."""
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, x: float, y: float, z: float, angle: float) -> 'Quaternion':
        """
        Build the rotation of `angle` radians about the axis (x, y, z).

        The axis must already be a unit vector; it is not re-normalized.
        An axis with (near) zero length yields the identity rotation.

        Args:
            x, y, z: Unit rotation axis components
            angle: Rotation angle in radians

        Returns:
            Unit quaternion for the rotation
        """
        if x * x + y * y + z * z < DEGENERATE_AXIS_TOLERANCE:
            logger.debug("Degenerate rotation axis, using identity")
            return cls.identity()

        half = 0.5 * angle
        s = math.sin(half)
        return cls(math.cos(half), x * s, y * s, z * s)

    @classmethod
    def from_euler_angles(cls, yaw: float, pitch: float, roll: float) -> 'Quaternion':
        """
        Build a rotation from yaw, pitch and roll in radians (Z-Y-X order).

        Args:
            yaw: Rotation about +Z, applied last
            pitch: Rotation about +Y
            roll: Rotation about +X, applied first

        Returns:
            Unit quaternion q_yaw * q_pitch * q_roll
        """
        q_yaw = cls.from_axis_angle(0.0, 0.0, 1.0, yaw)
        q_pitch = cls.from_axis_angle(0.0, 1.0, 0.0, pitch)
        q_roll = cls.from_axis_angle(1.0, 0.0, 0.0, roll)
        return q_yaw * q_pitch * q_roll

    @classmethod
    def from_array(cls, values: Union[Sequence[float], np.ndarray]) -> 'Quaternion':
        """Build from a scalar-first [w, x, y, z] sequence."""
        values = np.asarray(values, dtype=np.float64)
        if values.shape != (4,):
            raise ValueError(f"Quaternion requires 4 components, got shape {values.shape}")
        return cls(*(float(v) for v in values))

    @classmethod
    def from_rotation_matrix(cls, matrix: np.ndarray) -> 'Quaternion':
        """
        Build from a 3x3 rotation matrix or a 4x4 homogeneous matrix.

        Args:
            matrix: Proper rotation matrix (only the upper-left 3x3 block
                of a 4x4 matrix is used)

        Returns:
            Unit quaternion with non-negative scalar part
        """
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape == (4, 4):
            matrix = matrix[:3, :3]
        elif matrix.shape != (3, 3):
            raise ValueError(f"Rotation matrix must be 3x3 or 4x4, got shape {matrix.shape}")

        q = quaternion.from_rotation_matrix(matrix, nonorthogonal=False)
        result = cls._from_numpy(q).normalized()
        return -result if result.w < 0.0 else result

    @classmethod
    def _from_numpy(cls, q: quaternion.quaternion) -> 'Quaternion':
        return cls(float(q.w), float(q.x), float(q.y), float(q.z))

    def _to_numpy(self) -> quaternion.quaternion:
        return quaternion.quaternion(self.w, self.x, self.y, self.z)

    # =========================================================================
    # ALGEBRA
    # =========================================================================

    @property
    def norm(self) -> float:
        """Euclidean length of the four components."""
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> 'Quaternion':
        n = self.norm
        if n == 0.0:
            return Quaternion.identity()
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def conjugate(self) -> 'Quaternion':
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> 'Quaternion':
        """Multiplicative inverse (equals the conjugate for unit quaternions)."""
        n2 = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        c = self.conjugate()
        return Quaternion(c.w / n2, c.x / n2, c.y / n2, c.z / n2)

    def dot(self, other: 'Quaternion') -> float:
        """4D dot product; |dot| is the cosine of half the angle between rotations."""
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def compose(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        Rotating a vector by the result applies `other` first, then `self`.
        """
        return Quaternion._from_numpy(self._to_numpy() * other._to_numpy())

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.compose(other)

    def __neg__(self) -> 'Quaternion':
        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def isclose(self, other: 'Quaternion', atol: float = 1e-9, up_to_sign: bool = True) -> bool:
        """
        Compare two quaternions component-wise within `atol`.

        With up_to_sign, q and -q compare equal since they encode the
        same rotation.
        """
        a = self.as_array()
        b = other.as_array()
        if np.allclose(a, b, rtol=0.0, atol=atol):
            return True
        return up_to_sign and bool(np.allclose(a, -b, rtol=0.0, atol=atol))

    # =========================================================================
    # CONVERSIONS
    # =========================================================================

    def as_array(self) -> np.ndarray:
        """Scalar-first component array [w, x, y, z]."""
        return np.array([self.w, self.x, self.y, self.z], dtype=np.float64)

    def to_rotation_matrix(self) -> np.ndarray:
        """
        Convert to a 4x4 homogeneous rotation matrix.

        The translation column is left as identity, so the bottom row
        is [0, 0, 0, 1].

        Returns:
            4x4 matrix M with M[:3, :3] @ v equal to this rotation applied to v
        """
        return homogeneous_matrix(quaternion.as_rotation_matrix(self._to_numpy()))

    def rotate_vector(self, vector: Union[Sequence[float], np.ndarray]) -> np.ndarray:
        """Apply this rotation to a 3D vector."""
        v = np.asarray(vector, dtype=np.float64)
        return quaternion.rotate_vectors(self._to_numpy(), v)

    def to_axis_angle(self) -> Tuple[np.ndarray, float]:
        """
        Convert to a unit axis and an angle in radians within [0, 2*pi].

        The identity rotation maps to axis (1, 0, 0) and angle 0.
        """
        q = self.normalized()
        angle = 2.0 * math.acos(max(-1.0, min(1.0, q.w)))
        s = math.sqrt(max(0.0, 1.0 - q.w * q.w))
        if s < 1e-12:
            return np.array([1.0, 0.0, 0.0]), 0.0
        return np.array([q.x / s, q.y / s, q.z / s]), angle

    def to_euler_angles(self) -> Tuple[float, float, float]:
        """
        Convert to (yaw, pitch, roll) in radians, Z-Y-X convention.

        Pitch is limited to [-pi/2, pi/2]; near +/-90 degrees pitch yaw and
        roll are not uniquely determined.
        """
        w, x, y, z = self.normalized().as_array()
        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
        sin_pitch = max(-1.0, min(1.0, 2.0 * (w * y - z * x)))
        pitch = math.asin(sin_pitch)
        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return yaw, pitch, roll

    def angle_to(self, other: 'Quaternion') -> float:
        """Angle in radians, within [0, pi], of the rotation taking self to other."""
        d = abs(self.normalized().dot(other.normalized()))
        return 2.0 * math.acos(min(1.0, d))


def identity() -> Quaternion:
    """Return the identity rotation."""
    return Quaternion.identity()


def from_euler_angles(yaw: float, pitch: float, roll: float) -> Quaternion:
    return Quaternion.from_euler_angles(yaw, pitch, roll)


def from_axis_angle(x: float, y: float, z: float, angle: float) -> Quaternion:
    return Quaternion.from_axis_angle(x, y, z, angle)


def compose(a: Quaternion, b: Quaternion) -> Quaternion:
    """Rotation applying `b` first, then `a` (the product a * b)."""
    return a.compose(b)


def compose_all(rotations: Iterable[Quaternion]) -> Quaternion:
    """
    Fold rotations with compose in list order: q1 * q2 * ... * qn.

    An empty iterable composes to the identity.
    """
    result = Quaternion.identity()
    for q in rotations:
        result = result * q
    return result


def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """
    Perform Spherical Linear Interpolation (SLERP) between two quaternions.

    Parameters:
    -----------
    q1, q2 : Quaternion
        Unit rotations to interpolate between
    t : float
        Interpolation parameter, clamped to [0, 1]
        t = 0 returns q1, t = 1 returns q2 (up to sign)

    Returns:
    --------
    Quaternion
        Unit quaternion on the shorter great-circle arc from q1 to q2
    """
    t = min(1.0, max(0.0, float(t)))

    a = q1.as_array()
    b = q2.as_array()

    # Ensure unit quaternions
    a = a / np.linalg.norm(a)
    b = b / np.linalg.norm(b)

    dot_product = float(np.sum(a * b))

    # If dot product is negative, take shorter path
    if dot_product < 0:
        b = -b
        dot_product = -dot_product

    # If quaternions are very close, just do linear interpolation
    if dot_product > SLERP_LINEAR_THRESHOLD:
        result = (1 - t) * a + t * b
        return Quaternion.from_array(result / np.linalg.norm(result))

    theta = np.arccos(np.clip(dot_product, -1.0, 1.0))
    sin_theta = np.sin(theta)

    ratio1 = np.sin((1 - t) * theta) / sin_theta
    ratio2 = np.sin(t * theta) / sin_theta

    result = ratio1 * a + ratio2 * b
    return Quaternion.from_array(result / np.linalg.norm(result))

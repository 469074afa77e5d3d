"""
Editable rotation sequence.

Holds the list of rotation steps the demo edits: the last entry is the
"current" rotation that the Euler-angle and axis-angle sliders write into,
new steps are appended as identity, and clearing returns to a single
identity step. The sequence is never empty.
"""

import math
import logging
from collections.abc import Sequence
from typing import Iterable, Iterator, List, Optional, Union

import numpy as np

from quatdemo.rotation.quaternion import Quaternion, compose_all
from quatdemo.utils.geometry_utils import normalize_axis

logger = logging.getLogger(__name__)


class RotationSequence(Sequence):
    """Ordered, never-empty list of rotation steps."""

    def __init__(self, rotations: Optional[Iterable[Quaternion]] = None):
        self._rotations: List[Quaternion] = list(rotations) if rotations is not None else []
        if not self._rotations:
            self._rotations.append(Quaternion.identity())

    def __len__(self) -> int:
        return len(self._rotations)

    def __getitem__(self, index):
        # Slices return a plain list of steps
        return self._rotations[index]

    def __iter__(self) -> Iterator[Quaternion]:
        return iter(self._rotations)

    def __repr__(self) -> str:
        return f"RotationSequence({self._rotations!r})"

    @property
    def current(self) -> Quaternion:
        """The rotation step currently being edited (the last entry)."""
        return self._rotations[-1]

    def set_current(self, rotation: Quaternion) -> None:
        self._rotations[-1] = rotation

    def set_current_from_euler_degrees(self, yaw_deg: float, pitch_deg: float, roll_deg: float) -> Quaternion:
        """
        Replace the current step with a yaw/pitch/roll rotation.

        Args:
            yaw_deg, pitch_deg, roll_deg: Angles in degrees (Z-Y-X convention)

        Returns:
            The new current rotation
        """
        rotation = Quaternion.from_euler_angles(
            math.radians(yaw_deg), math.radians(pitch_deg), math.radians(roll_deg)
        )
        self.set_current(rotation)
        return rotation

    def set_current_from_axis_angle_degrees(self, axis: Union[Iterable[float], np.ndarray],
                                            angle_deg: float) -> Quaternion:
        """
        Replace the current step with a rotation about an arbitrary axis.

        The axis need not be unit length; it is normalized here. A zero
        axis gives the identity rotation.

        Args:
            axis: Rotation axis (x, y, z)
            angle_deg: Rotation angle in degrees

        Returns:
            The new current rotation
        """
        unit_axis = normalize_axis(np.asarray(list(axis), dtype=np.float64))
        if unit_axis is None:
            rotation = Quaternion.identity()
        else:
            rotation = Quaternion.from_axis_angle(
                float(unit_axis[0]), float(unit_axis[1]), float(unit_axis[2]), math.radians(angle_deg)
            )
        self.set_current(rotation)
        return rotation

    def add_rotation(self) -> None:
        """Append an identity step, which becomes the new current rotation."""
        self._rotations.append(Quaternion.identity())
        logger.debug(f"Added rotation step, sequence now has {len(self._rotations)} steps")

    def clear(self) -> None:
        """Reset to a single identity step."""
        self._rotations = [Quaternion.identity()]
        logger.debug("Cleared rotation steps")

    def composed(self) -> Quaternion:
        """All steps composed in list order."""
        return compose_all(self._rotations)

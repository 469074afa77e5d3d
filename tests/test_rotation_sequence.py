"""
Tests for the editable RotationSequence.
"""

import math

import pytest

from quatdemo.animation.rotation_sequence import RotationSequence
from quatdemo.rotation.quaternion import identity, from_axis_angle, from_euler_angles, compose_all


@pytest.fixture
def sequence():
    return RotationSequence()


class TestRotationSequence:

    def test_starts_with_identity(self, sequence):
        assert len(sequence) == 1
        assert sequence.current == identity()

    def test_empty_iterable_becomes_identity(self):
        assert list(RotationSequence([])) == [identity()]

    def test_add_rotation_appends_identity(self, sequence):
        sequence.set_current_from_euler_degrees(90.0, 0.0, 0.0)
        sequence.add_rotation()
        assert len(sequence) == 2
        assert sequence.current == identity()
        assert sequence[0].isclose(from_euler_angles(math.pi / 2, 0.0, 0.0))

    def test_clear_resets_to_single_identity(self, sequence):
        for _ in range(3):
            sequence.add_rotation()
            sequence.set_current_from_euler_degrees(10.0, 20.0, 30.0)
        sequence.clear()
        assert list(sequence) == [identity()]

    def test_euler_degrees(self, sequence):
        q = sequence.set_current_from_euler_degrees(30.0, 45.0, 60.0)
        expected = from_euler_angles(math.radians(30.0), math.radians(45.0), math.radians(60.0))
        assert q.isclose(expected, atol=1e-12)
        assert sequence.current is q

    def test_axis_is_normalized(self, sequence):
        q = sequence.set_current_from_axis_angle_degrees([0.0, 0.0, 2.0], 90.0)
        assert q.isclose(from_axis_angle(0.0, 0.0, 1.0, math.pi / 2), atol=1e-12)
        assert q.norm == pytest.approx(1.0)

    def test_skewed_axis(self, sequence):
        q = sequence.set_current_from_axis_angle_degrees((1.0, 1.0, 0.0), 180.0)
        s = math.sqrt(0.5)
        assert q.isclose(from_axis_angle(s, s, 0.0, math.pi), atol=1e-12)

    def test_zero_axis_gives_identity(self, sequence):
        sequence.set_current_from_euler_degrees(10.0, 0.0, 0.0)
        q = sequence.set_current_from_axis_angle_degrees([0.0, 0.0, 0.0], 45.0)
        assert q == identity()
        assert sequence.current == identity()

    def test_edits_only_touch_last_entry(self, sequence):
        sequence.set_current_from_euler_degrees(90.0, 0.0, 0.0)
        first = sequence[0]
        sequence.add_rotation()
        sequence.set_current_from_euler_degrees(0.0, 90.0, 0.0)
        assert sequence[0] is first

    def test_slice_and_composition(self, sequence):
        sequence.set_current_from_euler_degrees(90.0, 0.0, 0.0)
        sequence.add_rotation()
        sequence.set_current_from_euler_degrees(90.0, 0.0, 0.0)

        assert sequence[:1] == [sequence[0]]
        assert sequence.composed().isclose(compose_all(list(sequence)))
        assert sequence.composed().isclose(from_axis_angle(0.0, 0.0, 1.0, math.pi), atol=1e-12)

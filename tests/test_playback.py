"""
Tests for offline playback of rotation sequences.
"""

import math

import numpy as np
import pytest
from numpy.testing import assert_allclose

from quatdemo.animation.playback import frame_times, play_sequence, playback_rotation_matrices
from quatdemo.rotation.quaternion import identity, from_axis_angle


@pytest.fixture
def two_yaw_steps():
    yaw_90 = from_axis_angle(0.0, 0.0, 1.0, math.pi / 2)
    return [identity(), yaw_90, yaw_90]


class TestPlaySequence:

    def test_frame_count(self, two_yaw_steps):
        # 60 playing frames per segment plus the resting frame
        frames = play_sequence(two_yaw_steps)
        assert len(frames) == 121

    def test_frames_follow_segments(self, two_yaw_steps):
        frames = play_sequence(two_yaw_steps)

        assert frames[0].rotation.isclose(identity())
        assert frames[0].index == 0
        assert frames[60].index == 1
        assert frames[60].rotation.isclose(from_axis_angle(0.0, 0.0, 1.0, math.pi / 2), atol=1e-6)
        assert frames[-1].rotation.isclose(from_axis_angle(0.0, 0.0, 1.0, math.pi), atol=1e-9)

    def test_yaw_grows_monotonically(self, two_yaw_steps):
        frames = play_sequence(two_yaw_steps)
        angles = [identity().angle_to(f.rotation) for f in frames]

        assert all(b >= a - 1e-9 for a, b in zip(angles, angles[1:]))
        assert angles[0] == pytest.approx(0.0, abs=1e-9)
        assert angles[59] == pytest.approx(math.radians(88.5), abs=1e-6)
        assert angles[60] == pytest.approx(math.pi / 2, abs=1e-6)
        assert angles[-1] == pytest.approx(math.pi, abs=1e-6)

    def test_frame_timestamps(self, two_yaw_steps):
        frames = play_sequence(two_yaw_steps, frame_rate=30.0)
        assert frames[0].time == 0.0
        assert frames[-1].time == pytest.approx(120 / 30.0)
        assert [f.frame for f in frames] == list(range(len(frames)))

    def test_timestamps_match_frame_times(self, two_yaw_steps):
        frames = play_sequence(two_yaw_steps, frame_rate=24.0)
        assert_allclose([f.time for f in frames], frame_times(len(frames), 24.0), rtol=0.0, atol=0.0)

    def test_custom_time_step(self, two_yaw_steps):
        frames = play_sequence(two_yaw_steps, time_step=0.25)
        assert len(frames) == 9

    def test_single_rotation_has_only_resting_frame(self):
        q = from_axis_angle(1.0, 0.0, 0.0, 0.7)
        frames = play_sequence([q])
        assert len(frames) == 1
        assert frames[0].rotation == q

    def test_max_frames_truncates(self, two_yaw_steps):
        frames = play_sequence(two_yaw_steps, max_frames=10)
        assert len(frames) == 11
        assert frames[-1].rotation.isclose(from_axis_angle(0.0, 0.0, 1.0, math.pi), atol=1e-9)

    def test_rejects_bad_frame_rate(self, two_yaw_steps):
        with pytest.raises(ValueError):
            play_sequence(two_yaw_steps, frame_rate=0.0)


class TestPlaybackMatrices:

    def test_shapes_and_orthogonality(self, two_yaw_steps):
        matrices = playback_rotation_matrices(play_sequence(two_yaw_steps))
        assert matrices.shape == (121, 4, 4)
        assert_allclose(np.linalg.det(matrices), 1.0, atol=1e-12)
        assert_allclose(matrices[:, 3, :], np.tile([0.0, 0.0, 0.0, 1.0], (121, 1)))

    def test_final_matrix_is_half_turn(self, two_yaw_steps):
        matrices = playback_rotation_matrices(play_sequence(two_yaw_steps))
        assert_allclose(matrices[-1][:3, :3], np.diag([-1.0, -1.0, 1.0]), atol=1e-9)


class TestFrameTimes:

    def test_values(self):
        assert_allclose(frame_times(3, 60.0), [0.0, 1 / 60.0, 2 / 60.0])

    def test_rejects_bad_rate(self):
        with pytest.raises(ValueError):
            frame_times(3, -1.0)

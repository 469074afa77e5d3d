"""
Tests for CSV export of playback frames.
"""

import math

import numpy as np
import pytest

from quatdemo.animation.playback import play_sequence
from quatdemo.io.playback_writer import save_playback_frames, PLAYBACK_HEADER
from quatdemo.rotation.quaternion import identity, from_axis_angle


@pytest.fixture
def frames():
    yaw_90 = from_axis_angle(0.0, 0.0, 1.0, math.pi / 2)
    return play_sequence([identity(), yaw_90], time_step=0.25)


class TestSavePlaybackFrames:

    def test_writes_csv(self, tmp_path, frames):
        path = save_playback_frames(tmp_path, frames, timestamp="1200")

        assert path == tmp_path / "1200_playback_5frames.csv"
        assert path.read_text().splitlines()[0] == PLAYBACK_HEADER

        data = np.loadtxt(path, delimiter=',', skiprows=1)
        assert data.shape == (5, 8)
        np.testing.assert_allclose(data[:, 0], np.arange(5))
        np.testing.assert_allclose(data[:, 3], [0.0, 0.25, 0.5, 0.75, 0.0])
        np.testing.assert_allclose(data[-1, 4:], frames[-1].rotation.as_array(), atol=1e-9)

    def test_rejects_empty_frames(self, tmp_path):
        with pytest.raises(ValueError):
            save_playback_frames(tmp_path, [])

    def test_missing_directory_raises_runtime_error(self, tmp_path, frames):
        with pytest.raises(RuntimeError):
            save_playback_frames(tmp_path / "missing", frames, timestamp="1200")

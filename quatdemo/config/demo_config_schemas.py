"""
Configuration schemas for the quaternion demo.
Playback timing, initial rotation steps and output location.
"""

from dataclasses import dataclass, field
from typing import List
from pathlib import Path


@dataclass
class PlaybackSettings:
    """Playback timing parameters."""
    frame_rate: float = 60.0  # Frames (ticks) per second
    segment_duration: float = 1.0  # Seconds to animate one rotation step

    @property
    def time_step(self) -> float:
        """Segment fraction advanced per frame."""
        return 1.0 / (self.frame_rate * self.segment_duration)


@dataclass
class RotationEntry:
    """
    One rotation step as entered in the demo.
    'euler' uses angles_deg = [yaw, pitch, roll]; 'axis_angle' uses axis + angle_deg.
    """
    mode: str = "euler"
    angles_deg: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    axis: List[float] = field(default_factory=lambda: [1.0, 0.0, 0.0])
    angle_deg: float = 0.0


@dataclass
class OutputSettings:
    """Export parameters."""
    output_dir: str = "playback_results"


@dataclass
class DemoConfig:
    """Complete quaternion demo configuration."""
    name: str = "Quaternion Demo"

    playback: PlaybackSettings = field(default_factory=PlaybackSettings)
    rotations: List[RotationEntry] = field(default_factory=list)
    output: OutputSettings = field(default_factory=OutputSettings)

    def get_output_directory(self, project_root: Path) -> Path:
        """Get the full output directory path under data/results/."""
        return project_root / "data" / "results" / self.output.output_dir

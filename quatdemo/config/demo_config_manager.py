"""
Configuration manager for the quaternion demo.
Handles loading demo configurations and turning them into rotation sequences.
"""

import yaml
import logging
from pathlib import Path
from typing import Union

# Project Imports
from .demo_config_schemas import (
    DemoConfig,
    PlaybackSettings,
    RotationEntry,
    OutputSettings
)
from quatdemo.animation.rotation_sequence import RotationSequence

logger = logging.getLogger(__name__)

ROTATION_MODES = ('euler', 'axis_angle')


class DemoConfigManager:
    """
    Configuration manager for quaternion demo settings.
    Handles configuration loading and path resolution.
    """

    def __init__(self, project_root: Path = None):
        """Initialize the demo configuration manager."""
        if project_root is None:
            self.project_root = Path(__file__).parent.parent.parent
        else:
            self.project_root = Path(project_root)

        self.configs_dir = self.project_root / "data" / "configs"

    def load_config(self, config_path: Union[str, Path]) -> DemoConfig:
        """
        Load demo configuration from YAML file.

        Args:
            config_path: Path to configuration YAML file (relative paths
                are resolved under data/configs)

        Returns:
            DemoConfig: Loaded demo configuration
        """
        config_path = Path(config_path)

        if not config_path.is_absolute():
            config_path = self.configs_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading demo config from: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config_data).__name__}")

        demo_config = DemoConfig()
        demo_config.name = config_data.get('name', 'Quaternion Demo')

        if 'playback' in config_data:
            playback = config_data['playback'] or {}
            if not isinstance(playback, dict):
                raise ValueError("'playback' must be a mapping")
            demo_config.playback = PlaybackSettings(
                frame_rate=float(playback.get('frame_rate', 60.0)),
                segment_duration=float(playback.get('segment_duration', 1.0))
            )
        if demo_config.playback.frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {demo_config.playback.frame_rate}")
        if demo_config.playback.segment_duration <= 0:
            raise ValueError(
                f"segment_duration must be positive, got {demo_config.playback.segment_duration}"
            )

        for i, rot_data in enumerate(config_data.get('rotations') or []):
            if not isinstance(rot_data, dict):
                raise ValueError(f"Rotation {i} must be a mapping, got {type(rot_data).__name__}")

            mode = rot_data.get('mode', 'euler')
            if mode not in ROTATION_MODES:
                raise ValueError(f"Unknown rotation mode '{mode}' for rotation {i}")

            entry = RotationEntry(
                mode=mode,
                angles_deg=[float(a) for a in rot_data.get('angles_deg', [0.0, 0.0, 0.0])],
                axis=[float(a) for a in rot_data.get('axis', [1.0, 0.0, 0.0])],
                angle_deg=float(rot_data.get('angle_deg', 0.0))
            )
            if len(entry.angles_deg) != 3:
                raise ValueError(f"Rotation {i}: angles_deg needs [yaw, pitch, roll]")
            if len(entry.axis) != 3:
                raise ValueError(f"Rotation {i}: axis needs [x, y, z]")

            demo_config.rotations.append(entry)
            logger.debug(f"  Rotation {i}: mode={mode}")

        if 'output' in config_data:
            output = config_data['output'] or {}
            if not isinstance(output, dict):
                raise ValueError("'output' must be a mapping")
            demo_config.output = OutputSettings(
                output_dir=output.get('output_dir', 'playback_results')
            )

        logger.info(f"Loaded demo config: {demo_config.name} with {len(demo_config.rotations)} rotations")
        return demo_config

    def build_sequence(self, config: DemoConfig) -> RotationSequence:
        """
        Build the rotation sequence described by a configuration.

        The sequence always starts with the identity step, as the demo does,
        and each configured rotation is entered as a new step after it.

        Args:
            config: The demo configuration

        Returns:
            RotationSequence with len(config.rotations) + 1 steps
        """
        sequence = RotationSequence()
        for entry in config.rotations:
            sequence.add_rotation()
            if entry.mode == 'euler':
                sequence.set_current_from_euler_degrees(*entry.angles_deg)
            else:
                sequence.set_current_from_axis_angle_degrees(entry.axis, entry.angle_deg)

        logger.debug(f"Built sequence with {len(sequence)} steps")
        return sequence

    def get_output_directory(self, config: DemoConfig) -> Path:
        """
        Get the output directory path.
        Creates it under data/results/<output_dir_name>.
        """
        output_dir = config.get_output_directory(self.project_root)
        output_dir.mkdir(parents=True, exist_ok=True)
        return output_dir

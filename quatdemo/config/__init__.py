"""Demo configuration loading."""

from .demo_config_schemas import DemoConfig, PlaybackSettings, RotationEntry, OutputSettings
from .demo_config_manager import DemoConfigManager

__all__ = [
    'DemoConfig',
    'PlaybackSettings',
    'RotationEntry',
    'OutputSettings',
    'DemoConfigManager',
]

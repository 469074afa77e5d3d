"""
Tests for the command line of the example scripts.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PLAYBACK_EXAMPLE = PROJECT_ROOT / "examples" / "01_sequence_playback.py"


def run_example(*args):
    return subprocess.run(
        [sys.executable, str(PLAYBACK_EXAMPLE), *args],
        capture_output=True, text=True, cwd=PROJECT_ROOT
    )


class TestPlaybackExampleCli:

    def test_help_lists_config_argument(self):
        result = run_example("--help")
        assert result.returncode == 0
        assert "config" in result.stdout

    def test_extra_positional_rejected(self):
        result = run_example("a.yaml", "b.yaml")
        assert result.returncode == 2
        assert "unrecognized arguments" in result.stderr

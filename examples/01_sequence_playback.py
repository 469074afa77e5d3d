#!/usr/bin/env python3
"""
Quaternion Demo Example 1: Sequence Playback
============================================

This script loads a demo configuration, builds the rotation sequence it
describes and plays it back the way the demo animates it, one rotation
step per segment at 60 frames per second.

Run from project root:
    python examples/01_sequence_playback.py [config.yaml]

Expected output:
    - Console summary of the rotation steps and playback
    - CSV of per-frame rotations saved to data/results/<output_dir>/
"""

import sys
import math
import logging
import argparse
from pathlib import Path

# =============================================================================
# SETUP PROJECT ROOT
# =============================================================================
# This ensures imports work whether run from project root or examples/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np

from quatdemo.config import DemoConfigManager
from quatdemo.animation import play_sequence, playback_rotation_matrices
from quatdemo.io import save_playback_frames


def main(config_name: str = "default_demo_config.yaml"):
    print("=" * 60)
    print("Quaternion Demo Example 1: Sequence Playback")
    print("=" * 60)

    # =========================================================================
    # SETUP
    # =========================================================================
    print("\n[1/3] Loading configuration...")

    config_manager = DemoConfigManager(PROJECT_ROOT)
    config = config_manager.load_config(config_name)
    sequence = config_manager.build_sequence(config)

    print(f"  Config: {config.name}")
    print(f"  Rotation steps: {len(sequence)}")
    for i, q in enumerate(sequence):
        axis, angle = q.to_axis_angle()
        print(f"    [{i}] {math.degrees(angle):7.2f} deg about {np.round(axis, 3)}")

    # =========================================================================
    # PLAYBACK
    # =========================================================================
    print("\n[2/3] Playing back rotations...")

    frames = play_sequence(
        sequence,
        time_step=config.playback.time_step,
        frame_rate=config.playback.frame_rate
    )
    matrices = playback_rotation_matrices(frames)

    final = frames[-1].rotation
    yaw, pitch, roll = (math.degrees(a) for a in final.to_euler_angles())
    print(f"  Frames: {len(frames)} ({frames[-1].time:.2f} s)")
    print(f"  Resting rotation: w={final.w:.4f} x={final.x:.4f} y={final.y:.4f} z={final.z:.4f}")
    print(f"  Resting yaw/pitch/roll: {yaw:.2f} / {pitch:.2f} / {roll:.2f} deg")
    print(f"  Max |det - 1| over frames: {np.max(np.abs(np.linalg.det(matrices) - 1.0)):.2e}")

    # =========================================================================
    # EXPORT
    # =========================================================================
    print("\n[3/3] Saving frames...")

    output_dir = config_manager.get_output_directory(config)
    data_path = save_playback_frames(output_dir, frames)
    print(f"  Saved: {data_path}")

    print("\nExample complete!")


if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    parser = argparse.ArgumentParser(
        description="Play back the rotation sequence described by a demo config and save the frames"
    )
    parser.add_argument(
        "config", nargs="?", default="default_demo_config.yaml",
        help="Config YAML (relative paths resolve under data/configs)"
    )
    args = parser.parse_args()

    main(args.config)

from .playback_writer import save_playback_frames

__all__ = ['save_playback_frames']

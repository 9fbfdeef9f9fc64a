"""Music Helper package: metadata inference and signal helpers for music players.

This package provides the main-artist heuristic for albums and playlists,
RMS level metering for PCM windows, and track length formatting.
"""

from .utils.text import format_track_length, implode
from .utils.audio import compute_rms_level
from .services.artist_inference import infer_main_artist

__all__ = ["format_track_length", "implode", "compute_rms_level", "infer_main_artist"]
__version__ = "1.0.0"

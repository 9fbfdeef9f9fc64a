"""
Music Helper Utilities Package

This package contains the stateless helpers used by the display and
playback layers.
"""

from .text import format_track_length, implode
from .audio import compute_rms_level, load_pcm_window

__all__ = [
    'format_track_length',
    'implode',
    'compute_rms_level',
    'load_pcm_window'
]

"""
Music Helper Services Package

Services built on the core models: main-artist inference, tag-based song
resolution and the artwork hand-off queue.
"""

from .artist_inference import (
    ArtistInferenceService,
    infer_main_artist,
    tally_artists,
    decide_main_artist,
)
from .tag_resolver import TagArtistResolver
from .artwork_queue import ArtworkQueue

__all__ = [
    'ArtistInferenceService',
    'infer_main_artist',
    'tally_artists',
    'decide_main_artist',
    'TagArtistResolver',
    'ArtworkQueue'
]

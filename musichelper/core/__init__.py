"""
Music Helper Core Package

This package contains the data models and exceptions shared by the helpers.
"""

from .models import Song, SongCollection, ArtistTally, InferenceResult
from .exceptions import (
    MusicHelperError,
    InvalidArgumentError,
    UnresolvedReferenceError,
    AudioFileError,
    ConfigurationError,
)

__all__ = [
    'Song',
    'SongCollection',
    'ArtistTally',
    'InferenceResult',
    'MusicHelperError',
    'InvalidArgumentError',
    'UnresolvedReferenceError',
    'AudioFileError',
    'ConfigurationError'
]

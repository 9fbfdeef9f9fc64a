"""
Tag-based song resolution

Resolves file paths to Song objects using the artist tags stored in the
files themselves, for collections whose song references are local paths.
"""

import os
import threading
from typing import Dict, Optional

from mutagen import File as MutagenFile
from mutagen import MutagenError

from ..core.models import Song
from ..core.exceptions import UnresolvedReferenceError
from ..utils.logging_config import get_logger


class TagArtistResolver:
    """
    Resolver that reads the artist tag of local audio files

    Resolved songs are memoised per path for the lifetime of the resolver.
    Instances are callable and can be passed wherever a resolver is expected.
    """

    def __init__(self, base_dir: Optional[str] = None):
        self.base_dir = base_dir
        self.logger = get_logger('tag_resolver')
        self._songs: Dict[str, Song] = {}
        self._lock = threading.Lock()

    def _full_path(self, ref: str) -> str:
        if self.base_dir and not os.path.isabs(ref):
            return os.path.join(self.base_dir, ref)
        return ref

    def resolve(self, ref: str) -> Song:
        """
        Resolve a path to a Song

        Raises:
            UnresolvedReferenceError: If the file is missing or has no readable tags
        """
        with self._lock:
            cached = self._songs.get(ref)
        if cached is not None:
            return cached

        filepath = self._full_path(ref)
        if not os.path.isfile(filepath):
            raise UnresolvedReferenceError(ref, details="file does not exist")

        try:
            audio_file = MutagenFile(filepath, easy=True)
        except MutagenError as e:
            raise UnresolvedReferenceError(ref, details=str(e)) from e

        if audio_file is None:
            raise UnresolvedReferenceError(ref, details="unsupported audio format")

        tags = audio_file.tags or {}
        song = Song(
            ref=ref,
            artist=self._first_value(tags, 'artist'),
            title=self._first_value(tags, 'title') or "",
            album=self._first_value(tags, 'album'),
            duration_ms=int(getattr(getattr(audio_file, 'info', None), 'length', 0.0) * 1000),
        )
        self.logger.debug(f"Resolved '{ref}' -> artist {song.artist!r}")

        with self._lock:
            self._songs[ref] = song
        return song

    __call__ = resolve

    def _first_value(self, tags, key: str) -> Optional[str]:
        values = tags.get(key)
        if not values:
            return None
        value = str(values[0]).strip()
        return value or None

    def clear(self):
        """Forget memoised songs"""
        with self._lock:
            self._songs.clear()

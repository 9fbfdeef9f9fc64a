"""
Data models for Music Helper

Plain data structures handed to the helpers by the calling layer. All of
them are read-only from the helpers' point of view.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any


COLLECTION_ALBUM = "album"
COLLECTION_PLAYLIST = "playlist"


@dataclass(frozen=True)
class Song:
    """A resolved song; only the artist identifier matters to inference"""

    ref: str
    artist: Optional[str] = None
    title: str = ""
    album: Optional[str] = None
    duration_ms: int = 0


@dataclass
class SongCollection:
    """
    An album or playlist as seen by the helpers

    ``song_count`` is the declared size of the collection and may be larger
    than the number of references that actually resolve.
    """

    name: str = ""
    songs: List[Optional[str]] = field(default_factory=list)
    song_count: Optional[int] = None
    kind: str = COLLECTION_ALBUM

    def __post_init__(self):
        if self.song_count is None:
            self.song_count = len(self.songs)

    @property
    def is_playlist(self) -> bool:
        return self.kind == COLLECTION_PLAYLIST


@dataclass
class ArtistTally:
    """Occurrence counts per artist, in order of first appearance"""

    counts: Dict[Optional[str], int] = field(default_factory=dict)
    resolved: int = 0
    unresolved: int = 0
    null_refs: int = 0

    def add(self, artist: Optional[str]):
        self.counts[artist] = self.counts.get(artist, 0) + 1
        self.resolved += 1

    @property
    def skipped(self) -> int:
        return self.unresolved + self.null_refs

    def leader(self):
        """
        Return ``(artist, count)`` for the highest count, or ``None`` if empty

        Ties go to the artist seen first, since ``counts`` keeps insertion order.
        """
        best = None
        for artist, count in self.counts.items():
            if best is None or count > best[1]:
                best = (artist, count)
        return best

    def __bool__(self):
        return bool(self.counts)


@dataclass
class InferenceResult:
    """Outcome of a main-artist inference, with the numbers behind it"""

    artist: Optional[str] = None
    dominant: bool = False
    max_count: int = 0
    song_count: int = 0
    resolved: int = 0
    skipped: int = 0
    counts: Dict[Optional[str], int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            field.name: getattr(self, field.name)
            for field in self.__dataclass_fields__.values()
        }

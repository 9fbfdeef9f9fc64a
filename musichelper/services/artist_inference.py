"""
Main Artist Inference

Figures out which artist best represents an album or playlist from the
artist tags of its songs. A collection has a main artist when one artist
clearly dominates it; small collections always report their most frequent
artist.
"""

import threading
from typing import Callable, Dict, Any, Iterable, Optional, Union

from ..core.models import Song, SongCollection, ArtistTally, InferenceResult
from ..core.exceptions import UnresolvedReferenceError
from ..utils.logging_config import get_logger


DEFAULT_SMALL_COLLECTION_SIZE = 5
DEFAULT_MIN_DOMINANT_OCCURRENCES = 2

# A resolver maps a song reference to a Song (or directly to its artist
# identifier), and returns None or raises UnresolvedReferenceError when the
# song is not available.
Resolver = Callable[[str], Union[Song, str, None]]

logger = get_logger('inference')


def tally_artists(songs: Iterable[Optional[str]], resolve: Resolver, collection_name: str = "") -> ArtistTally:
    """
    Count artist occurrences over the resolvable songs of a collection

    Args:
        songs: Song references in collection order
        resolve: Resolver for a single reference
        collection_name: Name used in log messages

    Returns:
        ArtistTally keyed by artist identifier, None included
    """
    tally = ArtistTally()

    for ref in songs:
        if ref is None:
            logger.error(f"Collection '{collection_name}' contains null songs!")
            tally.null_refs += 1
            continue

        try:
            song = resolve(ref)
        except UnresolvedReferenceError as e:
            logger.debug(f"Skipping song in '{collection_name}': {e}")
            tally.unresolved += 1
            continue

        if song is None:
            logger.debug(f"Skipping unresolved song '{ref}' in '{collection_name}'")
            tally.unresolved += 1
            continue

        artist = song.artist if isinstance(song, Song) else song
        tally.add(artist)

    return tally


def decide_main_artist(tally: ArtistTally, song_count: int,
                       small_collection_size: int = DEFAULT_SMALL_COLLECTION_SIZE,
                       min_dominant_occurrences: int = DEFAULT_MIN_DOMINANT_OCCURRENCES) -> InferenceResult:
    """
    Apply the dominance rule to a tally

    With more than ``small_collection_size`` declared songs, the leading
    artist must occur at least ``min_dominant_occurrences`` times. Smaller
    collections accept any leader.
    """
    result = InferenceResult(
        song_count=song_count,
        resolved=tally.resolved,
        skipped=tally.skipped,
        counts=dict(tally.counts),
    )

    leader = tally.leader()
    if leader is None:
        return result

    artist, max_count = leader
    result.max_count = max_count

    if song_count <= small_collection_size or max_count >= min_dominant_occurrences:
        result.artist = artist
        result.dominant = True

    return result


def infer_main_artist(songs: Iterable[Optional[str]], resolve: Resolver, song_count: int,
                      small_collection_size: int = DEFAULT_SMALL_COLLECTION_SIZE,
                      min_dominant_occurrences: int = DEFAULT_MIN_DOMINANT_OCCURRENCES) -> Optional[str]:
    """
    Figure out the main artist of a collection based on its songs

    Unresolvable references are skipped. Songs without an artist are counted
    under None, so None is returned both when no artist dominates and when
    untagged songs do; use ArtistInferenceService.explain() to tell the two
    apart.

    Args:
        songs: Song references in collection order
        resolve: Resolver for a single reference
        song_count: Declared size of the collection

    Returns:
        The main artist identifier, or None if none
    """
    tally = tally_artists(songs, resolve)
    return decide_main_artist(tally, song_count, small_collection_size,
                              min_dominant_occurrences).artist


class ArtistInferenceService:
    """
    Main-artist inference over albums and playlists

    Features:
    - Configurable dominance thresholds
    - Per-call explanation of the decision
    - Inference statistics
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the inference service"""
        self.config = config or {}

        self.small_collection_size = int(self.config.get(
            'small_collection_size', DEFAULT_SMALL_COLLECTION_SIZE))
        self.min_dominant_occurrences = int(self.config.get(
            'min_dominant_occurrences', DEFAULT_MIN_DOMINANT_OCCURRENCES))

        self._lock = threading.Lock()
        self.stats = {
            'inferences': 0,
            'dominant': 0,
            'no_main_artist': 0,
            'skipped_references': 0
        }

    @classmethod
    def from_config(cls, helper_config) -> 'ArtistInferenceService':
        """Create from a HelperConfig"""
        return cls(helper_config.get_section('inference'))

    def explain(self, collection: SongCollection, resolve: Resolver) -> InferenceResult:
        """
        Infer the main artist of a collection and report how it was decided

        Args:
            collection: Album or playlist
            resolve: Resolver for the collection's song references

        Returns:
            InferenceResult with the winner, counts and skipped references
        """
        tally = tally_artists(collection.songs, resolve, collection.name)
        result = decide_main_artist(tally, collection.song_count,
                                    self.small_collection_size,
                                    self.min_dominant_occurrences)

        with self._lock:
            self.stats['inferences'] += 1
            self.stats['dominant' if result.dominant else 'no_main_artist'] += 1
            self.stats['skipped_references'] += result.skipped

        if result.dominant:
            logger.debug(f"{collection.kind.capitalize()} '{collection.name}': main artist "
                         f"{result.artist!r} with {result.max_count}/{result.song_count} songs")
        else:
            logger.debug(f"{collection.kind.capitalize()} '{collection.name}': no main artist "
                         f"(max {result.max_count}/{result.song_count})")

        return result

    def main_artist(self, collection: SongCollection, resolve: Resolver) -> Optional[str]:
        """Return the main artist of a collection, or None if none"""
        return self.explain(collection, resolve).artist

    def get_stats(self) -> Dict[str, Any]:
        """Get inference statistics"""
        with self._lock:
            return dict(self.stats)

"""
Artwork hand-off queue

Short-lived store for artwork passed between screens (e.g. an album cover
handed from a grid to the album detail view). The queue is owned by the
controller that creates it; there is no process-wide instance.
"""

import threading
from collections import OrderedDict
from typing import Any, Dict, Optional

from ..core.exceptions import InvalidArgumentError
from ..utils.logging_config import get_logger


class ArtworkQueue:
    """
    Keyed artwork store where reading an entry removes it

    Thread-safe. When ``max_items`` is set, the oldest entry is evicted once
    the queue is full.
    """

    def __init__(self, max_items: Optional[int] = None):
        if max_items is not None and max_items < 1:
            raise InvalidArgumentError("Artwork queue size must be positive", details=f"got {max_items}")

        self.max_items = max_items
        self.logger = get_logger('artwork')

        self._items: "OrderedDict[str, Any]" = OrderedDict()
        self._lock = threading.RLock()

        self.stats = {
            'queued': 0,
            'dequeued': 0,
            'misses': 0,
            'evictions': 0
        }

    @classmethod
    def from_config(cls, helper_config) -> 'ArtworkQueue':
        """Create from a HelperConfig"""
        return cls(max_items=helper_config.get('artwork', 'max_items'))

    def queue(self, key: str, artwork: Any):
        """Temporarily store artwork under a key, replacing any previous entry"""
        with self._lock:
            self._items.pop(key, None)
            self._items[key] = artwork
            self.stats['queued'] += 1

            if self.max_items is not None:
                while len(self._items) > self.max_items:
                    evicted, _ = self._items.popitem(last=False)
                    self.stats['evictions'] += 1
                    self.logger.debug(f"Artwork queue full, evicted '{evicted}'")

    def dequeue(self, key: str) -> Optional[Any]:
        """Retrieve artwork from the queue and remove it"""
        with self._lock:
            if key not in self._items:
                self.stats['misses'] += 1
                return None
            self.stats['dequeued'] += 1
            return self._items.pop(key)

    def peek(self, key: str) -> Optional[Any]:
        """Retrieve artwork without removing it"""
        with self._lock:
            return self._items.get(key)

    def clear(self):
        with self._lock:
            self._items.clear()

    def __len__(self):
        with self._lock:
            return len(self._items)

    def __contains__(self, key):
        with self._lock:
            return key in self._items

    def get_stats(self) -> Dict[str, Any]:
        """Get queue statistics"""
        with self._lock:
            stats = dict(self.stats)
            stats['size'] = len(self._items)
            return stats

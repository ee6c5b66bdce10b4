import threading
from typing import Optional

from ...domain.entities.track import TrackRecord


class CurrentTrackStore:
    """Single-slot holder of the current track (empty until the first set)."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: Optional[TrackRecord] = None

    def get(self) -> Optional[TrackRecord]:
        with self._lock:
            return self._current

    def set(self, track: TrackRecord) -> None:
        with self._lock:
            self._current = track

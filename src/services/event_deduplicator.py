"""Drops repeated notifications for the same file event."""

import threading
import time
from typing import Callable, Dict, Hashable, Iterable, Tuple


class DuplicateEventFilter:
    """
    Remembers the last event signature seen for each path.

    Some asset stores fire the same hook more than once for a single user
    action. An event is reported as a duplicate only when it is the latest
    event recorded for every path it touches, less than ``window`` seconds
    ago. Any other event on one of those paths replaces the record, so a
    file that is uploaded, deleted and uploaded again is committed each
    time. A window of 0 disables the filter.
    """

    def __init__(
        self, window: float = 2.0, clock: Callable[[], float] = time.monotonic
    ):
        self.window = window
        self.clock = clock
        self._last: Dict[str, Tuple[Hashable, float]] = {}
        self._lock = threading.Lock()

    def is_duplicate(self, signature: Hashable, paths: Iterable[str]) -> bool:
        """Record ``signature`` for ``paths`` and tell whether it repeats the last event."""
        if self.window <= 0:
            return False
        paths = list(paths)
        now = self.clock()
        with self._lock:
            self._last = {
                path: (last, seen_at)
                for path, (last, seen_at) in self._last.items()
                if now - seen_at < self.window
            }
            duplicate = bool(paths) and all(
                path in self._last and self._last[path][0] == signature
                for path in paths
            )
            for path in paths:
                self._last[path] = (signature, now)
        return duplicate

    def forget(self, signature: Hashable, paths: Iterable[str]) -> None:
        """Drop ``signature`` so that a retry of a failed event is not swallowed."""
        with self._lock:
            for path in paths:
                if path in self._last and self._last[path][0] == signature:
                    del self._last[path]

    def clear(self) -> None:
        with self._lock:
            self._last.clear()

"""In-memory store for rendered HTTP responses."""
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional


@dataclass(frozen=True)
class CachedResponse:
    """A fully rendered response as it was sent to the client."""

    status_code: int
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)
    stored_at: float = 0.0


class ResponseCache:
    """
    Whole-response cache with a fixed time-to-live.

    An entry is served for ``ttl`` seconds after it was stored and never
    after that. Expired entries are dropped lazily on lookup, and the whole
    store is swept for expired entries at most once every ``sweep_interval``
    seconds. ``clock`` returns seconds and can be replaced in tests.
    """

    def __init__(
        self,
        ttl: float = 300.0,
        sweep_interval: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl
        self.sweep_interval = sweep_interval
        self.clock = clock
        self._entries: Dict[str, CachedResponse] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def _expired(self, entry: CachedResponse, now: float) -> bool:
        return now - entry.stored_at >= self.ttl

    def _maybe_sweep(self, now: float) -> None:
        if now - self._last_sweep < self.sweep_interval:
            return
        self._last_sweep = now
        for key in [k for k, e in self._entries.items() if self._expired(e, now)]:
            del self._entries[key]

    def get(self, key: str) -> Optional[CachedResponse]:
        """Return the fresh entry for ``key``, or None."""
        with self._lock:
            now = self.clock()
            self._maybe_sweep(now)
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._expired(entry, now):
                del self._entries[key]
                return None
            return entry

    def set(
        self,
        key: str,
        status_code: int,
        body: bytes,
        headers: Optional[Dict[str, str]] = None,
    ) -> CachedResponse:
        with self._lock:
            now = self.clock()
            self._maybe_sweep(now)
            entry = CachedResponse(
                status_code=status_code,
                body=body,
                headers=dict(headers or {}),
                stored_at=now,
            )
            self._entries[key] = entry
            return entry

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

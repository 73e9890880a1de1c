"""
Report Cache — Per-path FileReport cache validated by content hash.

One entry per path, holding the SHA-256 of the content it was built from. A
lookup with different content is a miss, so an edited file is never served a
stale report. Lives in the caller layer; the analysis core has no caches.
"""

from __future__ import annotations

import hashlib
import threading
import time
from dataclasses import dataclass, field
from typing import Any

from inspector.config import settings
from inspector.models.report_models import FileReport


@dataclass
class CacheEntry:
    content_hash: str
    report: FileReport
    ttl_seconds: float
    stored_at: float = field(default_factory=time.monotonic)

    @property
    def is_expired(self) -> bool:
        return time.monotonic() - self.stored_at > self.ttl_seconds


class ReportCache:
    """Thread-safe in-memory cache; the API runs workers on a thread pool."""

    def __init__(self, ttl_seconds: float | None = None, max_entries: int | None = None) -> None:
        self.ttl_seconds = settings.cache_ttl_seconds if ttl_seconds is None else ttl_seconds
        self.max_entries = max(1, max_entries or settings.cache_max_entries)
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def hash_content(content: str) -> str:
        # surrogatepass: content that cannot be strict-UTF-8 encoded still hashes
        return hashlib.sha256(content.encode("utf-8", errors="surrogatepass")).hexdigest()

    def get(self, file_path: str, content: str) -> FileReport | None:
        """Cached report for ``file_path`` if it was built from ``content`` and is fresh."""
        content_hash = self.hash_content(content)
        with self._lock:
            entry = self._entries.get(file_path)
            if entry is not None and entry.is_expired:
                del self._entries[file_path]
                entry = None

            if entry is None or entry.content_hash != content_hash:
                self._misses += 1
                return None

            self._hits += 1
            return entry.report

    def put(self, file_path: str, content: str, report: FileReport) -> None:
        """Store ``report``, replacing whatever was cached for ``file_path``.

        Expired entries are purged first; past ``max_entries`` the least
        recently stored path is evicted.
        """
        entry = CacheEntry(
            content_hash=self.hash_content(content),
            report=report,
            ttl_seconds=self.ttl_seconds,
        )
        with self._lock:
            self._purge_expired()
            self._entries.pop(file_path, None)
            while len(self._entries) >= self.max_entries:
                del self._entries[next(iter(self._entries))]
            self._entries[file_path] = entry

    def _purge_expired(self) -> None:
        for path in [p for p, entry in self._entries.items() if entry.is_expired]:
            del self._entries[path]

    def invalidate(self, file_path: str) -> bool:
        """Drop the entry for ``file_path``. Returns whether one existed."""
        with self._lock:
            return self._entries.pop(file_path, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = 0

    @property
    def size(self) -> int:
        return len(self._entries)

    def stats(self) -> dict[str, Any]:
        with self._lock:
            expired = sum(1 for entry in self._entries.values() if entry.is_expired)
            return {
                "entries": len(self._entries),
                "expired": expired,
                "hits": self._hits,
                "misses": self._misses,
            }

"""In-memory analysis cache: LRU bounded, 24h TTL per entry.

Entries expire by insertion age even if recently read. Concurrent misses for
the same address may both reach upstreams (no single-flight).
"""

import time
from collections.abc import Callable

from cachetools import TTLCache

from montoks.models.token import TokenRecord

DEFAULT_MAX_ENTRIES = 100
DEFAULT_TTL_SEC = 24 * 60 * 60


class TokenCache:
    """Address-keyed store of assembled token records."""

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        ttl: float = DEFAULT_TTL_SEC,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: TTLCache[str, TokenRecord] = TTLCache(
            maxsize=max_entries, ttl=ttl, timer=timer
        )

    @staticmethod
    def _key(address: str) -> str:
        return address.lower()

    def get(self, address: str) -> TokenRecord | None:
        """Return a private copy of the cached record, or None."""
        record = self._entries.get(self._key(address))
        if record is None:
            return None
        return record.model_copy(deep=True)

    def set(self, address: str, record: TokenRecord) -> None:
        self._entries[self._key(address)] = record.model_copy(deep=True)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, address: str) -> bool:
        return self._key(address) in self._entries

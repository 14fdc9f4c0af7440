"""Session response cache.

Maps a request's cache key to the raw JSON payload the API returned for it.
Entries are never evicted. Stored payloads are pre-decode, so the same entry
can be decoded again with a different document decoder.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Cache(BaseModel):
    """Immutable mapping; updates return a new Cache."""

    model_config = ConfigDict(frozen=True)

    entries: dict[str, Any] = {}

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Any = None) -> Any:
        return self.entries.get(key, default)

    def with_entry(self, key: str, raw: Any) -> "Cache":
        return Cache(entries={**self.entries, key: raw})


def merge_caches(a: Cache, b: Cache) -> Cache:
    """Union of both caches; ``b`` wins where both hold a key."""
    return Cache(entries={**a.entries, **b.entries})

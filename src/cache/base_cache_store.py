# src/cache/base_cache_store.py - v2
"""Abstract cache store interface.

A store exclusively owns reading and writing cache record files. Reads never
raise: anything short of a well-formed record is reported as a miss.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from faviconcache.cache.models import CacheRecord


class BaseCacheStore(ABC):
    """Unified interface for cache record storage."""

    @abstractmethod
    async def load(self, path: str) -> CacheRecord | None:
        """Read the record stored at path, or None if absent or malformed."""

    @abstractmethod
    async def save(self, path: str, record: CacheRecord) -> None:
        """Write record to path, replacing any previous record.

        Raises:
            CacheWriteError: If the record could not be persisted.
        """

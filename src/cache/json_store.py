# src/cache/json_store.py - v2
"""JSON file cache store: one `<prefix>.cache` record next to the emitted icons.

Records are read and written through the output writer, so the cache lives
wherever the build output lives (local disk or S3) and directory creation
stays the writer's job.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from faviconcache.cache.base_cache_store import BaseCacheStore
from faviconcache.cache.models import CacheRecord
from faviconcache.core.errors import CacheReadError, CacheWriteError
from faviconcache.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)


class JsonCacheStore(BaseCacheStore):
    """Cache store persisting records as UTF-8 JSON via an output writer."""

    def __init__(self, writer: BaseOutputWriter) -> None:
        self._writer = writer

    async def load(self, path: str) -> CacheRecord | None:
        """Retrieve the record at path; any read failure counts as a miss."""
        try:
            return await self._read_record(path)
        except CacheReadError as e:
            logger.debug("Cache miss for %s: %s", path, e)
            return None

    async def save(self, path: str, record: CacheRecord) -> None:
        """Store a record, overwriting the previous one."""
        try:
            await self._writer.write(path, record.to_json())
        except Exception as e:
            raise CacheWriteError(f"Failed to write cache record {path}: {e}") from e
        logger.debug("Cache record written: %s", path)

    async def _read_record(self, path: str) -> CacheRecord:
        try:
            if not await self._writer.exists(path):
                raise CacheReadError("no cache file")
            raw = await self._writer.read(path)
        except CacheReadError:
            raise
        except Exception as e:
            raise CacheReadError(f"unreadable cache file: {e}") from e

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CacheReadError("cache file is not valid UTF-8") from e

        try:
            return CacheRecord.model_validate_json(text)
        except ValidationError as e:
            logger.warning(
                "Ignoring malformed cache record %s (%d errors)", path, e.error_count()
            )
            raise CacheReadError("malformed cache record") from e

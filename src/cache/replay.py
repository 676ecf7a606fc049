# src/cache/replay.py - v2
"""Replay a valid cache record into the build output.

Artifact records carry every emitted file and are re-emitted in their
original order. Descriptor records only carry the result, so the files
must already be present in the output from an earlier build.
"""

from __future__ import annotations

import logging

from faviconcache.cache.models import CacheRecord
from faviconcache.core.errors import OutputWriteError
from faviconcache.core.models import GenerationResult
from faviconcache.storage.base_output_writer import BaseOutputWriter

logger = logging.getLogger(__name__)


async def replay(record: CacheRecord, writer: BaseOutputWriter) -> GenerationResult:
    """Re-emit cached files and return the cached result unchanged.

    Raises:
        OutputWriteError: If a cached file cannot be written.
    """
    if record.assets is not None:
        for asset in record.assets:
            try:
                await writer.write(asset.name, asset.data)
            except Exception as e:
                raise OutputWriteError(f"Failed to replay {asset.name}: {e}") from e
        logger.debug("Replayed %d cached files", len(record.assets))
    else:
        missing = [path for path in record.result.files if not await writer.exists(path)]
        if missing:
            logger.warning(
                "Descriptor cache hit but %d of %d files are missing from the output "
                "(first: %s)",
                len(missing), len(record.result.files), missing[0],
            )

    return record.result.model_copy(deep=True)

# src/cache/validator.py - v2
"""Cache record validation.

A record is reusable only when the tool version, the fingerprint and every
output-relevant configuration field match exactly. There is no partial reuse.
In artifact mode the record must also carry every file it lists, each one
under the record's own output prefix.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from faviconcache.cache.models import CacheCheck, CacheRecord
from faviconcache.core.models import IconConfig


def check_record(
    record: CacheRecord | None,
    fingerprint: str,
    config: IconConfig,
    tool_version: str,
    cache_mode: str = "artifact",
) -> CacheCheck:
    """Validate a loaded record and report why it was rejected."""
    if record is None:
        return CacheCheck(reason="no cache record")

    if record.version != tool_version:
        return CacheCheck(
            reason=f"version changed ({record.version} -> {tool_version})"
        )

    if record.file_hash != fingerprint:
        return CacheCheck(reason="fingerprint changed")

    current = config.relevant_options()
    changed = sorted(
        key
        for key in set(current) | set(record.options)
        if record.options.get(key) != current.get(key)
    )
    if changed:
        return CacheCheck(reason=f"options changed: {', '.join(changed)}")

    if record.assets is None:
        if cache_mode == "artifact":
            return CacheCheck(reason="record has no cached assets")
        return CacheCheck(is_valid=True)

    if [asset.name for asset in record.assets] != record.result.files:
        return CacheCheck(reason="cached assets do not match result files")

    prefix = record.result.output_file_prefix
    for asset in record.assets:
        if not _is_under_prefix(asset.name, prefix):
            return CacheCheck(reason=f"cached asset outside output prefix: {asset.name}")

    return CacheCheck(is_valid=True)


def is_valid(
    record: CacheRecord | None,
    fingerprint: str,
    config: IconConfig,
    tool_version: str,
    cache_mode: str = "artifact",
) -> bool:
    """True iff the record can be replayed for the current request."""
    return check_record(record, fingerprint, config, tool_version, cache_mode).is_valid


def _is_under_prefix(name: str, prefix: str) -> bool:
    path = PurePosixPath(name)
    if path.is_absolute() or ".." in path.parts or "\\" in name:
        return False
    return name.startswith(prefix) and ".." not in PurePosixPath(prefix).parts

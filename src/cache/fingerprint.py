# src/cache/fingerprint.py - v1
"""Deterministic fingerprinting of a (source image, icon configuration) pair.

The fingerprint is both the cache key stored in CacheRecord.fileHash and a
stable identifier across process restarts: it only depends on the raw bytes
and the canonical JSON of the output-relevant configuration.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from faviconcache.core.models import IconConfig

DEFAULT_FINGERPRINT_LENGTH = 32


def compute_fingerprint(
    content: bytes,
    config: IconConfig,
    length: int = DEFAULT_FINGERPRINT_LENGTH,
) -> str:
    """Compute the fingerprint of source bytes plus relevant configuration.

    Args:
        content: Raw source image bytes.
        config: Icon configuration; only relevant_options() feeds the hash.
        length: Number of hex characters kept (1-64).

    Returns:
        Lowercase hex string of `length` characters.
    """
    if not 0 < length <= 64:
        raise ValueError(f"Fingerprint length must be in 1..64, got {length}")

    digest = hashlib.sha256()
    digest.update(content)
    digest.update(b"\0")
    digest.update(canonical_json(config.relevant_options()).encode("utf-8"))
    return digest.hexdigest()[:length]


def content_hash(
    content: bytes,
    algorithm: str = "md5",
    length: int | None = None,
) -> str:
    """Hex digest of the raw content, used for `[hash]` path placeholders."""
    try:
        h = hashlib.new(algorithm, content)
    except ValueError as e:
        raise ValueError(f"Unsupported hash algorithm: {algorithm!r}") from e
    hexdigest = h.hexdigest()
    return hexdigest[:length] if length else hexdigest


def canonical_json(data: Any) -> str:
    """Key-sorted, whitespace-free JSON so equal dicts hash equally."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)

# src/storage/naming.py - v1
"""Output path naming: interpolate a prefix template against the source.

Supported placeholders:
    [hash]            md5 hex digest of the content
    [hash:N]          first N characters of the md5 digest
    [algo:hash]       digest with another hashlib algorithm (e.g. sha256)
    [algo:hash:N]     truncated digest with another algorithm
    [name]            source file stem ("file" when unknown)
    [ext]             source file extension without dot ("bin" when unknown)
"""

from __future__ import annotations

import re
from pathlib import PurePath

from faviconcache.cache.fingerprint import content_hash

_HASH_RE = re.compile(r"\[(?:(?P<algo>[a-z0-9_]+):)?hash(?::(?P<length>\d+))?\]", re.IGNORECASE)

DEFAULT_NAME = "file"
DEFAULT_EXT = "bin"


def interpolate_name(
    template: str,
    content: bytes,
    resource_path: str | PurePath | None = None,
) -> str:
    """Return the output path prefix for `content` under `template`.

    Deterministic: the same template, content and resource path always
    produce the same prefix.
    """
    if resource_path is not None:
        p = PurePath(resource_path)
        name = p.stem or DEFAULT_NAME
        ext = p.suffix.lstrip(".") or DEFAULT_EXT
    else:
        name, ext = DEFAULT_NAME, DEFAULT_EXT

    def _hash(match: re.Match[str]) -> str:
        algo = (match.group("algo") or "md5").lower()
        length = match.group("length")
        return content_hash(content, algorithm=algo, length=int(length) if length else None)

    result = _HASH_RE.sub(_hash, template)
    return result.replace("[name]", name).replace("[ext]", ext)

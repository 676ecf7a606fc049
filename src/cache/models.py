# src/cache/models.py - v1
"""Cache domain models: CacheRecord, CachedAsset, CacheCheck.

The JSON form of CacheRecord is the on-disk `<prefix>.cache` format:
{version, options, fileHash, result} plus `assets` in artifact mode.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from faviconcache.core.models import GenerationResult


class CachedAsset(BaseModel):
    """One emitted file, stored so a cache hit can re-emit it."""

    name: str
    contents: str  # base64

    @field_validator("contents")
    @classmethod
    def validate_base64(cls, v: str) -> str:
        try:
            base64.b64decode(v, validate=True)
        except binascii.Error as e:
            raise ValueError("contents must be base64") from e
        return v

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> CachedAsset:
        return cls(name=name, contents=base64.b64encode(data).decode("ascii"))

    @property
    def data(self) -> bytes:
        return base64.b64decode(self.contents, validate=True)


class CacheRecord(BaseModel):
    """Persisted record linking a fingerprint to a previous result."""

    model_config = ConfigDict(populate_by_name=True)

    version: str
    file_hash: str = Field(alias="fileHash")
    options: dict[str, Any]
    result: GenerationResult
    assets: list[CachedAsset] | None = None

    def to_json(self) -> str:
        """Serialize with public key names, omitting `assets` when absent."""
        exclude = {"assets"} if self.assets is None else None
        return self.model_dump_json(by_alias=True, exclude=exclude, indent=2)


class CacheCheck(BaseModel):
    """Outcome of validating a record against the current request."""

    is_valid: bool = False
    reason: str | None = None

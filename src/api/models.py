# src/api/models.py - v2
"""API-level models returned by the transform facade."""

from __future__ import annotations

from pydantic import BaseModel

from faviconcache.core.models import GenerationResult


class TransformOutput(BaseModel):
    """Return value of facade.transform()."""

    result: GenerationResult
    cache_hit: bool
    fingerprint: str
    cache_file: str

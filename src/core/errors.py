# src/core/errors.py - v2
"""Error taxonomy for the icon transform.

ConfigError, GenerationError and OutputWriteError terminate a transform.
Cache-layer errors are caught inside the package and degrade to a full
regeneration.
"""

from __future__ import annotations


class FaviconCacheError(Exception):
    """Base class for all faviconcache errors."""


class ConfigError(FaviconCacheError):
    """A required collaborator (writer, generator) is missing."""


class CacheReadError(FaviconCacheError):
    """Cache record missing, unreadable or malformed. Treated as a miss."""


class CacheWriteError(FaviconCacheError):
    """Persisting a cache record failed after a successful generation."""


class GenerationError(FaviconCacheError):
    """The external icon generator failed. No partial result is emitted."""


class OutputWriteError(FaviconCacheError):
    """An icon file could not be written through the output writer."""

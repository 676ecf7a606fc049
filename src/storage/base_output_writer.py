# src/storage/base_output_writer.py - v2
"""Abstract output writer: the port through which generated files are emitted.

Paths are relative to the build output root. Writers create any missing
parent directories themselves; callers never do.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseOutputWriter(ABC):
    """Unified interface for build output backends."""

    @abstractmethod
    async def write(self, path: str, content: bytes | str) -> None:
        """Write content to the given path, overwriting existing content."""

    @abstractmethod
    async def read(self, path: str) -> bytes:
        """Read content from the given path."""

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if path exists."""

# src/storage/local_writer.py - v3
"""Local filesystem output writer (default backend)."""

from __future__ import annotations

from pathlib import Path

from faviconcache.storage.base_output_writer import BaseOutputWriter


class LocalWriter(BaseOutputWriter):
    """Write build outputs to the local filesystem."""

    def __init__(self, base_path: str | Path | None = None) -> None:
        """Initialize with optional base path.

        Args:
            base_path: Root directory for all writes. If None, paths are
                resolved against the current directory.
        """
        self._base = Path(base_path) if base_path else None

    @property
    def base_path(self) -> Path | None:
        return self._base

    def _resolve(self, path: str) -> Path:
        """Resolve a path relative to base_path."""
        if self._base is not None:
            return self._base / path
        return Path(path)

    async def write(self, path: str, content: bytes | str) -> None:
        """Write content to a local file path."""
        p = self._resolve(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            p.write_bytes(content)
        else:
            p.write_text(content, encoding="utf-8")

    async def read(self, path: str) -> bytes:
        """Read content from a local file path."""
        return self._resolve(path).read_bytes()

    async def exists(self, path: str) -> bool:
        """Check if a local path exists."""
        return self._resolve(path).exists()

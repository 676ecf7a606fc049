# tests/unit/cache/test_unit_replay.py - v2
"""Tests for cache/replay.py - re-emitting cached output."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from faviconcache.cache.models import CachedAsset, CacheRecord
from faviconcache.cache.replay import replay
from faviconcache.core.errors import OutputWriteError
from faviconcache.core.models import GenerationResult

RESULT = GenerationResult(
    output_file_prefix="icons-abc/",
    html=['<link rel="icon" href="icons-abc/favicon.ico">'],
    files=["icons-abc/favicon.ico", "icons-abc/manifest.json"],
)


def _record(with_assets: bool) -> CacheRecord:
    assets = None
    if with_assets:
        assets = [
            CachedAsset.from_bytes("icons-abc/favicon.ico", b"\x00\x00\x01\x00ico"),
            CachedAsset.from_bytes("icons-abc/manifest.json", b'{"name": "Test"}'),
        ]
    return CacheRecord(
        version="0.1.0", file_hash="abc", options={}, result=RESULT, assets=assets
    )


class TestReplay:
    @pytest.mark.asyncio
    async def test_artifact_replay_restores_files(self, writer, output_dir: Path):
        result = await replay(_record(with_assets=True), writer)
        assert result == RESULT
        assert (output_dir / "icons-abc/favicon.ico").read_bytes() == b"\x00\x00\x01\x00ico"
        assert (output_dir / "icons-abc/manifest.json").read_bytes() == b'{"name": "Test"}'

    @pytest.mark.asyncio
    async def test_result_is_a_copy(self, writer):
        record = _record(with_assets=True)
        result = await replay(record, writer)
        result.files.append("other")
        assert record.result.files == RESULT.files

    @pytest.mark.asyncio
    async def test_descriptor_replay_returns_result(self, writer, output_dir: Path):
        for name in RESULT.files:
            (output_dir / name).parent.mkdir(parents=True, exist_ok=True)
            (output_dir / name).write_bytes(b"x")
        result = await replay(_record(with_assets=False), writer)
        assert result.to_json_dict() == RESULT.to_json_dict()

    @pytest.mark.asyncio
    async def test_descriptor_replay_warns_on_missing_files(self, writer, output_dir, caplog):
        with caplog.at_level(logging.WARNING, logger="faviconcache.cache.replay"):
            result = await replay(_record(with_assets=False), writer)
        assert result == RESULT
        assert "2 of 2 files are missing" in caplog.text
        assert not (output_dir / "icons-abc/favicon.ico").exists()

    @pytest.mark.asyncio
    async def test_write_failure_raises_output_write_error(self):
        writer = MagicMock()
        writer.write = AsyncMock(side_effect=OSError("disk full"))
        with pytest.raises(OutputWriteError, match="icons-abc/favicon.ico") as exc_info:
            await replay(_record(with_assets=True), writer)
        assert isinstance(exc_info.value.__cause__, OSError)

# tests/conftest.py - v2
"""Shared test fixtures for all unit tests.

Provides a sample logo, icon configuration, a mock icon generator and a
local output directory. No image rendering happens in tests.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from faviconcache.config.settings import Settings
from faviconcache.core.models import GeneratedFile, GeneratorOutput, IconConfig
from faviconcache.logging.context import clear_context
from faviconcache.storage.local_writer import LocalWriter

# Minimal PNG signature followed by a fake IHDR chunk; enough for hashing.
LOGO_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x01\x00\x00\x00\x01\x00"


# === FIXTURES: Inputs ===


@pytest.fixture
def logo_bytes() -> bytes:
    """Bytes standing in for logo.png."""
    return LOGO_BYTES


@pytest.fixture
def icon_config() -> IconConfig:
    """The scenario configuration: favicon only, white background."""
    return IconConfig(
        icons=["favicons"],
        background="#fff",
        manifest={"appName": "Test"},
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated from any .env file or FAVICONS_* variables."""
    return Settings(_env_file=None, output_path=tmp_path / "dist")


# === FIXTURES: Collaborators ===


@pytest.fixture
def generator_output() -> GeneratorOutput:
    """What a real generator returns for the scenario configuration."""
    return GeneratorOutput(
        html=[
            '<link rel="icon" type="image/x-icon" href="favicon.ico">',
            '<link rel="icon" type="image/png" sizes="32x32" href="favicon-32x32.png">',
            '<link rel="manifest" href="manifest.json">',
        ],
        images=[
            GeneratedFile(name="favicon.ico", contents=b"\x00\x00\x01\x00ico-data"),
            GeneratedFile(name="favicon-32x32.png", contents=b"\x89PNG-32x32"),
        ],
        files=[
            GeneratedFile(name="manifest.json", contents=b'{"name": "Test"}'),
        ],
    )


@pytest.fixture
def mock_generator(generator_output: GeneratorOutput) -> MagicMock:
    """Mock BaseIconGenerator returning generator_output."""
    generator = MagicMock()
    generator.generate = AsyncMock(return_value=generator_output)
    generator.name = "mock"
    return generator


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Build output directory (not created: writers create it)."""
    return tmp_path / "dist"


@pytest.fixture
def writer(output_dir: Path) -> LocalWriter:
    """Local writer rooted at output_dir."""
    return LocalWriter(base_path=output_dir)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()

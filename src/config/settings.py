# src/config/settings.py - v2
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings. Every variable
is read with the FAVICONS_ prefix (e.g. FAVICONS_PUBLIC_PATH=/static/).
Icon configuration files are parsed into IconConfig by load_icon_config().
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from faviconcache.core.models import IconConfig


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_prefix="FAVICONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Output ===
    output_path: Path = Path("./dist")
    output_file_prefix: str = "icons-[hash]/"
    public_path: str = ""
    output_writer: Literal["local", "s3"] = "local"
    output_s3_bucket: str = ""
    output_s3_prefix: str = ""
    output_s3_region: str = ""

    # === Cache ===
    persistent_cache: bool = True
    cache_mode: Literal["artifact", "descriptor"] = "artifact"
    fingerprint_length: int = 32

    # === Stats ===
    emit_stats: bool = False
    stats_filename: str = "iconstats.json"

    # === Generator ===
    icon_generator: str = ""

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("output_file_prefix")
    @classmethod
    def validate_output_file_prefix(cls, v: str) -> str:
        """Prefix must be a relative path fragment."""
        if not v:
            raise ValueError("output_file_prefix must not be empty")
        if v.startswith("/"):
            raise ValueError("output_file_prefix must be relative")
        return v

    @field_validator("fingerprint_length")
    @classmethod
    def validate_fingerprint_length(cls, v: int) -> int:
        if not 8 <= v <= 64:
            raise ValueError("fingerprint_length must be between 8 and 64")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.output_writer == "s3" and not self.output_s3_bucket:
            errors.append("OUTPUT_WRITER=s3 requires OUTPUT_S3_BUCKET")

        if self.emit_stats and not self.stats_filename.strip():
            errors.append("EMIT_STATS requires a non-empty STATS_FILENAME")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def normalized_public_path(self) -> str:
        """Public path with a trailing slash (empty stays empty)."""
        if self.public_path and not self.public_path.endswith("/"):
            return self.public_path + "/"
        return self.public_path


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or per-build config).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]


def load_icon_config(path: Path | str | None = None) -> IconConfig:
    """Load an icon configuration JSON file; defaults when path is None.

    Raises:
        ConfigurationError: If the file is missing or fails validation.
    """
    if path is None:
        return IconConfig()
    p = Path(path)
    try:
        return IconConfig.model_validate_json(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read icon config {p}: {e}") from e
    except ValidationError as e:
        raise ConfigurationError(f"Invalid icon config {p}: {e}") from e

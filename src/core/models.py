# src/core/models.py - v2
"""Shared Pydantic domain models: icon configuration and generation output.

No module redefines these types; all imports come from core.models.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Platforms rendered when the caller does not restrict the icon set.
DEFAULT_ICONS: tuple[str, ...] = (
    "android",
    "appleIcon",
    "appleStartup",
    "coast",
    "favicons",
    "firefox",
    "windows",
    "yandex",
)


# === CONFIGURATION ===


class ManifestConfig(BaseModel):
    """Web app manifest fields forwarded to the generator.

    Field names follow the generator's option names (camelCase aliases).
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    app_name: str | None = Field(default=None, alias="appName")
    app_short_name: str | None = Field(default=None, alias="appShortName")
    app_description: str | None = Field(default=None, alias="appDescription")
    developer_name: str | None = Field(default=None, alias="developerName")
    developer_url: str | None = Field(default=None, alias="developerURL")
    dir: str | None = None
    lang: str | None = None
    theme_color: str | None = None
    apple_status_bar_style: str | None = Field(
        default=None, alias="appleStatusBarStyle"
    )
    display: str | None = None
    orientation: str | None = None
    scope: str | None = None
    start_url: str | None = None
    version: str | None = None
    load_manifest_with_credentials: bool | None = Field(
        default=None, alias="loadManifestWithCredentials"
    )

    def as_options(self) -> dict[str, Any]:
        """Return every manifest field keyed by its generator option name."""
        return self.model_dump(by_alias=True)


class IconConfig(BaseModel):
    """Typed icon configuration, validated once at the boundary."""

    model_config = ConfigDict(extra="forbid")

    icons: dict[str, bool] = Field(
        default_factory=lambda: {name: True for name in DEFAULT_ICONS}
    )
    background: str = "#fff"
    manifest: ManifestConfig = Field(default_factory=ManifestConfig)

    @field_validator("icons", mode="before")
    @classmethod
    def normalize_icons(cls, v: Any) -> Any:
        """Accept a list of platform names as shorthand for {name: True}."""
        if isinstance(v, (list, tuple)):
            return {str(name): True for name in v}
        return v

    def relevant_options(self) -> dict[str, Any]:
        """Configuration snapshot that affects generated output.

        Stored in cache records and compared field-by-field on lookup.
        """
        return {
            "icons": dict(sorted(self.icons.items())),
            "background": self.background,
            "manifest": self.manifest.as_options(),
        }

    def to_generator_options(self) -> dict[str, Any]:
        """Flat configuration object handed to the icon generator."""
        options: dict[str, Any] = {
            "path": "",
            "url": "",
            "icons": dict(self.icons),
            "background": self.background,
        }
        options.update(self.manifest.as_options())
        return options


# === GENERATION ===


class GeneratedFile(BaseModel):
    """A single file produced by the icon generator."""

    name: str
    contents: bytes


class GeneratorOutput(BaseModel):
    """Raw output of one icon generator run."""

    html: list[str] = Field(default_factory=list)
    images: list[GeneratedFile] = Field(default_factory=list)
    files: list[GeneratedFile] = Field(default_factory=list)


class GenerationResult(BaseModel):
    """Structured result of a transform, fresh or replayed.

    Serialized with camelCase keys so the JSON matches what host build
    tools consume.
    """

    model_config = ConfigDict(populate_by_name=True)

    output_file_prefix: str = Field(alias="outputFilePrefix")
    html: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)

    def to_json_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-ready dict with public key names."""
        return self.model_dump(by_alias=True)

# tests/unit/core/test_unit_models.py - v3
"""Tests for core/models.py - icon configuration and generation models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from faviconcache.core.models import (
    DEFAULT_ICONS,
    GenerationResult,
    IconConfig,
    ManifestConfig,
)

GENERATOR_FIELDS = {
    "path", "url", "icons", "background", "appName", "appShortName",
    "appDescription", "developerName", "developerURL", "dir", "lang",
    "theme_color", "appleStatusBarStyle", "display", "orientation", "scope",
    "start_url", "version", "loadManifestWithCredentials",
}


class TestIconConfig:
    def test_defaults(self):
        cfg = IconConfig()
        assert cfg.background == "#fff"
        assert cfg.icons == {name: True for name in DEFAULT_ICONS}

    def test_icon_list_shorthand(self):
        cfg = IconConfig(icons=["favicons", "android"])
        assert cfg.icons == {"favicons": True, "android": True}
        assert cfg.relevant_options()["icons"] == {"android": True, "favicons": True}

    def test_icon_mapping_with_disabled(self):
        cfg = IconConfig(icons={"favicons": True, "windows": False})
        assert cfg.icons == {"favicons": True, "windows": False}

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            IconConfig(backgroud="#000")  # type: ignore[call-arg]

    def test_relevant_options_shape(self):
        cfg = IconConfig(icons=["favicons"], manifest={"appName": "Test"})
        options = cfg.relevant_options()
        assert set(options) == {"icons", "background", "manifest"}
        assert options["manifest"]["appName"] == "Test"
        assert options["manifest"]["lang"] is None

    def test_relevant_options_ignore_icon_order(self):
        a = IconConfig(icons=["favicons", "android"])
        b = IconConfig(icons=["android", "favicons"])
        assert a.relevant_options() == b.relevant_options()

    def test_generator_options_fields(self):
        cfg = IconConfig(manifest={"appName": "App", "theme_color": "#aaa"})
        options = cfg.to_generator_options()
        assert set(options) == GENERATOR_FIELDS
        assert options["path"] == ""
        assert options["appName"] == "App"
        assert options["theme_color"] == "#aaa"


class TestManifestConfig:
    def test_alias_and_field_name(self):
        by_alias = ManifestConfig(developerURL="https://example.org")
        by_name = ManifestConfig(developer_url="https://example.org")
        assert by_alias == by_name
        assert by_alias.as_options()["developerURL"] == "https://example.org"

    def test_unknown_manifest_field_rejected(self):
        with pytest.raises(ValidationError):
            ManifestConfig(appname="x")  # type: ignore[call-arg]


class TestGenerationResult:
    def test_json_uses_public_names(self):
        r = GenerationResult(
            output_file_prefix="icons-abc/",
            html=['<link href="icons-abc/favicon.ico">'],
            files=["icons-abc/favicon.ico"],
        )
        data = r.to_json_dict()
        assert data == {
            "outputFilePrefix": "icons-abc/",
            "html": ['<link href="icons-abc/favicon.ico">'],
            "files": ["icons-abc/favicon.ico"],
        }

    def test_parse_from_public_names(self):
        r = GenerationResult.model_validate(
            {"outputFilePrefix": "p/", "html": [], "files": ["p/a.png"]}
        )
        assert r.output_file_prefix == "p/"

# tests/unit/cache/test_unit_validator.py - v2
"""Tests for cache/validator.py - record applicability rules."""

from __future__ import annotations

import pytest

from faviconcache.cache.models import CachedAsset, CacheRecord
from faviconcache.cache.validator import check_record, is_valid
from faviconcache.core.models import GenerationResult, IconConfig

VERSION = "0.1.0"
FINGERPRINT = "f" * 32
FILES = ["icons-x/favicon.ico", "icons-x/manifest.json"]


@pytest.fixture
def record(icon_config: IconConfig) -> CacheRecord:
    return CacheRecord(
        version=VERSION,
        file_hash=FINGERPRINT,
        options=icon_config.relevant_options(),
        result=GenerationResult(output_file_prefix="icons-x/", files=list(FILES)),
        assets=[CachedAsset.from_bytes(name, b"data") for name in FILES],
    )


@pytest.fixture
def descriptor_record(record: CacheRecord) -> CacheRecord:
    return record.model_copy(update={"assets": None})


class TestIsValid:
    def test_matching_record(self, record, icon_config):
        assert is_valid(record, FINGERPRINT, icon_config, VERSION) is True

    def test_missing_record(self, icon_config):
        assert is_valid(None, FINGERPRINT, icon_config, VERSION) is False

    def test_version_bump(self, record, icon_config):
        assert is_valid(record, FINGERPRINT, icon_config, "0.2.0") is False

    def test_fingerprint_change(self, record, icon_config):
        assert is_valid(record, "0" * 32, icon_config, VERSION) is False

    def test_background_change(self, record, icon_config):
        other = icon_config.model_copy(update={"background": "#000"})
        assert is_valid(record, FINGERPRINT, other, VERSION) is False

    def test_manifest_change(self, record):
        other = IconConfig(icons=["favicons"], manifest={"appName": "Other"})
        assert is_valid(record, FINGERPRINT, other, VERSION) is False

    def test_record_with_extra_option(self, record, icon_config):
        record.options["legacy"] = True
        assert is_valid(record, FINGERPRINT, icon_config, VERSION) is False


class TestCacheModes:
    def test_descriptor_record_rejected_in_artifact_mode(self, descriptor_record, icon_config):
        check = check_record(descriptor_record, FINGERPRINT, icon_config, VERSION, "artifact")
        assert check.is_valid is False
        assert check.reason == "record has no cached assets"

    def test_descriptor_record_accepted_in_descriptor_mode(self, descriptor_record, icon_config):
        assert is_valid(descriptor_record, FINGERPRINT, icon_config, VERSION, "descriptor") is True

    def test_artifact_record_accepted_in_descriptor_mode(self, record, icon_config):
        assert is_valid(record, FINGERPRINT, icon_config, VERSION, "descriptor") is True


class TestAssetConsistency:
    def test_truncated_assets(self, record, icon_config):
        record.assets = record.assets[:1]
        check = check_record(record, FINGERPRINT, icon_config, VERSION)
        assert check.reason == "cached assets do not match result files"

    def test_reordered_assets(self, record, icon_config):
        record.assets = list(reversed(record.assets))
        assert is_valid(record, FINGERPRINT, icon_config, VERSION) is False

    def test_truncated_assets_rejected_in_descriptor_mode(self, record, icon_config):
        record.assets = record.assets[:1]
        assert is_valid(record, FINGERPRINT, icon_config, VERSION, "descriptor") is False

    @pytest.mark.parametrize("name", [
        "icons-x/../../etc/passwd",
        "/icons-x/favicon.ico",
        "other/favicon.ico",
        "icons-x\\..\\x",
    ])
    def test_asset_outside_prefix(self, record, icon_config, name):
        record.assets = [CachedAsset.from_bytes(name, b"data")]
        record.result.files = [name]
        check = check_record(record, FINGERPRINT, icon_config, VERSION)
        assert check.is_valid is False
        assert check.reason.startswith("cached asset outside output prefix")


class TestCheckRecord:
    def test_reason_for_missing(self, icon_config):
        check = check_record(None, FINGERPRINT, icon_config, VERSION)
        assert check.reason == "no cache record"

    def test_reason_for_version(self, record, icon_config):
        check = check_record(record, FINGERPRINT, icon_config, "9.9.9")
        assert "version" in check.reason

    def test_reason_lists_changed_options(self, record, icon_config):
        other = icon_config.model_copy(update={"background": "#000"})
        check = check_record(record, FINGERPRINT, other, VERSION)
        assert check.reason == "options changed: background"

    def test_valid_has_no_reason(self, record, icon_config):
        check = check_record(record, FINGERPRINT, icon_config, VERSION)
        assert check.is_valid is True
        assert check.reason is None

"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from app.config import DEFAULT_DATA_DIR, Settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("KYC_DEFAULT_KYC_VERSION", raising=False)
        settings = Settings()
        assert settings.default_kyc_version == "v1"
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.default_page_size == 10

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("KYC_DEFAULT_KYC_VERSION", "v2")
        monkeypatch.setenv("KYC_SEARCH_FUZZY_THRESHOLD", "90")
        settings = Settings()
        assert settings.default_kyc_version == "v2"
        assert settings.search_fuzzy_threshold == 90

    def test_invalid_version_rejected(self, monkeypatch):
        monkeypatch.setenv("KYC_DEFAULT_KYC_VERSION", "v7")
        with pytest.raises(ValidationError):
            Settings()

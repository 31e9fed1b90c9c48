"""Tests for centralized configuration module."""

import pytest

from psych2cne import config
from psych2cne.exceptions import ConfigurationError


@pytest.mark.unit
class TestProjectConfig:
    """Tests for project configuration."""

    def test_package_dir_is_correct(self):
        """Should point at the installed package directory."""
        assert (config.PACKAGE_DIR / "config.py").exists()

    def test_get_env_reads_prefixed_variable(self, monkeypatch):
        """Should read PSYCH2CNE_<name>."""
        monkeypatch.setenv("PSYCH2CNE_TEST_SETTING", "test_value")
        assert config.get_env("TEST_SETTING") == "test_value"

    def test_get_env_ignores_unprefixed_variable(self, monkeypatch):
        """Should not pick up a variable without the prefix."""
        monkeypatch.setenv("TEST_SETTING", "other")
        monkeypatch.delenv("PSYCH2CNE_TEST_SETTING", raising=False)
        assert config.get_env("TEST_SETTING", default="fallback") == "fallback"

    def test_get_env_keeps_empty_value(self, monkeypatch):
        """An explicitly empty setting is not replaced by the default."""
        monkeypatch.setenv("PSYCH2CNE_TEST_SETTING", "")
        assert config.get_env("TEST_SETTING", default="fallback") == ""

    def test_get_env_raises_without_default(self, monkeypatch):
        """Should raise ConfigurationError when unset and no default."""
        monkeypatch.delenv("PSYCH2CNE_TEST_SETTING", raising=False)
        with pytest.raises(ConfigurationError, match="PSYCH2CNE_TEST_SETTING"):
            config.get_env("TEST_SETTING")


@pytest.mark.unit
class TestWatermark:
    """Tests for watermark configuration."""

    def test_default_watermark(self, monkeypatch):
        monkeypatch.delenv("PSYCH2CNE_XML_WATERMARK", raising=False)
        monkeypatch.delenv("PSYCH2CNE_JSON_WATERMARK", raising=False)
        assert config.get_watermark() == config.DEFAULT_WATERMARK

    def test_watermark_overrides(self, monkeypatch):
        monkeypatch.setenv("PSYCH2CNE_XML_WATERMARK", "<!-- mine -->")
        monkeypatch.setenv("PSYCH2CNE_JSON_WATERMARK", "mine")
        watermark = config.get_watermark()
        assert watermark.xml_comment == "<!-- mine -->"
        assert watermark.json_marker == "mine"

    def test_watermark_is_frozen(self):
        with pytest.raises(Exception):
            config.DEFAULT_WATERMARK.json_marker = "changed"

    def test_root_attributes_and_log_level(self, monkeypatch):
        monkeypatch.delenv("PSYCH2CNE_ROOT_ATTRIBUTES", raising=False)
        monkeypatch.delenv("PSYCH2CNE_LOG_LEVEL", raising=False)
        assert config.get_default_root_attributes() == ""
        assert config.get_log_level_name() == "INFO"

        monkeypatch.setenv("PSYCH2CNE_ROOT_ATTRIBUTES", 'isPlayer="true"')
        assert config.get_default_root_attributes() == 'isPlayer="true"'

"""Unit tests for the config module."""

import pytest

from image_audit.utils.config import (
    AuditConfig,
    CatalogConfig,
    OutputConfig,
    ValidationConfig,
    get_config_paths,
    load_config,
    save_config,
)
from image_audit.utils.errors import ConfigurationError


class TestConfigModels:
    """Tests for config model defaults."""

    def test_catalog_defaults(self):
        config = CatalogConfig()
        assert config.cloud is None
        assert config.endpoint is None
        assert config.visibility == "public"
        assert config.timeout == 60.0

    def test_validation_defaults(self):
        config = ValidationConfig()
        assert config.version == "v2"
        assert config.prefix == "unikorn:"

    def test_output_defaults(self):
        config = OutputConfig()
        assert config.default_format == "terminal"
        assert config.color is True
        assert config.summary is False

    def test_nested_defaults(self):
        config = AuditConfig()
        assert isinstance(config.catalog, CatalogConfig)
        assert isinstance(config.validation, ValidationConfig)
        assert isinstance(config.output, OutputConfig)


class TestConfigPaths:
    """Tests for get_config_paths."""

    def test_includes_cwd_and_home(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        paths = get_config_paths()

        assert tmp_path / ".image-audit.yaml" in paths

    def test_xdg(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert tmp_path / "image-audit" / "config.yaml" in get_config_paths()


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            """
catalog:
  cloud: production
  visibility: community
output:
  default_format: json
"""
        )

        config = load_config(path)

        assert config.catalog.cloud == "production"
        assert config.catalog.visibility == "community"
        assert config.output.default_format == "json"
        assert config.validation.version == "v2"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == AuditConfig()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("catalog: [unclosed")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("output:\n  default_format: html\n")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(path)

        assert exc_info.value.details["config_key"] == "output.default_format"

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_search_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert load_config() == AuditConfig()

        (tmp_path / ".image-audit.yaml").write_text("validation:\n  prefix: 'acme:'\n")
        assert load_config().validation.prefix == "acme:"


class TestSaveConfig:
    """Tests for save_config."""

    def test_round_trip(self, tmp_path):
        config = AuditConfig(catalog=CatalogConfig(cloud="staging"))
        path = save_config(config, tmp_path / "nested" / "config.yaml")

        assert path.exists()
        assert load_config(path).catalog.cloud == "staging"

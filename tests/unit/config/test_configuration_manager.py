"""Tests for configuration loading and management."""

import json

import pytest

from instancespec.config import (
    AppConfig,
    CatalogConfig,
    ConfigurationLoader,
    ConfigurationManager,
    LoggingConfig,
)
from instancespec.domain.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for suffix in ConfigurationLoader.ENV_OVERRIDES:
        monkeypatch.delenv(ConfigurationLoader.ENV_PREFIX + suffix, raising=False)


@pytest.fixture
def config_file(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return _write


class TestConfigurationManager:
    """Test typed configuration access."""

    def test_defaults(self):
        manager = ConfigurationManager()
        logging_config = manager.get_typed(LoggingConfig)
        catalog_config = manager.get_typed(CatalogConfig)

        assert logging_config.level == "INFO"
        assert logging_config.destination == "stdout"
        assert catalog_config.product_prefix == "com.ubuntu.cloud:server"
        assert catalog_config.default_arches == ["amd64", "arm"]
        assert catalog_config.series_versions["precise"] == "12.04"

    def test_get_typed_is_cached(self):
        manager = ConfigurationManager()
        assert manager.get_typed(CatalogConfig) is manager.get_typed(CatalogConfig)
        assert manager.get_typed(AppConfig) is manager.app_config

    def test_file_is_merged_over_defaults(self, config_file):
        path = config_file({
            "logging": {"level": "debug"},
            "catalog": {"series_versions": {"xenial": "16.04"}},
        })
        manager = ConfigurationManager(path)

        assert manager.get_typed(LoggingConfig).level == "DEBUG"
        assert manager.get_typed(LoggingConfig).destination == "stdout"
        versions = manager.get_typed(CatalogConfig).series_versions
        assert versions["xenial"] == "16.04"
        assert versions["precise"] == "12.04"

    def test_environment_overrides_file(self, config_file, monkeypatch):
        path = config_file({"logging": {"level": "ERROR"}})
        monkeypatch.setenv("INSTANCESPEC_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("INSTANCESPEC_DEFAULT_ARCHES", "arm, i386")

        manager = ConfigurationManager(path)

        assert manager.get_typed(LoggingConfig).level == "WARNING"
        assert manager.get_typed(CatalogConfig).default_arches == ["arm", "i386"]

    def test_env_references_in_file_are_expanded(self, config_file, monkeypatch):
        monkeypatch.setenv("SPEC_LOG_DIR", "/var/log/spec")
        path = config_file({"logging": {"file_path": "${SPEC_LOG_DIR}/resolver.log"}})

        manager = ConfigurationManager(path)

        assert manager.get_typed(LoggingConfig).file_path == "/var/log/spec/resolver.log"

    def test_invalid_values(self, config_file):
        manager = ConfigurationManager(config_file({"catalog": {"default_arches": []}}))
        with pytest.raises(ConfigurationError):
            manager.get_typed(CatalogConfig)

    def test_missing_file(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "missing.json"))
        with pytest.raises(ConfigurationError):
            manager.get_typed(LoggingConfig)

    def test_malformed_file(self, config_file):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(config_file("{broken")).get_typed(LoggingConfig)

    def test_non_object_file(self, config_file):
        with pytest.raises(ConfigurationError):
            ConfigurationManager(config_file([1, 2])).get_typed(LoggingConfig)

    def test_unknown_type(self):
        with pytest.raises(ConfigurationError):
            ConfigurationManager().get_typed(dict)

    def test_reload(self, monkeypatch):
        manager = ConfigurationManager()
        assert manager.get_typed(LoggingConfig).level == "INFO"

        monkeypatch.setenv("INSTANCESPEC_LOG_LEVEL", "ERROR")
        manager.reload()

        assert manager.get_typed(LoggingConfig).level == "ERROR"


class TestSchemas:
    """Test schema validation."""

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="LOUD")

    def test_invalid_destination(self):
        with pytest.raises(ValueError):
            LoggingConfig(destination="syslog")

    def test_product_prefix_must_not_end_with_separator(self):
        with pytest.raises(ValueError):
            CatalogConfig(product_prefix="com.ubuntu.cloud:server:")


def test_loader_merge_is_deep_and_non_destructive():
    base = {"a": {"b": 1, "c": 2}, "d": [1]}
    merged = ConfigurationLoader.merge(base, {"a": {"c": 3}, "d": [2]})
    assert merged == {"a": {"b": 1, "c": 3}, "d": [2]}
    assert base == {"a": {"b": 1, "c": 2}, "d": [1]}

"""Tests for configuration loading."""

from pathlib import Path

import pytest
import yaml

from funcdoc.utils.config import (
    DEFAULT_REGISTRY,
    AppConfig,
    ExtractionConfig,
    LoggingConfig,
    OutputConfig,
    load_config,
)


@pytest.fixture(autouse=True)
def _no_registry_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the environment from overriding the configured registry."""
    monkeypatch.delenv("FUNCDOC_REGISTRY", raising=False)


class TestAppConfigDefaults:
    """Tests for AppConfig with all defaults."""

    def test_default_construction(self) -> None:
        config = AppConfig()
        assert isinstance(config.extraction, ExtractionConfig)
        assert isinstance(config.output, OutputConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_default_values(self) -> None:
        config = AppConfig()
        assert config.extraction.source_file is None
        assert config.extraction.registry == DEFAULT_REGISTRY
        assert config.output.default_format == "text"
        assert config.logging.level == "WARNING"


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_load_default_config(self) -> None:
        config = load_config()
        assert isinstance(config, AppConfig)
        assert config.extraction.registry == DEFAULT_REGISTRY
        assert config.output.default_format == "text"

    def test_load_from_explicit_path(self, tmp_path: Path) -> None:
        config_data = {
            "extraction": {"source_file": "functions.go", "registry": "pkg:FUNCS"},
            "output": {"default_format": "markdown", "title": "Helpers"},
            "logging": {"level": "DEBUG"},
        }
        config_file = tmp_path / "test_config.yaml"
        with open(config_file, "w") as f:
            yaml.dump(config_data, f)

        config = load_config(str(config_file))
        assert config.extraction.source_file == "functions.go"
        assert config.extraction.registry == "pkg:FUNCS"
        assert config.output.default_format == "markdown"
        assert config.output.title == "Helpers"
        assert config.logging.level == "DEBUG"

    def test_load_nonexistent_returns_defaults(self, tmp_path: Path) -> None:
        config = load_config(str(tmp_path / "nonexistent.yaml"))
        assert config.extraction.registry == DEFAULT_REGISTRY

    def test_load_empty_file_returns_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        config = load_config(str(config_file))
        assert isinstance(config, AppConfig)

    def test_registry_env_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FUNCDOC_REGISTRY", "custom:REGISTRY")
        config = load_config(str(tmp_path / "nonexistent.yaml"))
        assert config.extraction.registry == "custom:REGISTRY"

"""Configuration loader for the function documentation extractor.

Loads settings from configs/config.yaml and provides typed access
to all configuration sections via dataclasses.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "config.yaml"

DEFAULT_REGISTRY = "funcdoc.functions:STANDARD_FUNCTIONS"
REGISTRY_ENV_VAR = "FUNCDOC_REGISTRY"


@dataclass
class ExtractionConfig:
    """Configuration for comment extraction.

    A ``source_file`` of None means the bundled standard functions
    module.
    """

    source_file: Optional[str] = None
    registry: str = DEFAULT_REGISTRY


@dataclass
class OutputConfig:
    """Configuration for documentation output."""

    default_format: str = "text"
    title: str = "Function Reference"


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AppConfig:
    """Top-level application configuration."""

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load application configuration from a YAML file.

    Reads the YAML config file and constructs a fully typed AppConfig
    object. Falls back to defaults for any missing values. The
    FUNCDOC_REGISTRY environment variable, when set, overrides the
    configured registry.

    Args:
        config_path: Path to the YAML config file. If None, uses the
            default path at configs/config.yaml.

    Returns:
        A fully populated AppConfig instance.

    Raises:
        yaml.YAMLError: If the config file contains invalid YAML.
    """
    path = Path(config_path) if config_path else _DEFAULT_CONFIG_PATH

    if path.exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        logger.debug("Loaded configuration from %s", path)
    else:
        logger.warning("Config file not found at %s, using defaults", path)
        raw = {}

    extraction_data = raw.get("extraction", {})
    extraction_config = ExtractionConfig(
        source_file=extraction_data.get("source_file"),
        registry=extraction_data.get("registry", DEFAULT_REGISTRY),
    )

    env_registry = os.getenv(REGISTRY_ENV_VAR)
    if env_registry:
        logger.debug("Registry overridden by %s=%s", REGISTRY_ENV_VAR, env_registry)
        extraction_config.registry = env_registry

    output_data = raw.get("output", {})
    output_config = OutputConfig(
        default_format=output_data.get("default_format", "text"),
        title=output_data.get("title", "Function Reference"),
    )

    logging_data = raw.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "WARNING"),
        format=logging_data.get(
            "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ),
        file=logging_data.get("file"),
    )

    return AppConfig(
        extraction=extraction_config,
        output=output_config,
        logging=logging_config,
    )

"""Loading function registries for documentation extraction.

A registry maps function names to the callables they document. It can
be referenced either as an importable ``module:attribute`` or as a YAML
file of callable descriptors::

    Add:
      params: [int, int]
      returns: [int]
    Concat:
      params: [string]
      variadic: true
      returns: [string]
"""

import importlib
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from funcdoc.errors import RegistryError
from funcdoc.parsers.structure import CallableShape

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = (".yaml", ".yml")


def load_registry(reference: str) -> Mapping[str, Any]:
    """Load a function registry from a reference string.

    Args:
        reference: Either ``package.module:ATTRIBUTE`` naming a mapping
            (or a zero-argument factory returning one), or a path to a
            YAML descriptor file.

    Returns:
        A read-only view of the registry.

    Raises:
        RegistryError: If the reference cannot be resolved to a mapping.
    """
    if reference.lower().endswith(_YAML_SUFFIXES):
        registry = _load_yaml_registry(Path(reference))
    else:
        registry = _load_object_registry(reference)

    logger.debug("Loaded %d functions from %s", len(registry), reference)
    return MappingProxyType(dict(registry))


def _load_object_registry(reference: str) -> Mapping[str, Any]:
    """Import a registry mapping named by ``module:attribute``."""
    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise RegistryError(
            f"Registry reference must look like 'module:attribute', got {reference!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RegistryError(f"Cannot import registry module {module_name!r}: {e}") from e

    try:
        value = getattr(module, attribute)
    except AttributeError as e:
        raise RegistryError(f"Module {module_name!r} has no {attribute!r}") from e

    if callable(value) and not isinstance(value, Mapping):
        value = value()

    if not isinstance(value, Mapping):
        raise RegistryError(
            f"{reference} is a {type(value).__name__}, expected a mapping"
        )
    return value


def _load_yaml_registry(path: Path) -> dict[str, CallableShape]:
    """Load a registry of CallableShape descriptors from YAML."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as e:
        raise RegistryError(f"Cannot read registry file {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise RegistryError(f"Invalid YAML in registry file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise RegistryError(f"Registry file {path} must contain a mapping")

    registry: dict[str, CallableShape] = {}
    for name, entry in raw.items():
        if not isinstance(entry, dict):
            raise RegistryError(f"Registry entry {name!r} must be a mapping")
        try:
            registry[str(name)] = CallableShape.from_dict(entry)
        except ValueError as e:
            raise RegistryError(f"Registry entry {name!r}: {e}") from e

    logger.info("Loaded registry file %s", path)
    return registry

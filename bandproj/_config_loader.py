"""Configuration loader with caching and fallback.

Design decisions:
- deepcopy on config return: callers may mutate what they get back
- Fail-Fast on YAML syntax errors: a broken file never silently falls back
- Pydantic schema validation: catches typos in label tables and separators
- Custom exception wrapping: user-friendly error messages
"""

from __future__ import annotations

import copy
import importlib.resources
import logging
import warnings
from functools import lru_cache
from typing import Any, Dict

logger = logging.getLogger(__name__)

try:
    import yaml

    _YAML_AVAILABLE = True
except ImportError:
    _YAML_AVAILABLE = False


class BandprojConfigurationError(Exception):
    """Raised when a bandproj configuration file is invalid.

    Wraps yaml.YAMLError and pydantic.ValidationError with context
    about which file failed and why, so users get actionable messages
    instead of raw parser tracebacks.
    """


@lru_cache(maxsize=32)
def _load_config_cached(name: str) -> Dict[str, Any]:
    """Cached loader; load_config() hands out deep copies."""
    if _YAML_AVAILABLE:
        try:
            ref = importlib.resources.files("bandproj") / "config" / f"{name}.yaml"
            raw = ref.read_text(encoding="utf-8")
        except (FileNotFoundError, TypeError, ModuleNotFoundError, OSError):
            raw = None

        if raw is not None:
            try:
                data = yaml.safe_load(raw)
            except yaml.YAMLError as exc:
                raise BandprojConfigurationError(
                    f"Failed to parse 'config/{name}.yaml'. "
                    f"Check YAML syntax (indentation, colons, etc.).\n"
                    f"Original error: {exc}"
                ) from exc

            if data is not None:
                from bandproj._config_schemas import validate_config

                try:
                    data = validate_config(name, data)
                except Exception as exc:
                    raise BandprojConfigurationError(
                        f"Schema validation failed for 'config/{name}.yaml'. "
                        f"Check required keys and data types.\n"
                        f"Original error: {exc}"
                    ) from exc
                return data

    # Fallback to built-in defaults
    from bandproj._defaults import CONFIGS

    if name in CONFIGS:
        if not _YAML_AVAILABLE:
            logger.debug("PyYAML not installed, using built-in defaults for '%s'", name)
        else:
            warnings.warn(
                f"Config file 'config/{name}.yaml' not found, using built-in default.",
                stacklevel=3,
            )
        return CONFIGS[name]
    raise FileNotFoundError(f"No config found for '{name}'")


def load_config(name: str) -> Dict[str, Any]:
    """Load a YAML config from bandproj/config/{name}.yaml.

    Returns a deep copy, so callers may freely mutate the returned dict.
    """
    return copy.deepcopy(_load_config_cached(name))


def clear_cache() -> None:
    """Clear all cached configs (for testing)."""
    _load_config_cached.cache_clear()

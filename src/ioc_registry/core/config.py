"""Registry configuration models and loader utilities."""

from __future__ import annotations

import copy
import os
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import BaseModel, Field


class LoggingSettings(BaseModel):
    """Logging preferences."""

    level: str = Field(default="INFO", description="Root logging level")
    structured: bool = Field(
        default=False, description="Toggle brace-style structured log lines"
    )


class RegistrySettings(BaseModel):
    """Settings controlling resolution behaviour."""

    enforce_types: bool = Field(
        default=True,
        description="Reject values that are not instances of a class-named binding",
    )


class AppSettings(BaseModel):
    """Aggregated package configuration."""

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    registry: RegistrySettings = Field(default_factory=RegistrySettings)


ENV_PREFIX = "IOC_REGISTRY_"
NESTING_SEPARATOR = "__"


def _setting_path(name: str) -> list[str]:
    """Split ``LOGGING__LEVEL`` style names into ``["logging", "level"]``."""
    return [part.lower() for part in name.split(NESTING_SEPARATOR) if part]


def _parse_env_value(raw: str | None) -> Any:
    """Map empty strings to ``None`` and ``true``/``false`` to booleans."""
    if not raw:
        return None
    return {"true": True, "false": False}.get(raw.lower(), raw)


def _assign(tree: dict[str, Any], path: list[str], value: Any) -> None:
    """Set ``value`` at ``path``, merging mappings into existing sections."""
    *parents, leaf = path
    for part in parents:
        child = tree.get(part)
        if not isinstance(child, dict):
            child = tree[part] = {}
        tree = child
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_unset=True)
    if isinstance(value, Mapping):
        for name, nested in value.items():
            _assign(tree, [leaf, *_setting_path(str(name))], nested)
        tree.setdefault(leaf, {})
        return
    tree[leaf] = value


def _prefixed_items(
    env_file: Path | str | None, include_environment: bool
) -> dict[str, str | None]:
    """Gather ``IOC_REGISTRY_*`` variables; the process environment wins."""
    sources: list[Mapping[str, str | None]] = []
    if env_file and Path(env_file).is_file():
        sources.append(dotenv_values(env_file))
    if include_environment:
        sources.append(os.environ)
    return {
        name.removeprefix(ENV_PREFIX): raw
        for source in sources
        for name, raw in source.items()
        if name.startswith(ENV_PREFIX)
    }


@lru_cache(maxsize=1)
def _environment_tree(
    env_file: Path | str | None, include_environment: bool
) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for name, raw in _prefixed_items(env_file, include_environment).items():
        path = _setting_path(name)
        if path:
            _assign(tree, path, _parse_env_value(raw))
    return tree


def load_app_settings(
    env_file: Path | str | None = None,
    include_environment: bool = True,
    **overrides: Any,
) -> AppSettings:
    """Load settings from an env file, the environment and keyword overrides.

    Environment lookups are memoized per ``(env_file, include_environment)``;
    call :func:`clear_settings_cache` after the file or environment changes.
    Overrides are merged over the loaded values section by section. They may
    be mappings, settings models, or ``section__field`` keywords such as
    ``registry__enforce_types=False``.
    """
    tree = copy.deepcopy(_environment_tree(env_file, include_environment))
    for name, value in overrides.items():
        path = _setting_path(name)
        if path:
            _assign(tree, path, value)
    return AppSettings.model_validate(tree)


def clear_settings_cache() -> None:
    """Forget memoized environment lookups."""
    _environment_tree.cache_clear()


__all__ = [
    "AppSettings",
    "LoggingSettings",
    "RegistrySettings",
    "clear_settings_cache",
    "load_app_settings",
]

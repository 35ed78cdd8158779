"""Core registry, configuration and logging utilities."""

from .config import (
    AppSettings,
    LoggingSettings,
    RegistrySettings,
    clear_settings_cache,
    load_app_settings,
)
from .default import get_default_registry, reset_default_registry
from .interfaces import (
    BindingNotFoundError,
    Factory,
    RegistryError,
    ResolutionTypeMismatch,
)
from .logging import configure_logging
from .registry import Binding, Registry, normalize_name

__all__ = [
    "AppSettings",
    "Binding",
    "BindingNotFoundError",
    "Factory",
    "LoggingSettings",
    "Registry",
    "RegistryError",
    "RegistrySettings",
    "ResolutionTypeMismatch",
    "clear_settings_cache",
    "configure_logging",
    "get_default_registry",
    "load_app_settings",
    "normalize_name",
    "reset_default_registry",
]

"""Name-based service registry with lazily cached singletons."""

from .core import (
    AppSettings,
    Binding,
    BindingNotFoundError,
    Factory,
    LoggingSettings,
    Registry,
    RegistryError,
    RegistrySettings,
    ResolutionTypeMismatch,
    clear_settings_cache,
    configure_logging,
    get_default_registry,
    load_app_settings,
    normalize_name,
    reset_default_registry,
)

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

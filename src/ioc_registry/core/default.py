"""Process-wide default registry."""

from __future__ import annotations

import logging
from functools import lru_cache

from .config import load_app_settings
from .registry import Registry

LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_default_registry() -> Registry:
    """Return the shared registry, building it from loaded settings on first use."""
    settings = load_app_settings()
    LOGGER.debug(
        "Creating default registry (enforce_types=%s)",
        settings.registry.enforce_types,
    )
    return Registry.from_settings(settings.registry)


def reset_default_registry() -> None:
    """Discard the shared registry so the next lookup builds a fresh one."""
    get_default_registry.cache_clear()


__all__ = ["get_default_registry", "reset_default_registry"]

"""Tests for the shared process-wide registry."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from ioc_registry.core.config import clear_settings_cache, load_app_settings
from ioc_registry.core.default import get_default_registry, reset_default_registry


@pytest.fixture(autouse=True)
def fresh_default(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from the shared registry and cached settings."""

    monkeypatch.delenv("IOC_REGISTRY_REGISTRY__ENFORCE_TYPES", raising=False)
    clear_settings_cache()
    reset_default_registry()
    yield
    clear_settings_cache()
    reset_default_registry()


def test_default_registry_is_shared() -> None:
    """Repeated lookups return the same registry object."""

    first = get_default_registry()
    first.singleton("service", lambda params: object())
    assert get_default_registry() is first
    assert get_default_registry().has("service") is True


def test_reset_builds_fresh_registry() -> None:
    """After a reset the shared registry starts empty."""

    get_default_registry().bind("service", lambda params: object())
    reset_default_registry()
    assert get_default_registry().has("service") is False


def test_default_registry_uses_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings from the environment configure the shared registry."""

    monkeypatch.setenv("IOC_REGISTRY_REGISTRY__ENFORCE_TYPES", "false")
    assert get_default_registry().enforce_types is False

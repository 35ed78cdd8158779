"""Name-based service registry with lazy, suffix-partitioned singletons."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Any, TypeVar, overload

from .config import RegistrySettings
from .interfaces import BindingNotFoundError, Factory, Params, ResolutionTypeMismatch

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Name = str | type[Any]

# (normalized name, instance suffix)
CacheKey = tuple[str, str]


def normalize_name(name: Name) -> str:
    """Return the case-folded lookup key for a binding name.

    Classes are keyed by their module-qualified name so two classes that share
    a short name in different modules never collide.
    """
    if isinstance(name, type):
        raw = f"{name.__module__}.{name.__qualname__}"
    else:
        raw = str(name)
    return raw.casefold()


@dataclass(frozen=True, slots=True)
class Binding:
    """A registered factory and whether its results are cached."""

    factory: Factory[Any]
    is_singleton: bool = False


class Registry:
    """Registry mapping names to factories, caching singleton results.

    Bindings live in one map keyed by normalized name. Singleton results live
    in a second map keyed by normalized name plus an instance suffix, so one
    binding can back several independent instances (one per connection string,
    for example). Removing a binding leaves its cached instances in place;
    call :meth:`flush_instance` or :meth:`clear` for a full reset.
    """

    def __init__(self, *, enforce_types: bool = True) -> None:
        """Initialise empty binding and instance storage."""
        self.enforce_types = enforce_types
        self._bindings: dict[str, Binding] = {}
        self._instances: dict[CacheKey, Any] = {}
        self._lock = RLock()
        self._key_locks: dict[CacheKey, RLock] = {}

    @classmethod
    def from_settings(cls, settings: RegistrySettings) -> Registry:
        """Build a registry configured from :class:`RegistrySettings`."""
        return cls(enforce_types=settings.enforce_types)

    def bind(self, name: Name, factory: Factory[Any], is_singleton: bool = False) -> None:
        """Register ``factory`` under ``name``, replacing any previous binding."""
        if not callable(factory):
            msg = f"Factory for '{name}' must be callable"
            raise TypeError(msg)
        key = normalize_name(name)
        with self._lock:
            replaced = key in self._bindings
            self._bindings[key] = Binding(factory, is_singleton)
        if replaced:
            LOGGER.debug("Replaced binding for %s (singleton=%s)", key, is_singleton)
        else:
            LOGGER.debug("Bound %s (singleton=%s)", key, is_singleton)

    def singleton(self, name: Name, factory: Factory[Any]) -> None:
        """Register ``factory`` under ``name`` with cached results."""
        self.bind(name, factory, True)

    @overload
    def make(
        self, name: type[T], params: Params | None = None, instance_suffix: str = ""
    ) -> T | None: ...

    @overload
    def make(
        self, name: str, params: Params | None = None, instance_suffix: str = ""
    ) -> Any: ...

    def make(
        self, name: Name, params: Params | None = None, instance_suffix: str = ""
    ) -> Any:
        """Resolve ``name``, returning ``None`` when nothing is bound.

        Non-singleton bindings call their factory on every request. Singleton
        bindings call it once per ``instance_suffix`` and hand back the cached
        value afterwards. Factory exceptions propagate and leave no cache entry.

        Raises:
            ResolutionTypeMismatch: ``name`` is a class, type enforcement is on
                and the value is not an instance of it.
        """
        key = normalize_name(name)
        with self._lock:
            binding = self._bindings.get(key)
        if binding is None:
            LOGGER.debug("No binding for %s", key)
            return None
        return self._build(name, key, binding, params, instance_suffix)

    def resolve(
        self, name: Name, params: Params | None = None, instance_suffix: str = ""
    ) -> Any:
        """Resolve ``name`` like :meth:`make`, raising when nothing is bound."""
        key = normalize_name(name)
        with self._lock:
            binding = self._bindings.get(key)
        if binding is None:
            raise BindingNotFoundError(key)
        return self._build(name, key, binding, params, instance_suffix)

    def has(self, name: Name) -> bool:
        """Return whether a binding is registered for ``name``."""
        key = normalize_name(name)
        with self._lock:
            return key in self._bindings

    def has_instance(self, name: Name, instance_suffix: str = "") -> bool:
        """Return whether a singleton instance is cached for ``name`` + suffix."""
        cache_key = (normalize_name(name), instance_suffix)
        with self._lock:
            return cache_key in self._instances

    def flush_instance(self, name: Name, instance_suffix: str = "") -> None:
        """Drop the cached instance for ``name`` + suffix, if any."""
        cache_key = (normalize_name(name), instance_suffix)
        with self._lock:
            removed = self._instances.pop(cache_key, None) is not None
            self._key_locks.pop(cache_key, None)
        if removed:
            LOGGER.debug("Flushed instance %s (suffix=%r)", *cache_key)

    def flush_binding(self, name: Name) -> None:
        """Drop the binding for ``name``; cached instances are kept."""
        key = normalize_name(name)
        with self._lock:
            removed = self._bindings.pop(key, None) is not None
        if removed:
            LOGGER.debug("Flushed binding %s", key)

    def clear(self) -> None:
        """Drop every binding and every cached instance."""
        with self._lock:
            bindings = len(self._bindings)
            instances = len(self._instances)
            self._bindings.clear()
            self._instances.clear()
            self._key_locks.clear()
        LOGGER.debug("Cleared %d bindings and %d instances", bindings, instances)

    def names(self) -> list[str]:
        """Return the normalized names of all current bindings, sorted."""
        with self._lock:
            return sorted(self._bindings)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, (str, type)):
            return False
        return self.has(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)

    def _build(
        self,
        name: Name,
        key: str,
        binding: Binding,
        params: Params | None,
        instance_suffix: str,
    ) -> Any:
        expected = name if isinstance(name, type) and self.enforce_types else None
        if not binding.is_singleton:
            return self._checked(key, expected, binding.factory(params))

        cache_key = (key, instance_suffix)
        with self._lock_for(cache_key):
            with self._lock:
                if cache_key in self._instances:
                    return self._checked(key, expected, self._instances[cache_key])
            instance = self._checked(key, expected, binding.factory(params))
            if instance is not None:
                with self._lock:
                    self._instances[cache_key] = instance
                LOGGER.debug(
                    "Cached singleton instance for %s (suffix=%r)", key, instance_suffix
                )
            return instance

    def _lock_for(self, cache_key: CacheKey) -> RLock:
        """Return the lock serialising construction for one cache key."""
        with self._lock:
            lock = self._key_locks.get(cache_key)
            if lock is None:
                lock = self._key_locks[cache_key] = RLock()
            return lock

    @staticmethod
    def _checked(key: str, expected: type[Any] | None, value: Any) -> Any:
        if expected is not None and value is not None and not isinstance(value, expected):
            raise ResolutionTypeMismatch(key, expected, value)
        return value


__all__ = ["Binding", "Name", "Registry", "normalize_name"]

"""Factory protocol and the registry's exception types."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)

Params = Mapping[Any, Any]


class Factory(Protocol[T_co]):
    """Callable that builds a value from an optional parameter bag."""

    def __call__(self, params: Params | None, /) -> T_co | None:
        """Construct and return the bound value."""
        raise NotImplementedError


class RegistryError(RuntimeError):
    """Base class for errors raised by the registry itself."""


class BindingNotFoundError(RegistryError, KeyError):
    """Raised by ``Registry.resolve`` when no binding exists for a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No binding registered for '{name}'")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would quote the message
        return str(self.args[0])


class ResolutionTypeMismatch(RegistryError, TypeError):
    """Raised when a factory result is not an instance of its class name."""

    def __init__(self, name: str, expected: type, actual: object) -> None:
        super().__init__(
            f"Binding '{name}' produced {type(actual).__qualname__}, "
            f"expected an instance of {expected.__qualname__}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


__all__ = [
    "BindingNotFoundError",
    "Factory",
    "Params",
    "RegistryError",
    "ResolutionTypeMismatch",
]

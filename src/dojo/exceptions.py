from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def _describe(key: Any) -> str:
    return getattr(key, "__qualname__", None) or repr(key)


class DojoError(Exception):
    """Represent a base class for all dojo-specific failures.

    Catch this type when you want to handle any container error path without
    matching each concrete exception class individually.
    """


class InvalidRegistrationError(DojoError):
    """Signal invalid registration or injection configuration.

    Raised by ``Container.add_concrete`` and ``Container.add_factory`` when
    ``provides`` cannot be determined or the provider object is of the wrong
    kind.
    """


class DependencyNotRegisteredError(DojoError):
    """Signal that a dependency key has no provider.

    Typical fix is binding the key during bootstrap, for example
    ``container.add_concrete(Katana, provides=Weapon)``.
    """

    def __init__(self, key: Any, *, required_by: Any | None = None) -> None:
        self.key = key
        self.required_by = required_by
        message = f"{_describe(key)} is not registered"
        if required_by is not None:
            message += f" (required by {_describe(required_by)})"
        super().__init__(message)


class DependencyInferenceError(DojoError):
    """Signal that a provider parameter cannot be mapped to a dependency key.

    Common triggers are missing or unresolvable type annotations on required
    constructor or factory parameters.
    """

    def __init__(self, provider: Any, parameter: str, reason: str) -> None:
        self.provider = provider
        self.parameter = parameter
        super().__init__(
            f"Cannot infer dependency for parameter {parameter!r} of {_describe(provider)}: {reason}",
        )


class CircularDependencyError(DojoError):
    """Signal a dependency graph that refers back to a key being built."""

    def __init__(self, chain: Sequence[Any]) -> None:
        self.chain = tuple(chain)
        path = " -> ".join(_describe(key) for key in self.chain)
        super().__init__(f"Circular dependency detected: {path}")

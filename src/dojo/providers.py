from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, get_type_hints

from dojo.exceptions import DependencyInferenceError, InvalidRegistrationError

_IMPLICIT_FIRST_PARAMETER_NAMES = {"self", "cls"}
_SKIPPED_PARAMETER_KINDS = {
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
}


class Lifetime(Enum):
    """Defines the lifetime of a service in the container."""

    TRANSIENT = auto()
    """A new instance is created every time the service is requested."""

    SINGLETON = auto()
    """A single instance is created and shared for the lifetime of the container."""


@dataclass(frozen=True, slots=True)
class ProviderDependency:
    """A single constructor or factory parameter resolved from the container."""

    name: str
    provides: Any
    has_default: bool = False


@dataclass(kw_only=True, slots=True)
class ProviderSpec:
    """A specification of a provider in the dependency injection system."""

    provides: Any
    """The dependency key that this provider supplies."""

    instance: Any | None = None
    """An optional pre-built instance of the provided dependency."""
    concrete_type: type[Any] | None = None
    """An optional concrete type instantiated to produce the dependency."""
    factory: Callable[..., Any] | None = None
    """An optional factory function called to produce the dependency."""
    dependencies: list[ProviderDependency] = field(default_factory=list)
    """Parameters injected into the concrete type or factory."""

    lifetime: Lifetime = Lifetime.SINGLETON
    """The lifetime of the provided dependency."""

    @property
    def is_instance(self) -> bool:
        return self.concrete_type is None and self.factory is None

    def build(self, arguments: dict[str, Any]) -> Any:
        """Create the dependency from already resolved keyword arguments."""
        if self.concrete_type is not None:
            return self.concrete_type(**arguments)
        if self.factory is not None:
            return self.factory(**arguments)
        return self.instance


class ProviderDependenciesExtractor:
    """Extract type-hinted dependencies from concrete types and factories."""

    def extract_from_concrete(self, concrete_type: type[Any]) -> list[ProviderDependency]:
        init = concrete_type.__init__
        if init is object.__init__:
            return []
        return self._extract(provider=concrete_type, callable_obj=init, skip_first=True)

    def extract_from_factory(self, factory: Callable[..., Any]) -> list[ProviderDependency]:
        return self._extract(provider=factory, callable_obj=factory, skip_first=False)

    def infer_factory_return(self, factory: Callable[..., Any]) -> Any:
        """Return the annotated return type of a factory or raise when absent."""
        hints = self._type_hints(provider=factory, callable_obj=factory)
        provides = hints.get("return")
        if provides is None:
            msg = (
                f"Unable to infer provided type for factory {factory!r}. "
                "Annotate the return type or pass provides=... explicitly."
            )
            raise InvalidRegistrationError(msg)
        return provides

    def _extract(
        self,
        *,
        provider: Any,
        callable_obj: Callable[..., Any],
        skip_first: bool,
    ) -> list[ProviderDependency]:
        signature = inspect.signature(callable_obj)
        hints = self._type_hints(provider=provider, callable_obj=callable_obj)

        dependencies: list[ProviderDependency] = []
        for index, parameter in enumerate(signature.parameters.values()):
            if skip_first and index == 0 and parameter.name in _IMPLICIT_FIRST_PARAMETER_NAMES:
                continue
            if parameter.kind in _SKIPPED_PARAMETER_KINDS:
                continue
            has_default = parameter.default is not inspect.Parameter.empty
            annotation = hints.get(parameter.name)
            if annotation is None:
                if has_default:
                    continue
                raise DependencyInferenceError(provider, parameter.name, "missing type annotation")
            dependencies.append(
                ProviderDependency(
                    name=parameter.name,
                    provides=annotation,
                    has_default=has_default,
                ),
            )
        return dependencies

    def _type_hints(self, *, provider: Any, callable_obj: Callable[..., Any]) -> dict[str, Any]:
        try:
            return get_type_hints(callable_obj, include_extras=True)
        except (NameError, TypeError) as error:
            raise DependencyInferenceError(provider, "<annotations>", str(error)) from error

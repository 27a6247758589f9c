from __future__ import annotations

import functools
import inspect
import logging
import threading
from collections.abc import Callable
from typing import Any, TypeVar, cast, overload

from dojo.exceptions import (
    CircularDependencyError,
    DependencyNotRegisteredError,
    InvalidRegistrationError,
)
from dojo.injection import INJECT_WRAPPER_MARKER, InjectedCallableInspector, is_inject_wrapper
from dojo.providers import Lifetime, ProviderDependenciesExtractor, ProviderSpec

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class Container:
    """Dependency injection container for registering and resolving services.

    Each capability key maps to exactly one provider; registering the same key
    again replaces the previous binding. Any registration drops the singletons
    built so far, so dependents are rebuilt against the current bindings;
    registered instances are kept. Singletons are built at most once per
    registration state, even when first requested from several threads at the
    same time.

    Examples:
        .. code-block:: python

            container = Container()
            container.add_concrete(Katana, provides=Weapon)
            container.add_concrete(Ninja, provides=Warrior)
            warrior = container.resolve(Warrior)

    """

    __slots__ = (
        "_dependencies_extractor",
        "_injected_callable_inspector",
        "_lock",
        "_providers",
        "_singletons",
    )

    def __init__(self) -> None:
        self._providers: dict[Any, ProviderSpec] = {}
        self._singletons: dict[Any, Any] = {}
        # Reentrant: building a singleton resolves its own singleton dependencies.
        self._lock = threading.RLock()
        self._dependencies_extractor = ProviderDependenciesExtractor()
        self._injected_callable_inspector = InjectedCallableInspector()

        self.add_instance(self)

    def add_instance(self, instance: T, *, provides: Any | None = None) -> None:
        """Register a pre-built instance under ``provides`` (defaults to its type).

        Args:
            instance: Object returned on every resolution of the key.
            provides: Dependency key to bind. Defaults to ``type(instance)``.

        """
        key = type(instance) if provides is None else provides
        self._add_provider(ProviderSpec(provides=key, instance=instance))
        self._singletons[key] = instance

    def add_concrete(
        self,
        concrete_type: type[Any],
        *,
        provides: Any | None = None,
        lifetime: Lifetime = Lifetime.SINGLETON,
    ) -> None:
        """Register a class whose constructor dependencies are inferred from type hints.

        Args:
            concrete_type: Class instantiated to produce the dependency.
            provides: Dependency key to bind, typically an abstract capability.
                Defaults to ``concrete_type`` itself.
            lifetime: Caching policy for built instances.

        Raises:
            InvalidRegistrationError: If ``concrete_type`` is not a class.
            DependencyInferenceError: If a required constructor parameter has
                no usable annotation.

        """
        if not inspect.isclass(concrete_type):
            msg = f"add_concrete() expects a class, got {concrete_type!r}."
            raise InvalidRegistrationError(msg)
        self._add_provider(
            ProviderSpec(
                provides=concrete_type if provides is None else provides,
                concrete_type=concrete_type,
                dependencies=self._dependencies_extractor.extract_from_concrete(concrete_type),
                lifetime=lifetime,
            ),
        )

    def add_factory(
        self,
        factory: Callable[..., Any],
        *,
        provides: Any | None = None,
        lifetime: Lifetime = Lifetime.SINGLETON,
    ) -> None:
        """Register a factory callable; its parameters are injected like constructor ones.

        Args:
            factory: Callable producing the dependency.
            provides: Dependency key to bind. Defaults to the factory return annotation.
            lifetime: Caching policy for built instances.

        Raises:
            InvalidRegistrationError: If ``factory`` is not callable or ``provides``
                cannot be inferred.

        """
        if not callable(factory):
            msg = f"add_factory() expects a callable, got {factory!r}."
            raise InvalidRegistrationError(msg)
        if provides is None:
            provides = self._dependencies_extractor.infer_factory_return(factory)
        self._add_provider(
            ProviderSpec(
                provides=provides,
                factory=factory,
                dependencies=self._dependencies_extractor.extract_from_factory(factory),
                lifetime=lifetime,
            ),
        )

    def is_registered(self, key: Any) -> bool:
        return key in self._providers

    def resolve(self, key: type[T] | Any) -> T:
        """Return the instance bound to ``key``, building its dependencies first.

        Raises:
            DependencyNotRegisteredError: If ``key`` or any of its required
                dependencies has no provider.
            CircularDependencyError: If the dependency graph loops back on itself.

        """
        cached = self._singletons.get(key, _MISSING)
        if cached is not _MISSING:
            return cast("T", cached)
        return cast("T", self._resolve(key, ()))

    @overload
    def inject(self, func: F) -> F: ...

    @overload
    def inject(self, func: None = None) -> Callable[[F], F]: ...

    def inject(self, func: F | None = None) -> F | Callable[[F], F]:
        """Wrap ``func`` so its ``Injected[...]`` parameters come from this container.

        Injected parameters are resolved on every call and removed from the
        wrapper's public signature, so frameworks inspecting the signature only
        see the remaining parameters. Explicit keyword arguments take precedence
        over resolved values.
        """
        if func is None:
            return cast("Callable[[F], F]", self.inject)
        if is_inject_wrapper(func):
            return func

        inspection = self._injected_callable_inspector.inspect_callable(func)
        injected_parameters = inspection.injected_parameters

        def _resolve_injected(kwargs: dict[str, Any]) -> dict[str, Any]:
            resolved = {
                parameter.name: self.resolve(parameter.dependency)
                for parameter in injected_parameters
                if parameter.name not in kwargs
            }
            return {**resolved, **kwargs}

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await func(*args, **_resolve_injected(kwargs))

            wrapper: Callable[..., Any] = async_wrapper
        else:

            @functools.wraps(func)
            def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
                return func(*args, **_resolve_injected(kwargs))

            wrapper = sync_wrapper

        wrapper.__signature__ = inspection.public_signature  # type: ignore[attr-defined]
        setattr(wrapper, INJECT_WRAPPER_MARKER, True)
        return cast("F", wrapper)

    def _add_provider(self, spec: ProviderSpec) -> None:
        with self._lock:
            self._providers[spec.provides] = spec
            # Built singletons may hold the previous binding, so only registered instances survive.
            self._singletons = {
                key: value
                for key, value in self._singletons.items()
                if key != spec.provides and self._providers[key].is_instance
            }
        logger.debug("Registered %r (%s)", spec.provides, spec.lifetime.name.lower())

    def _resolve(self, key: Any, chain: tuple[Any, ...]) -> Any:
        if key in chain:
            raise CircularDependencyError((*chain, key))

        spec = self._providers.get(key)
        if spec is None:
            raise DependencyNotRegisteredError(key, required_by=chain[-1] if chain else None)

        if spec.lifetime is Lifetime.TRANSIENT:
            return self._build(spec, (*chain, key))

        cached = self._singletons.get(key, _MISSING)
        if cached is not _MISSING:
            return cached
        with self._lock:
            cached = self._singletons.get(key, _MISSING)
            if cached is _MISSING:
                cached = self._build(spec, (*chain, key))
                self._singletons[key] = cached
            return cached

    def _build(self, spec: ProviderSpec, chain: tuple[Any, ...]) -> Any:
        arguments: dict[str, Any] = {}
        for dependency in spec.dependencies:
            if dependency.has_default and dependency.provides not in self._providers:
                continue
            arguments[dependency.name] = self._resolve(dependency.provides, chain)
        return spec.build(arguments)

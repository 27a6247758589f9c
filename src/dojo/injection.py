from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, get_type_hints

from dojo.markers import injected_dependency

INJECT_WRAPPER_MARKER = "__dojo_inject_wrapper__"


@dataclass(frozen=True, slots=True)
class InjectedParameter:
    """Injected parameter metadata for callable wrapper generation."""

    name: str
    dependency: Any


@dataclass(frozen=True, slots=True)
class InjectedCallableInspection:
    """Injection metadata derived from a callable signature and annotations."""

    signature: inspect.Signature
    injected_parameters: tuple[InjectedParameter, ...]
    public_signature: inspect.Signature


class InjectedCallableInspector:
    """Inspect callables for Injected[...] parameters and public signature filtering."""

    def inspect_callable(self, callable_obj: Callable[..., Any]) -> InjectedCallableInspection:
        """Build injection metadata and a public signature for a callable."""
        signature = inspect.signature(callable_obj)
        annotations = self.resolved_annotations(callable_obj)

        injected_parameters: list[InjectedParameter] = []
        public_parameters: list[inspect.Parameter] = []
        for parameter in signature.parameters.values():
            annotation = annotations.get(parameter.name, parameter.annotation)
            dependency = injected_dependency(annotation)
            if dependency is not None:
                injected_parameters.append(InjectedParameter(name=parameter.name, dependency=dependency))
                continue
            public_parameters.append(parameter.replace(annotation=annotation))

        # Web frameworks read the wrapper signature without access to the
        # wrapped function's module globals, so string annotations are resolved here.
        public_signature = signature.replace(
            parameters=public_parameters,
            return_annotation=annotations.get("return", signature.return_annotation),
        )
        return InjectedCallableInspection(
            signature=signature,
            injected_parameters=tuple(injected_parameters),
            public_signature=public_signature,
        )

    def resolved_annotations(self, callable_obj: Callable[..., Any]) -> dict[str, Any]:
        """Resolve callable annotations with extras, falling back to an empty mapping."""
        try:
            return get_type_hints(callable_obj, include_extras=True)
        except (AttributeError, NameError, TypeError):
            return {}


def is_inject_wrapper(callable_obj: Callable[..., Any]) -> bool:
    return bool(getattr(callable_obj, INJECT_WRAPPER_MARKER, False))

from typing import TYPE_CHECKING, Annotated, Any, TypeVar, Union, get_args, get_origin

T = TypeVar("T")
_ANNOTATED_MARKER_MIN_ARGS = 2


class InjectedMarker:
    """A marker used to indicate a parameter should be injected from the container.

    Used to identify parameters that need to be removed from callable signatures
    when wrapping route handlers.
    """


if TYPE_CHECKING:
    Injected = Union[T, T]  # noqa: UP007,PYI016
else:

    class Injected:
        """Mark a parameter for container-driven injection.

        At runtime ``Injected[T]`` resolves to ``Annotated[T, InjectedMarker()]``.

        Examples:
            .. code-block:: python

                @container.inject
                def fight(warrior: Injected[Warrior]) -> str:
                    return warrior.fight()

        """

        def __class_getitem__(cls, item: T) -> Annotated[T, InjectedMarker]:
            return Annotated[item, InjectedMarker()]


def injected_dependency(annotation: Any) -> Any | None:
    """Return the dependency key of an ``Injected[...]`` annotation, otherwise None."""
    if get_origin(annotation) is not Annotated:
        return None
    args = get_args(annotation)
    if len(args) < _ANNOTATED_MARKER_MIN_ARGS:
        return None
    if not any(isinstance(item, InjectedMarker) for item in args[1:]):
        return None
    return args[0]

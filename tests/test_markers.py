from typing import Annotated, get_args, get_origin

from dojo.markers import Injected, InjectedMarker, injected_dependency


class Service:
    pass


def test_injected_builds_annotated_marker() -> None:
    annotation = Injected[Service]

    assert get_origin(annotation) is Annotated
    args = get_args(annotation)
    assert args[0] is Service
    assert isinstance(args[1], InjectedMarker)


def test_injected_dependency_extracts_inner_type() -> None:
    assert injected_dependency(Injected[Service]) is Service


def test_injected_dependency_ignores_plain_annotations() -> None:
    assert injected_dependency(Service) is None
    assert injected_dependency(Annotated[Service, "meta"]) is None

from __future__ import annotations

from functools import lru_cache

from dojo.container import Container
from dojo.entities import Katana, Ninja, Shuriken
from dojo.interfaces import ThrowableWeapon, Warrior, Weapon
from dojo.settings import Settings, get_settings


def register_dependencies(container: Container) -> None:
    """Bind every capability to its implementation."""
    container.add_concrete(Ninja, provides=Warrior)
    container.add_concrete(Katana, provides=Weapon)
    container.add_concrete(Shuriken, provides=ThrowableWeapon)


def build_container(settings: Settings | None = None) -> Container:
    """Create a fresh container with settings and all capability bindings."""
    container = Container()
    container.add_instance(get_settings() if settings is None else settings, provides=Settings)
    register_dependencies(container)
    return container


@lru_cache(maxsize=1)
def resolve_dependencies() -> Container:
    """Return the process-wide container, building it on first use.

    The CLI entry point serves requests from this container after registering
    its command-line settings on it.
    """
    return build_container()

from dojo.bootstrap import build_container, resolve_dependencies
from dojo.container import Container
from dojo.entities import Katana, Ninja, Shuriken
from dojo.exceptions import (
    CircularDependencyError,
    DependencyInferenceError,
    DependencyNotRegisteredError,
    DojoError,
    InvalidRegistrationError,
)
from dojo.interfaces import ThrowableWeapon, Warrior, Weapon
from dojo.markers import Injected
from dojo.providers import Lifetime

__all__ = [
    "CircularDependencyError",
    "Container",
    "DependencyInferenceError",
    "DependencyNotRegisteredError",
    "DojoError",
    "Injected",
    "InvalidRegistrationError",
    "Katana",
    "Lifetime",
    "Ninja",
    "Shuriken",
    "ThrowableWeapon",
    "Warrior",
    "Weapon",
    "build_container",
    "resolve_dependencies",
]

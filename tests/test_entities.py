import pytest

from dojo.entities import Katana, Ninja, Shuriken
from dojo.interfaces import ThrowableWeapon, Warrior, Weapon


def test_katana_cuts() -> None:
    assert Katana().hit() == "cut!"


def test_shuriken_hits() -> None:
    assert Shuriken().throw() == "hit!"


def test_ninja_delegates_to_weapons() -> None:
    ninja = Ninja(Katana(), Shuriken())

    assert ninja.fight() == "cut!"
    assert ninja.sneak() == "hit!"


def test_ninja_uses_whatever_weapons_it_is_given() -> None:
    class Bo(Weapon):
        def hit(self) -> str:
            return "thud!"

    class Dart(ThrowableWeapon):
        def throw(self) -> str:
            return "zip!"

    ninja = Ninja(Bo(), Dart())

    assert ninja.fight() == "thud!"
    assert ninja.sneak() == "zip!"


@pytest.mark.parametrize("capability", [Warrior, Weapon, ThrowableWeapon])
def test_capabilities_are_abstract(capability: type) -> None:
    with pytest.raises(TypeError):
        capability()

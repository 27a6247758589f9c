from __future__ import annotations

from dojo.interfaces import ThrowableWeapon, Warrior, Weapon


class Katana(Weapon):
    def hit(self) -> str:
        return "cut!"


class Shuriken(ThrowableWeapon):
    def throw(self) -> str:
        return "hit!"


class Ninja(Warrior):
    """Warrior that fights with its weapon and sneaks with its throwable weapon."""

    def __init__(self, weapon: Weapon, throwable_weapon: ThrowableWeapon) -> None:
        self._weapon = weapon
        self._throwable_weapon = throwable_weapon

    def fight(self) -> str:
        return self._weapon.hit()

    def sneak(self) -> str:
        return self._throwable_weapon.throw()

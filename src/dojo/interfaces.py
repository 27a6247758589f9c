from __future__ import annotations

from abc import ABC, abstractmethod


class Weapon(ABC):
    """A melee weapon a warrior can strike with."""

    @abstractmethod
    def hit(self) -> str: ...


class ThrowableWeapon(ABC):
    """A weapon a warrior can throw from cover."""

    @abstractmethod
    def throw(self) -> str: ...


class Warrior(ABC):
    """A fighter exposing open and covert attacks."""

    @abstractmethod
    def fight(self) -> str: ...

    @abstractmethod
    def sneak(self) -> str: ...

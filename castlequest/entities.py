"""Things found in the castle: items, monsters and the princess."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(eq=False)
class Item(ABC):
    """Something that can lie on a floor or sit in a bag."""

    name: str

    @abstractmethod
    def worth(self) -> int:
        """Cash value of the item."""


@dataclass(eq=False)
class Treasure(Item):
    """An item that adds to the player's cash."""

    value: int = 0

    def worth(self) -> int:
        return self.value


@dataclass(eq=False)
class Weapon(Item):
    """An item that kills a monster and is worth nothing."""

    def worth(self) -> int:
        return 0


@dataclass(eq=False)
class Monster:
    """A monster guarding a hidden room; only its own weapon kills it."""

    name: str
    killing_weapon: Item | None = None
    alive: bool = True


@dataclass(eq=False)
class Princess:
    """The princess the player has come to rescue."""

    alive: bool = True
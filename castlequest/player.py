"""The player and the actions they can take."""

from __future__ import annotations

from enum import Enum, auto

from .console import Color, Console
from .entities import Item, Princess
from .world import Direction, Room, RoomFullError

BAG_CAPACITY = 10


class MoveOutcome(Enum):
    MOVED = auto()
    BLOCKED = auto()
    EXITED = auto()


class Player:
    """The adventurer, with a bag of items and the room they stand in."""

    def __init__(self, name: str, room: Room, console: Console | None = None) -> None:
        self.name = name
        self.room = room
        self.console = console if console is not None else Console()
        self.alive = True
        self.princess: Princess | None = None
        self._bag: list[Item | None] = [None] * BAG_CAPACITY

    @property
    def bag(self) -> tuple[Item, ...]:
        """Items carried, in the order of their bag places."""
        return tuple(item for item in self._bag if item is not None)

    @property
    def cash(self) -> int:
        return sum(item.worth() for item in self.bag)

    def is_bag_empty(self) -> bool:
        return not self.bag

    def is_bag_full(self) -> bool:
        return all(slot is not None for slot in self._bag)

    def _say(self, color: Color, text: str) -> None:
        self.console.set_color(color)
        self.console.write(text)

    def move(self, direction: str) -> MoveOutcome:
        """Walk through an exit; west from room 1 leaves the castle."""
        heading = Direction.parse(direction)
        if heading is Direction.WEST and self.room.number == 1:
            return MoveOutcome.EXITED
        target = self.room.exit_towards(heading)
        if target is None:
            self._say(Color.RED, f"\nMOVE {direction} is an invalid command.")
            return MoveOutcome.BLOCKED
        self.room = target
        if target.princess is not None:
            self._say(Color.AQUA, "The Princess is standing , waiting for you in the dark . ")
            self.princess = target.princess
            target.princess = None
        self._say(Color.RED, f"\nYou have successfully been moved to Room : {target.number}")
        return MoveOutcome.MOVED

    def pick(self, item_name: str) -> bool:
        if self.room.find_item(item_name) is None:
            self._say(Color.RED, f"\n{item_name} is not present in this room.")
            return False
        if self.is_bag_full():
            self.console.write("\nSorry , your bag is already full.")
            self.console.set_color(Color.RED)
            return False
        self._bag[self._bag.index(None)] = self.room.take_item(item_name)
        self._say(Color.RED, f"\n{item_name} has successfully been picked.")
        return True

    def drop(self, item_name: str) -> bool:
        index = next(
            (i for i, item in enumerate(self._bag) if item is not None and item.name == item_name),
            None,
        )
        if index is None:
            self._say(
                Color.YELLOW,
                f"\n{item_name} couldn't be dropped as it is not present in your bag.",
            )
            return False
        try:
            self.room.place_item(self._bag[index])
        except RoomFullError:
            self._say(
                Color.AQUA,
                f"\nThe item {item_name} couldn't be dropped as Room "
                f"{self.room.number} is already full.",
            )
            self.console.set_color(Color.YELLOW)
            return False
        self._bag[index] = None
        self._say(Color.YELLOW, f"\n{item_name} has successfully been dropped.")
        return True

    def attack(self, monster_name: str) -> bool:
        """Fight the monster in this room; without its weapon the player dies."""
        monster = self.room.monster
        if monster is None:
            self.console.write(f"\n{monster_name} is not present in this room.")
            return False
        if not monster.alive:
            self.console.write(f"\n{monster_name} is already dead.")
            return False
        weapon = monster.killing_weapon
        if weapon is not None and any(item is weapon for item in self.bag):
            monster.alive = False
            self._say(Color.RED, f"{monster_name} has been killed . ")
            return True
        self.alive = False
        self._say(
            Color.RED,
            f"\nYour bag doesn't contain the Weapon required to kill {monster_name}",
        )
        return False

    def look(self) -> None:
        """Describe the room, the bag and the cash."""
        room = self.room
        self._say(Color.RED, f"\nCurrently you are in Room {room.number}. {room.description}")
        for direction in room.exits:
            self._say(Color.AQUA, f" There is a room to your {direction.label} .")
        for item in room.items:
            self._say(Color.WHITE, f" The {item.name} is lying on the floor .")
        if room.monster is not None:
            state = (
                "is waiting to kill you beside a locked door."
                if room.monster.alive
                else "is lying dead on the floor."
            )
            self._say(Color.RED, f"{room.monster.name} {state}")
        self.console.set_color(Color.PURPLE)
        if self.princess is not None:
            self.console.write(" You have Princess along with you .")
        self._say(Color.GREEN, "\nYour bag contains the following items : ")
        if self.is_bag_empty():
            self.console.write("\nCurrently, your bag is empty.")
        else:
            self.console.write("".join(f"\n{item.name}" for item in self.bag))
        self._say(Color.BLUE, f"\nCurrent Cash is : {self.cash}")

    def farewell(self) -> None:
        self._say(
            Color.WHITE,
            f"Thankyou {self.name} for playing Zelda.\nThe game is now exiting .........",
        )
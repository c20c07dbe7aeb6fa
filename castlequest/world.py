"""Rooms, directions and the layout of the castle."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Sequence

from .console import MISSING_FILE_MESSAGE, Console
from .entities import Item, Monster, Princess

ITEM_CAPACITY = 5
ROOM_COUNT = 9


class RoomFullError(Exception):
    """Raised when an item is put into a room with no free space."""


class Direction(Enum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Read an upper-case direction word; unknown words mean NORTH."""
        try:
            return cls[text]
        except KeyError:
            return cls.NORTH


class Room:
    """A numbered room with exits, floor space for items and occupants."""

    def __init__(self, number: int = 0) -> None:
        self.number = number
        self.description = ""
        self.monster: Monster | None = None
        self.princess: Princess | None = None
        self._paths: dict[Direction, Room] = {}
        self._slots: list[Item | None] = [None] * ITEM_CAPACITY

    @property
    def items(self) -> tuple[Item, ...]:
        """Items on the floor, in the order of their floor places."""
        return tuple(item for item in self._slots if item is not None)

    @property
    def exits(self) -> tuple[Direction, ...]:
        return tuple(direction for direction in Direction if direction in self._paths)

    def is_full(self) -> bool:
        return all(slot is not None for slot in self._slots)

    def place_item(self, item: Item) -> None:
        """Put an item in the first free floor place."""
        try:
            index = self._slots.index(None)
        except ValueError:
            raise RoomFullError(f"Room {self.number} is already full") from None
        self._slots[index] = item

    def find_item(self, name: str) -> Item | None:
        return next((item for item in self.items if item.name == name), None)

    def take_item(self, name: str) -> Item:
        """Remove and return the first item with this name."""
        for index, item in enumerate(self._slots):
            if item is not None and item.name == name:
                self._slots[index] = None
                return item
        raise LookupError(f"{name} is not present in room {self.number}")

    def link(self, direction: Direction, other: Room) -> None:
        """Open a one-way path from this room to another."""
        self._paths[direction] = other

    def exit_towards(self, direction: Direction) -> Room | None:
        return self._paths.get(direction)


class Castle:
    """The nine rooms of the castle, with items, monsters and the princess placed."""

    def __init__(
        self,
        items: Sequence[Item],
        monsters: Sequence[Monster],
        princess: Princess,
    ) -> None:
        self.rooms = [Room(number) for number in range(1, ROOM_COUNT + 1)]
        r = self.rooms
        north, south, east, west = Direction

        # Going west from room 1 leaves the castle.
        r[0].link(south, r[3])
        r[0].link(east, r[1])

        r[1].link(west, r[0])
        r[1].link(east, r[2])
        r[1].link(south, r[4])
        r[1].place_item(items[0])

        r[2].link(west, r[1])
        r[2].place_item(items[3])

        r[3].link(north, r[0])
        r[3].place_item(items[1])

        r[4].link(north, r[1])
        r[4].link(east, r[5])
        r[4].monster = monsters[0]

        r[5].link(west, r[4])
        r[5].monster = monsters[1]

        r[6].link(east, r[7])
        r[6].place_item(items[4])

        r[7].link(west, r[6])
        r[7].link(north, r[4])
        r[7].place_item(items[2])

        r[8].link(north, r[5])
        r[8].princess = princess

    def room(self, number: int) -> Room:
        if not 1 <= number <= len(self.rooms):
            raise IndexError(f"no room number {number}")
        return self.rooms[number - 1]

    def link_room5_and_8(self) -> None:
        self.rooms[4].link(Direction.SOUTH, self.rooms[7])
        self.rooms[7].link(Direction.NORTH, self.rooms[4])

    def link_room6_and_9(self) -> None:
        self.rooms[5].link(Direction.SOUTH, self.rooms[8])
        self.rooms[8].link(Direction.NORTH, self.rooms[5])

    def unlock_hidden_rooms(self, monster_name: str, monsters: Sequence[Monster]) -> None:
        """Open the door that the named monster was guarding."""
        if monster_name == monsters[0].name:
            self.link_room5_and_8()
        elif monster_name == monsters[1].name:
            self.link_room6_and_9()

    def load_descriptions(self, path: str | Path, console: Console | None = None) -> bool:
        """Give the rooms, in order, the lines of a description file."""
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError:
            if console is not None:
                console.write(MISSING_FILE_MESSAGE)
            return False
        for room, line in zip(self.rooms, text.split("\n")):
            room.description = line
        return True
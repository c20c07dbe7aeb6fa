"""The game loop and the command line entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Sequence

from .console import Color, Console, to_upper
from .entities import Monster, Princess, Treasure, Weapon
from .player import MoveOutcome, Player
from .world import Castle

MAX_COMMAND_LENGTH = 29
MAX_NAME_LENGTH = 19

BANNER = (
    "\t\t\t#####################################################\n"
    "\t\t\t#                                                   #\n"
    "\t\t\t#                  Text Based Game                  #\n"
    "\t\t\t#                                                   #\n"
    "\t\t\t#####################################################"
)


def parse_command(line: str) -> tuple[str, str]:
    """Split an input line into an upper-case verb and the text after it."""
    text = to_upper(line.rstrip("\r\n")[:MAX_COMMAND_LENGTH])
    verb, _, argument = text.partition(" ")
    return verb, argument


class Game:
    """One adventure: the castle, its contents and the player."""

    def __init__(
        self,
        player_name: str,
        data_dir: str | Path = ".",
        console: Console | None = None,
    ) -> None:
        self.console = console if console is not None else Console()
        self.data_dir = Path(data_dir)
        self.items = [
            Treasure("GOLDEN EGG", 500000),
            Treasure("GOLDEN CHALICE", 500000),
            Treasure("PROOF", 1000000),
            Weapon("SHIELD"),
            Weapon("DAGGER"),
        ]
        self.monsters = [
            Monster("MEDUSA", self.items[3]),
            Monster("DRACULA", self.items[4]),
        ]
        self.princess = Princess()
        self.castle = Castle(self.items, self.monsters, self.princess)
        self.castle.load_descriptions(self.data_dir / "Rooms.txt", self.console)
        self.player = Player(player_name, self.castle.room(1), self.console)
        self.finished = False

    def display_story(self) -> None:
        self.console.write_file(self.data_dir / "Start.txt", Color.PURPLE)

    def player_dead(self) -> None:
        self.console.write_file(self.data_dir / "EndDead.txt", Color.RED)

    def game_check(self) -> None:
        """Show the ending: a win with the princess, a loss without her."""
        if self.player.princess is not None:
            self.console.write_file(self.data_dir / "EndWin.txt", Color.AQUA)
        else:
            self.console.write_file(self.data_dir / "EndLose.txt", Color.RED)

    def handle(self, line: str) -> bool:
        """Carry out one command; return whether the game goes on."""
        verb, argument = parse_command(line)
        player = self.player
        if verb == "MOVE":
            outcome = player.move(argument)
            if outcome is MoveOutcome.MOVED:
                player.look()
            elif outcome is MoveOutcome.EXITED:
                self.game_check()
                self.finished = True
        elif verb == "PICK":
            player.pick(argument)
        elif verb == "DROP":
            player.drop(argument)
        elif verb == "LOOK":
            player.look()
        elif verb == "ATTACK":
            if player.attack(argument):
                self.castle.unlock_hidden_rooms(argument, self.monsters)
            elif not player.alive:
                self.player_dead()
        elif verb == "EXIT":
            player.farewell()
            self.finished = True
        else:
            self.console.set_color(Color.RED)
            self.console.write("\nINVALID COMMAND . Please enter a Valid Command .")
        if not player.alive:
            self.finished = True
        return not self.finished

    def play(self, lines: Iterable[str]) -> None:
        """Run the game, reading commands until it ends or input runs out."""
        self.console.write("\n\n\n\n")
        self.console.set_color(Color.RED)
        self.console.write(BANNER)
        self.console.write("\n\n\n")
        self.display_story()
        self.player.look()
        commands = iter(lines)
        while True:
            self.console.set_color(Color.YELLOW)
            self.console.write("\n\nWhat do you want to do : ")
            line = next(commands, None)
            if line is None or not self.handle(line):
                break


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="castlequest",
        description="Rescue the princess from the castle in a text adventure.",
    )
    parser.add_argument(
        "--data-dir",
        default=".",
        help="directory holding Rooms.txt, Start.txt and the ending texts",
    )
    parser.add_argument("--no-color", action="store_true", help="disable coloured output")
    args = parser.parse_args(argv)

    console = Console(sys.stdout, use_color=not args.no_color and sys.stdout.isatty())
    console.set_color(Color.YELLOW)
    console.write("Enter your name : ")
    name = sys.stdin.readline().rstrip("\r\n")[:MAX_NAME_LENGTH]

    game = Game(name, args.data_dir, console)
    game.play(line.rstrip("\r\n") for line in sys.stdin)

    if console.use_color:
        console.write("\x1b[0m")
    console.write("\nPress Enter to continue . . .")
    sys.stdin.readline()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
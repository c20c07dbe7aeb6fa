# castlequest

A small console text adventure for one player. You start in room 1 of a
nine-room castle and explore it by typing commands. Gather treasure, find the
weapons that defeat the monsters and rescue the princess. Then leave the
castle through the west door of room 1.

## Installation

    pip install .

## Playing

    castlequest [--data-dir DIR] [--no-color]

- `--data-dir DIR`: the directory holding the text files described below
  (default: the current directory).
- `--no-color`: turn off coloured output. Colours are only used when standard
  output is a terminal.

The game first asks for your name and keeps up to 19 characters of it. Then it
prints a banner and the opening story and describes the room you are in. After
that it reads one command per line from standard input. It uses the first 29
characters of each line and upper-cases them, so commands and names are not
case sensitive.

| Command            | Effect |
|--------------------|--------|
| `MOVE <direction>` | Go NORTH, SOUTH, EAST or WEST. Any other word counts as NORTH. WEST from room 1 leaves the castle. |
| `PICK <item>`      | Put an item from the room into your bag. The bag holds 10 items. |
| `DROP <item>`      | Leave an item from your bag in the room. A room holds 5 items. |
| `LOOK`             | Describe the room, its exits, items and monster, and show your bag and cash. |
| `ATTACK <monster>` | Fight the monster in the room. |
| `EXIT`             | Say goodbye and quit. |

Anything else prints `INVALID COMMAND`.

The castle holds three treasures (GOLDEN EGG, GOLDEN CHALICE and PROOF), two
weapons (SHIELD and DAGGER) and two monsters. MEDUSA dies to the SHIELD and
DRACULA to the DAGGER. Your cash is the total worth of the treasures in your
bag. Killing MEDUSA opens the way between rooms 5 and 8. Killing DRACULA
opens the way between rooms 6 and 9, where the princess waits. Walking into
her room makes her join you. If you attack a live monster without its weapon
in your bag, you die. If you leave the castle with the princess you win.
If you leave without her you lose.

The game also ends when input runs out. It then prints
`Press Enter to continue . . .` and waits for one more line.

## Story and room files

The game reads its text from plain files in the data directory:

- `Rooms.txt`: one description per line, for rooms 1 to 9
- `Start.txt`: the opening story
- `EndWin.txt`, `EndLose.txt`, `EndDead.txt`: the endings

These files are not part of the package. You write your own. If a file is
missing, the game prints `Could not open file` and carries on, and the rooms
have no descriptions.

## Using it from Python

    import io
    from castlequest.console import Console
    from castlequest.game import Game, parse_command

    out = io.StringIO()
    game = Game("Link", data_dir=".", console=Console(out))
    game.play(["look", "move east", "pick golden egg", "exit"])

    parse_command("pick golden egg")   # ("PICK", "GOLDEN EGG")

- `castlequest.game`: `Game` (with `play`, `handle` for one command line,
  `display_story`, `game_check` and `player_dead`), `parse_command` and `main`.
- `castlequest.player`: `Player`, with `move`, `pick`, `drop`, `attack`,
  `look`, `farewell`, `cash`, `bag`, and `MoveOutcome` (`MOVED`, `BLOCKED`,
  `EXITED`).
- `castlequest.world`: `Direction`, `Room` (`place_item`, `take_item`,
  `find_item`, `link`, `exit_towards`, `is_full`), `Castle` and
  `RoomFullError`.
- `castlequest.entities`: `Item`, `Treasure`, `Weapon`, `Monster`, `Princess`.
- `castlequest.console`: `Console` (a stream with optional ANSI colours),
  `Color` and `to_upper`.

## What it does not do

The game has one player at a time on one console. It has no network play and
no saved games. The castle layout and its contents are fixed in code. Only the
room descriptions and the story texts come from files.

## Running the tests

    pip install .[test]
    pytest
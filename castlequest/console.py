"""Console output with optional colours and plain-text screen files."""

from __future__ import annotations

import sys
from enum import IntEnum
from pathlib import Path
from typing import TextIO


class Color(IntEnum):
    """Text colours, numbered by their classic console attribute."""

    BLUE = 9
    GREEN = 10
    AQUA = 11
    RED = 12
    PURPLE = 13
    YELLOW = 14
    WHITE = 15

    @property
    def ansi(self) -> str:
        """The ANSI escape sequence that selects this colour."""
        return f"\x1b[{_ANSI_CODES[self]}m"


_ANSI_CODES = {
    Color.BLUE: 94,
    Color.GREEN: 92,
    Color.AQUA: 96,
    Color.RED: 91,
    Color.PURPLE: 95,
    Color.YELLOW: 93,
    Color.WHITE: 97,
}

MISSING_FILE_MESSAGE = "Could not open file"


def to_upper(text: str) -> str:
    """Upper-case the ASCII letters a-z and leave every other character alone."""
    return "".join(chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text)


class Console:
    """Writes game text to a stream, switching colours when asked to."""

    def __init__(self, stream: TextIO | None = None, use_color: bool = False) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.use_color = use_color

    def set_color(self, color: Color | int) -> None:
        """Switch the colour of subsequent text, if colours are enabled."""
        if self.use_color:
            self.stream.write(Color(color).ansi)

    def write(self, text: str) -> None:
        """Write text and flush it straight away."""
        self.stream.write(text)
        self.stream.flush()

    def write_file(self, path: str | Path, color: Color | int) -> bool:
        """Print every line of a text file in the given colour.

        Returns False, after saying so, when the file cannot be read.
        """
        try:
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError:
            self.write(MISSING_FILE_MESSAGE)
            return False
        self.set_color(color)
        self.write("".join(line + "\n" for line in text.split("\n")))
        return True
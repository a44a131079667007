"""Line-oriented terminal input and output for the game."""

from __future__ import annotations

import sys
from typing import TextIO

CLEAR_SCREEN = "\033[2J\033[H"
PAUSE_PROMPT = "Press any key to continue . . . "
INVALID_INTEGER = "Invalid input! Please enter a valid integer."
EMPTY_INPUT = "Input cannot be empty! Please try again: "


class Console:
    """Reads player input and writes game text to a pair of text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write one line of text."""
        self._out.write(f"{text}\n")
        self._out.flush()

    def pause(self) -> None:
        """Wait for the player to press Enter. End of input does not block."""
        self._out.write(PAUSE_PROMPT)
        self._out.flush()
        self._in.readline()

    def clear(self) -> None:
        """Clear the terminal screen."""
        self._out.write(CLEAR_SCREEN)
        self._out.flush()

    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and return the next line without its line ending.

        Raises EOFError when the input is exhausted.
        """
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise EOFError("no more input")
        return line.rstrip("\r\n")

    def read_int(self, prompt: str = "") -> int:
        """Ask until the player enters a non-negative whole number."""
        while True:
            text = self.read_line(prompt)
            if text and text.isascii() and text.isdigit():
                return int(text)
            self.write(INVALID_INTEGER)

    def read_string(self, prompt: str = "") -> str:
        """Ask until the player enters a non-empty line."""
        text = self.read_line(prompt)
        while not text:
            text = self.read_line(EMPTY_INPUT)
        return text
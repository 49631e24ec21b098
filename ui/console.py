from __future__ import annotations

import sys
from typing import TextIO


class ConsoleIO:
    """Line-based terminal front end for :class:`checkers.game.Game`."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("No more input.")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(text + "\n")
        self.stdout.flush()

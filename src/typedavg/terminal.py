# OOP boundary for console i/o
# all prompting, token reading and printing live here, so the exercise logic stays pure and testable

from __future__ import annotations
import sys
from typing import List, Optional, TextIO

class TerminalError(RuntimeError):
    # single error type used to propagate stream failures from this layer
    pass

class TerminalSession:
    # reads whitespace-delimited tokens the way a formatted stream extraction does

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        # defaults are the process streams as they are when the session is created
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        # tokens already read from the current line but not yet consumed
        self._pending: List[str] = []

    def _write(self, text: str) -> None:
        try:
            self.stdout.write(text)
        except (OSError, ValueError) as exc:
            # ValueError is what a closed stream raises
            raise TerminalError(f"Cannot write to terminal: {exc}") from exc

    def prompt(self, text: str) -> None:
        # no newline, the answer is typed on the same line
        self._write(text)
        try:
            self.stdout.flush()
        except (OSError, ValueError) as exc:
            raise TerminalError(f"Cannot flush terminal: {exc}") from exc

    def read_token(self) -> str:
        # skips blank lines; at end of input the token is empty and the caller carries on
        while not self._pending:
            try:
                line = self.stdin.readline()
            except (OSError, ValueError) as exc:
                raise TerminalError(f"Cannot read from terminal: {exc}") from exc
            if not line:
                return ""
            self._pending = line.split()
        return self._pending.pop(0)

    def write_line(self, text: str = "") -> None:
        self._write(text + "\n")

    def write_lines(self, lines) -> None:
        for line in lines:
            self.write_line(line)

"""Token-oriented terminal input and output."""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO


class Console:
    """Reads whitespace-separated tokens and writes text to a pair of streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._pending: deque[str] = deque()

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def read_token(self) -> str:
        """Return the next whitespace-separated word; raises EOFError at end of input."""
        flush = getattr(self.stdout, "flush", None)
        if flush is not None:
            flush()
        while not self._pending:
            line = self.stdin.readline()
            if not line:
                raise EOFError("end of input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def read_int(self) -> int:
        token = self.read_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected a whole number, got {token!r}") from None

    def read_float(self) -> float:
        token = self.read_token()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_token()

    def ask_int(self, prompt: str) -> int:
        self.write(prompt)
        return self.read_int()
from __future__ import annotations

from typing import Sequence

from optscan.parser.errors import CursorError


class ArgumentCursor:
    """
    A read position over an argument vector.

    The vector itself is never modified.  Tokens are taken one at a
    time with consume(), and the token just taken can be given back
    with unconsume() -- once.  Rewinding further is an error.
    """

    def __init__(self, argv: Sequence[str], start: int = 0) -> None:
        self._argv = tuple(argv)
        if not 0 <= start <= len(self._argv):
            raise CursorError(f"cursor start {start} outside of {len(self._argv)} arguments")
        self._pos = start
        self._can_rewind = False

    def __repr__(self) -> str:
        return f"ArgumentCursor({list(self._argv)!r}, start={self._pos})"

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._argv) - self._pos

    def peek(self) -> str | None:
        if self._pos < len(self._argv):
            return self._argv[self._pos]
        return None

    def consume(self) -> str | None:
        if self._pos >= len(self._argv):
            return None
        arg = self._argv[self._pos]
        self._pos += 1
        self._can_rewind = True
        return arg

    def unconsume(self) -> None:
        if not self._can_rewind:
            raise CursorError("cannot rewind more than the last consumed argument")
        self._pos -= 1
        self._can_rewind = False

    def rest(self) -> list[str]:
        return list(self._argv[self._pos :])

    def span(self, start: int) -> list[str]:
        """Return the arguments consumed since position 'start'."""
        return list(self._argv[start : self._pos])

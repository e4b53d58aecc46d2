from __future__ import annotations

from enum import Enum
from typing import NamedTuple


DIGITS = "0123456789"


class TokenKind(Enum):
    PLAIN = "plain"  # not an option
    END = "end"  # "--", stops option scanning
    SHORT = "short"  # "-abc", a cluster of short options
    LONG = "long"  # "--name"


def classify(arg: str) -> TokenKind:
    """Return the kind of a single command-line token.

    Only the first three characters are inspected:

      --name  LONG
      --      END
      -abc    SHORT
      -, abc  PLAIN
    """
    if arg[:1] == "-":
        if arg[1:2] == "-":
            return TokenKind.LONG if arg[2:3] else TokenKind.END
        if arg[1:2]:
            return TokenKind.SHORT
    return TokenKind.PLAIN


class Token(NamedTuple):
    raw: str
    kind: TokenKind

    @classmethod
    def of(cls, raw: str) -> Token:
        return cls(raw, classify(raw))

    @property
    def body(self) -> str:
        """The token text after its leading dashes."""
        if self.kind is TokenKind.LONG:
            return self.raw[2:]
        if self.kind is TokenKind.SHORT:
            return self.raw[1:]
        return self.raw

    def is_numeric(self) -> bool:
        # "-5" or "-1.5" looks like a short cluster but is a negative number
        return self.kind is TokenKind.SHORT and self.raw[1] in DIGITS

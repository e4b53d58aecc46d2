from __future__ import annotations

import dataclasses

from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import Callable
from typing import Optional
from typing import Sequence

from optscan.parser.errors import OptionError


class OptionKind(Enum):
    SHORT = 0
    LONG = 1


class FirstArg(Enum):
    """What to do with the first command-line argument."""

    SKIP = "skip"  # program name slot, never classified
    PARSE = "parse"  # classify it like any other token


class EndOfOptions(Enum):
    """What to do when "--" appears on the command line."""

    ALLOW = "allow"  # "--" ends option scanning
    DISALLOW = "disallow"  # "--" is an ordinary positional token


# (count, args, data) -> result; a None result counts as 0
OptionCallback = Callable[[int, "list[str]", Any], Optional[int]]
# (kind, char, name, data) -> result
ErrorCallback = Callable[[OptionKind, Optional[str], Optional[str], Any], Optional[int]]


def _repr(self):
    return f"<{self.__class__.__name__} at 0x{id(self):x}: {self}>"


class OptionSpec:
    """
    A single entry of an option table.

    Instance attributes:
      short : string | None
        the short option character, eg. "v" for "-v"
      long : string | None
        the long option name, eg. "verbose" for "--verbose"
      nargs : int
        the most positional arguments collected after the option;
        -1 collects until the next option token or the end of input
      handler : function
        invoked as handler(count, args, data) when the option is seen

    An empty string is the same as None for both keys.  A spec with
    neither key is inert: it is never indexed and never matched.
    """

    UNBOUNDED: int = -1

    def __init__(
        self,
        short: str | None = None,
        long: str | None = None,
        nargs: int = 0,
        handler: OptionCallback | None = None,
    ) -> None:
        self.short = None if short == "" else short
        self.long = None if long == "" else long
        self.nargs = nargs
        self.handler = handler

        for checker in self.CHECK_METHODS:
            checker(self)

    def _check_short(self) -> None:
        if self.short is None:
            return
        if not isinstance(self.short, str) or len(self.short) != 1:
            raise OptionError(
                f"invalid short option {self.short!r}: must be a single character",
                self,
            )
        if self.short == "-":
            raise OptionError("invalid short option '-': can never be matched", self)

    def _check_long(self) -> None:
        if self.long is not None and not isinstance(self.long, str):
            raise OptionError(f"invalid long option {self.long!r}: not a string", self)

    def _check_nargs(self) -> None:
        if isinstance(self.nargs, bool) or not isinstance(self.nargs, int):
            raise OptionError(f"'nargs' must be an int: not {self.nargs!r}", self)
        if self.nargs < self.UNBOUNDED:
            raise OptionError(
                f"invalid 'nargs' {self.nargs}: must be -1 (unbounded) or >= 0", self
            )

    def _check_handler(self) -> None:
        if not callable(self.handler):
            raise OptionError(f"handler not callable: {self.handler!r}", self)

    CHECK_METHODS = [_check_short, _check_long, _check_nargs, _check_handler]

    def __str__(self) -> str:
        opts = []
        if isinstance(self.short, str):
            opts.append(f"-{self.short}")
        if isinstance(self.long, str):
            opts.append(f"--{self.long}")
        return "/".join(opts)

    __repr__ = _repr

    def has_short(self) -> bool:
        return self.short is not None

    def has_long(self) -> bool:
        return self.long is not None

    def is_unbounded(self) -> bool:
        return self.nargs == self.UNBOUNDED


@dataclass(frozen=True)
class ParseContext:
    """
    Everything a single parse() call needs besides the option table.

    'data' is handed unchanged to every callback.  A callback that
    wants options and positionals interleaved differently can parse
    its own arguments again with derive().
    """

    argv: Sequence[str]
    on_error: ErrorCallback
    on_positional: OptionCallback
    first_arg: FirstArg = FirstArg.SKIP
    end_of_options: EndOfOptions = EndOfOptions.ALLOW
    data: Any = None

    def derive(
        self,
        argv: Sequence[str],
        first_arg: FirstArg = FirstArg.PARSE,
        **changes: Any,
    ) -> ParseContext:
        """Return a fresh context over 'argv' sharing callbacks and data.

        Any other field can be replaced through 'changes', eg. a
        different on_positional for a subcommand.
        """
        return dataclasses.replace(self, argv=argv, first_arg=first_arg, **changes)

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from optscan.parser.api import OptionSpec


class OptParseError(Exception):
    """Base class for errors raised while building or using an option table."""

    def __init__(self, msg: str) -> None:
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionError(OptParseError):
    """
    Raised if an OptionSpec is created with a key, argument cap or
    handler that could never be dispatched.  The message names the
    offending spec by its option strings, eg. "-v/--verbose".
    """

    def __init__(self, msg: str, option: OptionSpec) -> None:
        self.msg = msg
        self.option_id = str(option)

    def __str__(self) -> str:
        if self.option_id:
            return f"option spec {self.option_id}: {self.msg}"
        return self.msg


class OptionConflictError(OptionError):
    """
    Raised if an option table declares the same short character or
    long name more than once.
    """


class BadOptionError(OptParseError):
    """
    Raised if an option string does not name any option of a parser.
    """

    def __init__(self, opt_str: str) -> None:
        self.opt_str = opt_str

    def __str__(self) -> str:
        return f"no such option: {self.opt_str}"


class CursorError(OptParseError):
    """
    Raised if an argument cursor is rewound further than the single
    token it last consumed.
    """

from __future__ import annotations

from optscan.parser.api import EndOfOptions
from optscan.parser.api import FirstArg
from optscan.parser.api import OptionKind
from optscan.parser.api import OptionSpec
from optscan.parser.api import ParseContext
from optscan.parser.optparser import OptionParser
from optscan.parser.optparser import parse


__all__ = [
    "EndOfOptions",
    "FirstArg",
    "OptionKind",
    "OptionParser",
    "OptionSpec",
    "ParseContext",
    "parse",
]

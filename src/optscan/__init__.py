from __future__ import annotations

from optscan.parser import EndOfOptions
from optscan.parser import FirstArg
from optscan.parser import OptionKind
from optscan.parser import OptionParser
from optscan.parser import OptionSpec
from optscan.parser import ParseContext
from optscan.parser import parse


__version__ = "0.1.0"

__all__ = [
    "EndOfOptions",
    "FirstArg",
    "OptionKind",
    "OptionParser",
    "OptionSpec",
    "ParseContext",
    "__version__",
    "parse",
]

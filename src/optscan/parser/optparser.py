from __future__ import annotations

import logging
import sys

from typing import Any
from typing import Iterable
from typing import Sequence

from optscan.parser.api import EndOfOptions
from optscan.parser.api import ErrorCallback
from optscan.parser.api import FirstArg
from optscan.parser.api import OptionCallback
from optscan.parser.api import OptionKind
from optscan.parser.api import OptionSpec
from optscan.parser.api import ParseContext
from optscan.parser.cursor import ArgumentCursor
from optscan.parser.errors import BadOptionError
from optscan.parser.errors import OptionConflictError
from optscan.parser.index import LookupIndex
from optscan.parser.tokens import Token
from optscan.parser.tokens import TokenKind


logger = logging.getLogger(__name__)

# Returned by OptionParser's default error callback.
BAD_OPTION_STATUS = 2


def _result(value: int | None) -> int:
    return 0 if value is None else value


def parse(context: ParseContext, table: Sequence[OptionSpec]) -> int:
    """parse(context : ParseContext, table : [OptionSpec]) -> int

    Scan context.argv against 'table', invoking option handlers as
    options are seen.  The first non-option token (or "--") hands the
    rest of the vector to context.on_positional and ends the scan, so
    options must come before positional arguments.

    Returns 0 if the scan ran to completion, otherwise the first
    nonzero value returned by any callback, unchanged.
    """
    index = LookupIndex.build(table)
    logger.debug(
        "Indexed %d short and %d long options",
        len(index.short_order),
        len(index.long_order),
    )
    return _Scan(context, index).run()


class _Scan:
    """
    Working state of a single parse() call.

    Nothing here outlives the call, so a callback may safely start a
    nested parse() of its own.
    """

    def __init__(self, context: ParseContext, index: LookupIndex) -> None:
        self.context = context
        self.index = index
        self.cursor = ArgumentCursor(context.argv)

    def run(self) -> int:
        self._process_first()
        return self._process_args()

    def _next_token(self) -> Token | None:
        arg = self.cursor.consume()
        if arg is None:
            return None
        token = Token.of(arg)
        if (
            token.kind is TokenKind.END
            and self.context.end_of_options is EndOfOptions.DISALLOW
        ):
            return Token(arg, TokenKind.PLAIN)
        return token

    # -- Callback plumbing ---------------------------------------------

    def _invoke(self, option: OptionSpec, count: int, args: list[str]) -> int:
        logger.debug("Dispatching %s with %d argument(s)", option, count)
        return _result(option.handler(count, args, self.context.data))

    def _call_positional(self) -> int:
        rest = self.cursor.rest()
        logger.debug("Handing %d positional argument(s) over", len(rest))
        return _result(self.context.on_positional(len(rest), rest, self.context.data))

    def _call_error(self, kind: OptionKind, char: str | None, name: str | None) -> int:
        logger.debug("Unrecognized %s option %r", kind.name.lower(), char or name)
        return _result(self.context.on_error(kind, char, name, self.context.data))

    # -- Option-parsing methods ----------------------------------------

    def _process_first(self) -> None:
        if self.context.first_arg is FirstArg.SKIP:
            arg = self.cursor.consume()
            logger.debug("Skipped first argument %r", arg)

    def _process_args(self) -> int:
        while True:
            token = self._next_token()
            if token is None:
                return 0

            if token.kind is TokenKind.PLAIN:
                # leave it for the positional callback
                self.cursor.unconsume()
                return self._call_positional()
            if token.kind is TokenKind.END:
                return self._call_positional()

            if token.kind is TokenKind.SHORT:
                res = self._process_short_opts(token.body)
            else:
                res = self._process_long_opt(token.body)
            if res:
                logger.debug("Scan stopped at %r with status %r", token.raw, res)
                return res

    def _process_long_opt(self, name: str) -> int:
        option = self.index.find_long(name)
        if option is None:
            return self._call_error(OptionKind.LONG, None, name)
        return self._call_back(option)

    def _process_short_opts(self, cluster: str) -> int:
        res = 0
        last = len(cluster) - 1
        for i, ch in enumerate(cluster):
            option = self.index.find_short(ch)
            if option is None:
                res = self._call_error(OptionKind.SHORT, ch, None)
            elif i < last:
                # only the last option of a cluster may take arguments
                res = self._invoke(option, 0, [])
            else:
                res = self._call_back(option)

            if res:
                break
        return res

    def _call_back(self, option: OptionSpec) -> int:
        start = self.cursor.position
        count = self._collect_args(option)
        return self._invoke(option, count, self.cursor.span(start))

    def _collect_args(self, option: OptionSpec) -> int:
        """_collect_args(option : OptionSpec) -> int

        Consume up to option.nargs arguments for 'option' (all of them
        if it is unbounded).  Plain tokens and negative numbers such as "-5"
        are taken; the first other token is put back and ends the run.
        Returns the number of arguments taken.
        """
        count = 0
        while option.is_unbounded() or count < option.nargs:
            token = self._next_token()
            if token is None:
                break
            if token.kind is TokenKind.PLAIN or token.is_numeric():
                count += 1
            else:
                self.cursor.unconsume()
                break
        return count


class OptionParser:
    """
    A reusable option table together with the settings to parse it.

    Instance attributes:
      option_list : [OptionSpec]
        the option table, in the order options were added
      first_arg : FirstArg
        first-argument disposition used by parse_args()
      end_of_options : EndOfOptions
        "--" disposition used by parse_args()
      on_error : function
        error callback; by default records the option string in
        'unknown' and stops the scan with BAD_OPTION_STATUS
      on_positional : function
        positional callback; by default stores the arguments in
        'remainder'
      remainder : [string] | None
        arguments left over by the last parse_args() call, when the
        default positional callback is used
      unknown : [string]
        unrecognized option strings, eg. "-x" or "--bogus", seen by
        the default error callback during the last parse_args() call
    """

    option_list: list[OptionSpec]
    remainder: list[str] | None
    unknown: list[str]

    def __init__(
        self,
        first_arg: FirstArg = FirstArg.SKIP,
        end_of_options: EndOfOptions = EndOfOptions.ALLOW,
        on_error: ErrorCallback | None = None,
        on_positional: OptionCallback | None = None,
        option_list: Iterable[OptionSpec] | None = None,
    ) -> None:
        self.first_arg = first_arg
        self.end_of_options = end_of_options
        self.on_error = on_error or self._record_unknown
        self.on_positional = on_positional or self._store_remainder

        self._create_option_list()
        if option_list:
            self.add_options(option_list)
        self._init_parsing_state()

    def _create_option_list(self) -> None:
        self.option_list = []
        self._short_opt: dict[str, OptionSpec] = {}  # "-v" -> OptionSpec
        self._long_opt: dict[str, OptionSpec] = {}  # "--verbose" -> OptionSpec

    def _init_parsing_state(self) -> None:
        self.remainder = None
        self.unknown = []

    # -- Option-adding methods -----------------------------------------

    def _check_conflict(self, option: OptionSpec) -> None:
        conflict_opts = []
        for opt, mapping in _opt_strings(option, self._short_opt, self._long_opt):
            if opt in mapping:
                conflict_opts.append(opt)

        if conflict_opts:
            raise OptionConflictError(
                "conflicting option string(s): {}".format(", ".join(conflict_opts)),
                option,
            )

    def add_option(self, *args: Any, **kwargs: Any) -> OptionSpec:
        """add_option(OptionSpec)
        add_option(short, long, nargs=0, handler=None)
        """
        if len(args) == 1 and not kwargs and isinstance(args[0], OptionSpec):
            option = args[0]
        elif args and isinstance(args[0], OptionSpec):
            raise TypeError("invalid arguments")
        else:
            option = OptionSpec(*args, **kwargs)

        self._check_conflict(option)

        self.option_list.append(option)
        for opt, mapping in _opt_strings(option, self._short_opt, self._long_opt):
            mapping[opt] = option

        return option

    def add_options(self, option_list: Iterable[OptionSpec]) -> None:
        for option in option_list:
            self.add_option(option)

    # -- Option query/removal methods ----------------------------------

    def get_option(self, opt_str: str) -> OptionSpec | None:
        return self._short_opt.get(opt_str) or self._long_opt.get(opt_str)

    def has_option(self, opt_str: str) -> bool:
        return opt_str in self._short_opt or opt_str in self._long_opt

    def remove_option(self, opt_str: str) -> None:
        option = self.get_option(opt_str)
        if option is None:
            raise BadOptionError(opt_str)

        for opt, mapping in _opt_strings(option, self._short_opt, self._long_opt):
            del mapping[opt]
        self.option_list.remove(option)

    # -- Option-parsing methods ----------------------------------------

    def parse_args(self, args: Sequence[str] | None = None, data: Any = None) -> int:
        """parse_args(args : [string] = sys.argv, data : any = None) -> int

        Parse 'args' against this parser's options.  'args' is a full
        vector: with FirstArg.SKIP its first item is the program name.
        Returns the same status as parse().
        """
        if args is None:
            args = sys.argv
        self._init_parsing_state()

        context = ParseContext(
            argv=args,
            on_error=self.on_error,
            on_positional=self.on_positional,
            first_arg=self.first_arg,
            end_of_options=self.end_of_options,
            data=data,
        )
        return parse(context, self.option_list)

    def _store_remainder(self, count: int, args: list[str], data: Any) -> int:
        self.remainder = list(args)
        return 0

    def _record_unknown(
        self, kind: OptionKind, char: str | None, name: str | None, data: Any
    ) -> int:
        self.unknown.append(f"-{char}" if kind is OptionKind.SHORT else f"--{name}")
        return BAD_OPTION_STATUS


def _opt_strings(
    option: OptionSpec,
    short_opt: dict[str, OptionSpec],
    long_opt: dict[str, OptionSpec],
) -> list[tuple[str, dict[str, OptionSpec]]]:
    opts = []
    if option.has_short():
        opts.append((f"-{option.short}", short_opt))
    if option.has_long():
        opts.append((f"--{option.long}", long_opt))
    return opts

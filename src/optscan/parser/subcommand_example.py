from __future__ import annotations

import sys

from typing import Any

from optscan.parser.api import OptionKind
from optscan.parser.api import OptionSpec
from optscan.parser.api import ParseContext
from optscan.parser.optparser import parse


def main(argv: list[str] | None = None) -> int:
    # The state every callback shares through 'data'.
    state: dict[str, Any] = {
        "repository": None,
        "verbose": False,
        "dryrun": False,
        "message": None,
        "subcommand": None,
        "files": [],
    }

    def set_repository(count, args, data):
        if count != 1:
            print("-R/--repository requires a PATH", file=sys.stderr)
            return 2
        data["repository"] = args[0]
        return 0

    def set_verbose(count, args, data):
        data["verbose"] = True

    def set_dryrun(count, args, data):
        data["dryrun"] = True

    def set_message(count, args, data):
        data["message"] = " ".join(args)

    def collect_files(count, args, data):
        data["files"] = list(args)

    def unknown_option(kind, char, name, data):
        opt = f"-{char}" if kind is OptionKind.SHORT else f"--{name}"
        print(f"no such option: {opt}", file=sys.stderr)
        return 2

    # Some subcommands, each with its own option table.
    subcommands = {
        "add": [OptionSpec("n", "dry-run", 0, set_dryrun)],
        "commit": [
            OptionSpec("m", "message", -1, set_message),
            OptionSpec("n", "dry-run", 0, set_dryrun),
        ],
    }
    aliases = {"ci": "commit"}

    def run_subcommand(count, args, data):
        # The first positional picks the subcommand; its own options are
        # scanned by parsing the rest of the vector again.
        if not count:
            print("need a command", file=sys.stderr)
            return 2
        name = aliases.get(args[0], args[0])
        if name not in subcommands:
            print(f"unknown command: {args[0]}", file=sys.stderr)
            return 1
        data["subcommand"] = name
        nested = context.derive(args[1:], on_positional=collect_files)
        return parse(nested, subcommands[name])

    # Set up the global options.
    global_options = [
        OptionSpec("R", "repository", 1, set_repository),
        OptionSpec("v", "verbose", 0, set_verbose),
    ]
    context = ParseContext(
        argv=sys.argv if argv is None else argv,
        on_error=unknown_option,
        on_positional=run_subcommand,
        data=state,
    )

    status = parse(context, global_options)
    if status:
        return status

    subcommand = state["subcommand"]
    if subcommand == "add":
        if state["files"]:
            print("Adding files:", ", ".join(state["files"]))
            print("Dry run:", ("yes" if state["dryrun"] else "no"))
        else:
            print("need at least one file to add", file=sys.stderr)
            return 2
    elif subcommand == "commit":
        if state["files"]:
            print("Committing files:", ", ".join(state["files"]))
        else:
            print("Committing all changes.")
        if state["message"]:
            print("Message:", state["message"])
    else:
        print("(no command)")

    # Show the global options.
    print("Repository:", (state["repository"] or "(default)"))
    print("Verbose:", ("yes" if state["verbose"] else "no"))
    return 0


if __name__ == "__main__":
    sys.exit(main())

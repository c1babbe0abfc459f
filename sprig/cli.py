"""Command-line interface for sprig.

Commands:
- top: List the top code size offenders in a binary
- dominators: Display the dominator tree of a binary's call graph
- paths: Display the call paths to functions in a binary's call graph

Every flag defaults to None here. The parser starts from the mode's
`new()` config and applies only the flags that were given, so the models
remain the single source of defaults.
"""
from __future__ import annotations

import argparse
from typing import NoReturn

from typing_extensions import override

from sprig import __version__
from sprig.command import Command, command_for
from sprig.config.common import ModeConfig
from sprig.config.dominators import DominatorsConfig
from sprig.config.mode import Mode
from sprig.config.output import OutputFormat
from sprig.config.paths import DEFAULT_MAX_DEPTH, DEFAULT_MAX_PATHS, PathsConfig
from sprig.config.top import TopConfig
from sprig.errors import MalformedArgument


DESCRIPTION = """\
sprig is a code size profiler.

It analyzes a binary's call graph to answer questions like:

* Why was this function included in the binary in the first place?

* What is the retained size of this function? I.e. how much space
  would be saved if I removed it and all the functions that become
  dead code after its removal.

Use sprig to make your binaries slim!"""


class _Args(argparse.Namespace):
    """Typed namespace for CLI arguments."""

    command: str | None = None
    input: str | None = None
    output_destination: str | None = None
    output_format: str | None = None

    # top
    number: str | None = None
    retaining_paths: bool | None = None
    retained: bool | None = None

    # dominators / paths
    max_depth: str | None = None
    max_rows: str | None = None
    functions: list[str] | None = None
    max_paths: str | None = None


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting on bad input."""

    @override
    def error(self, message: str) -> NoReturn:
        raise MalformedArgument(message)


def parse_u32(flag: str, token: str) -> int:
    """Parse the value of a numeric flag."""
    # Plain ASCII digits only: int() would also take "+5", " 5" and "1_000".
    if not (token.isascii() and token.isdigit()):
        raise MalformedArgument(
            f"argument {flag}: expected an unsigned integer, got {token!r}"
        )
    return int(token, 10)


class CLI(_Parser):
    """Three subcommands, one per profiling mode."""

    def __init__(self) -> None:
        super().__init__(
            prog="sprig",
            description=DESCRIPTION,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        _ = self.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
            help="Show the version and exit.",
        )

        subparsers = self.add_subparsers(
            dest="command",
            metavar="<command>",
            required=True,
            parser_class=_Parser,
        )

        top_parser = subparsers.add_parser(
            Mode.TOP.value,
            help="List the top code size offenders in a binary.",
        )
        self._add_common(top_parser)
        _ = top_parser.add_argument(
            "-n",
            dest="number",
            metavar="<count>",
            help="The maximum number of items to display.",
        )
        _ = top_parser.add_argument(
            "-r",
            "--retaining-paths",
            action="store_true",
            default=None,
            dest="retaining_paths",
            help="Display retaining paths.",
        )
        _ = top_parser.add_argument(
            "--retained",
            action="store_true",
            default=None,
            dest="retained",
            help="Sort list by retained size, rather than shallow size.",
        )

        dominators_parser = subparsers.add_parser(
            Mode.DOMINATORS.value,
            help="Compute and display the dominator tree for a binary's call graph.",
        )
        self._add_common(dominators_parser)
        _ = dominators_parser.add_argument(
            "-d",
            dest="max_depth",
            metavar="<depth>",
            help="The maximum depth to print the dominators tree.",
        )
        _ = dominators_parser.add_argument(
            "-r",
            dest="max_rows",
            metavar="<rows>",
            help="The maximum number of rows, regardless of depth in the tree, to display.",
        )

        paths_parser = subparsers.add_parser(
            Mode.PATHS.value,
            help="Find and display the call paths to a function in the given binary's call graph.",
        )
        self._add_common(paths_parser)
        _ = paths_parser.add_argument(
            "functions",
            nargs="*",
            metavar="function",
            help="The functions to find call paths to.",
        )
        _ = paths_parser.add_argument(
            "-d",
            dest="max_depth",
            metavar="<depth>",
            help=f"The maximum depth to print the paths (default: {DEFAULT_MAX_DEPTH}).",
        )
        _ = paths_parser.add_argument(
            "-r",
            dest="max_paths",
            metavar="<paths>",
            help=(
                "The maximum number of paths, regardless of depth in the tree, "
                f"to display (default: {DEFAULT_MAX_PATHS})."
            ),
        )

    @staticmethod
    def _add_common(parser: argparse.ArgumentParser) -> None:
        """Arguments every mode takes."""
        # Optional at the argparse level so a missing input surfaces as
        # MissingRequiredInput when the command is built.
        _ = parser.add_argument(
            "input",
            nargs="?",
            help="The path to the input binary to size profile.",
        )
        _ = parser.add_argument(
            "-o",
            dest="output_destination",
            metavar="<dest>",
            help="The destination to write the output to. Defaults to stdout ('-').",
        )
        _ = parser.add_argument(
            "-f",
            "--format",
            dest="output_format",
            metavar="<fmt>",
            help=(
                "The format the output should be written in: "
                f"{', '.join(f.value for f in OutputFormat)} "
                f"(default: {OutputFormat.default().value})."
            ),
        )

    def parse_command(self, argv: list[str] | None = None) -> Command:
        """Parse CLI arguments into a typed command payload."""
        args, extras = self.parse_known_args(argv, namespace=_Args())
        self._fold_positionals(args, extras)

        match args.command:
            case Mode.TOP.value:
                config: ModeConfig = self._top(args)
            case Mode.DOMINATORS.value:
                config = self._dominators(args)
            case Mode.PATHS.value:
                config = self._paths(args)
            case _:
                raise MalformedArgument(f"Invalid command: {args.command}")
        return command_for(config)

    def _fold_positionals(self, args: _Args, extras: list[str]) -> None:
        """Attach positionals that argparse left over after a flag.

        argparse hands out positionals one contiguous run at a time, so in
        `paths a.wasm -d 2 foo bar` the names after `-d 2` come back
        unparsed. For `paths` they are more function names; anything else
        left over is an error.
        """
        if not extras:
            return
        flags = [token for token in extras if token.startswith("-")]
        if flags or args.command != Mode.PATHS.value:
            self.error(f"unrecognized arguments: {' '.join(extras)}")

        remaining = list(extras)
        if args.input is None:
            args.input = remaining.pop(0)
        args.functions = [*(args.functions or []), *remaining]

    def _apply_common(self, config: ModeConfig, args: _Args) -> None:
        if args.input is not None:
            config.set_input(args.input)
        if args.output_destination is not None:
            config.set_output_destination(args.output_destination)
        if args.output_format is not None:
            config.set_output_format(args.output_format)

    def _top(self, args: _Args) -> TopConfig:
        config = TopConfig.new()
        self._apply_common(config, args)
        if args.number is not None:
            config.set_number(parse_u32("-n", args.number))
        if args.retaining_paths is not None:
            config.set_retaining_paths(args.retaining_paths)
        if args.retained is not None:
            config.set_retained(args.retained)
        return config

    def _dominators(self, args: _Args) -> DominatorsConfig:
        config = DominatorsConfig.new()
        self._apply_common(config, args)
        if args.max_depth is not None:
            config.set_max_depth(parse_u32("-d", args.max_depth))
        if args.max_rows is not None:
            config.set_max_rows(parse_u32("-r", args.max_rows))
        return config

    def _paths(self, args: _Args) -> PathsConfig:
        config = PathsConfig.new()
        self._apply_common(config, args)
        for function in args.functions or []:
            config.add_function(function)
        if args.max_depth is not None:
            config.set_max_depth(parse_u32("-d", args.max_depth))
        if args.max_paths is not None:
            config.set_max_paths(parse_u32("-r", args.max_paths))
        return config

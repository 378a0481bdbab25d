from __future__ import annotations

from argparse import SUPPRESS, Action, ArgumentParser, Namespace
from typing import TYPE_CHECKING, NoReturn

from moji.cli.parser import groups
from moji.cli.parser.cancellation import CLIParseError, HelpRequestedError
from moji.consts import MOJI_VERSION

if TYPE_CHECKING:
    from collections.abc import Sequence


class CompilerArgumentParser(ArgumentParser):
    """Argument parser that reports problems via exceptions instead of exiting the process."""

    def error(self, message: str) -> NoReturn:
        raise CLIParseError(message)


class _HelpAction(Action):
    """Same as default help action, but defers printing and exiting to the caller."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str = SUPPRESS,
        default: str = SUPPRESS,
        help: str | None = None,  # noqa: A002
    ) -> None:
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            default=default,
            nargs=0,
            help=help,
        )

    def __call__(
        self,
        parser: ArgumentParser,
        namespace: Namespace,
        values: str | Sequence[str] | None,
        option_string: str | None = None,
    ) -> NoReturn:
        raise HelpRequestedError


def build_cli_parser(prog: str) -> CompilerArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = CompilerArgumentParser(
        description=f"Moji Compiler {MOJI_VERSION}. Compiles a package from its main file.",
        usage=f"{prog} file [options] [-h]",
        add_help=False,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "file",
        help="The main file of the package to be compiled",
        nargs="?",
        default=None,
    )

    parser.add_argument(
        "-h",
        "--help",
        action=_HelpAction,
        help="Display this help menu",
    )

    groups.add_package_group(parser)
    groups.add_output_group(parser)
    groups.add_codegen_group(parser)
    groups.add_diagnostics_group(parser)
    return parser

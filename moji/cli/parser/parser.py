from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, cast

from moji.cli.environment import Environment, resolve_package_search_paths
from moji.cli.options import Options
from moji.cli.output import render_cli_message
from moji.cli.parser.builder import build_cli_parser
from moji.cli.parser.cancellation import (
    Cancellation,
    CancellationReason,
    CLIParseError,
    CLIValidationError,
    HelpRequestedError,
)
from moji.cli.paths import configure_out_path
from moji.cli.tools import resolve_archiver, resolve_linker

if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Sequence

DEFAULT_PROG = "mojic"


def build_options(
    argv: Sequence[str] | None = None,
    environment: Environment | None = None,
    *,
    prog: str = DEFAULT_PROG,
) -> Options | Cancellation:
    """Construct options for an invocation, or cancellation when compilation must not start.

    Nothing is printed, cancellation carries rendered message for the driver.
    """
    if environment is None:
        environment = Environment.from_process()

    parser = build_cli_parser(prog)
    try:
        args = parser.parse_args(argv)
        return parse_cli_options(args, environment)
    except HelpRequestedError:
        return Cancellation(
            reason=CancellationReason.HELP_REQUESTED,
            message=parser.format_help(),
        )
    except CLIParseError as e:
        return Cancellation(
            reason=CancellationReason.PARSE_ERROR,
            message=f"{render_cli_message(str(e))}\n{parser.format_usage()}",
        )
    except CLIValidationError as e:
        return Cancellation(
            reason=CancellationReason.VALIDATION_ERROR,
            message=render_cli_message(str(e)),
        )


def parse_cli_options(args: Namespace, environment: Environment) -> Options:
    """Process parsed CLI arguments from argparse into options."""
    main_file = _process_main_file(args)
    main_package_name = _process_package_name(args)
    search_paths = _process_search_paths(args)

    print_ir = bool(args.emit_llvm)
    pack = not (args.object or print_ir)
    report = bool(args.report)

    out_path = Path(args.out) if args.out else None
    interface_file = Path(args.interface_out) if args.interface_out else None

    derived = configure_out_path(
        main_file,
        main_package_name=main_package_name,
        pack=pack,
        report=report,
        out_path=out_path,
        interface_file=interface_file,
    )

    return Options(
        main_file=main_file,
        main_package_name=main_package_name,
        target_triple=args.target,
        linker_override=args.linker,
        out_path=derived.out_path,
        out_path_is_specified=out_path is not None,
        interface_file=derived.interface_file,
        interface_file_is_specified=interface_file is not None,
        report_path=derived.report_path,
        package_search_paths=tuple(
            resolve_package_search_paths(search_paths, environment),
        ),
        linker=resolve_linker(environment, args.linker),
        archiver=resolve_archiver(environment),
        report=report,
        json_output=bool(args.json),
        format=bool(args.format),
        force_color=bool(args.color),
        optimize=bool(args.optimize),
        print_ir=print_ir,
        verbose=bool(args.verbose),
        pack=pack,
    )


def _process_main_file(args: Namespace) -> Path:
    """Process main file as path and validate it is given."""
    if not args.file:
        msg = "Expected main file of the package to compile!"
        raise CLIValidationError(msg)

    main_file = Path(args.file)
    if main_file.name in ("", ".."):
        msg = f"Main file `{args.file}` does not name a file!"
        raise CLIValidationError(msg)
    return main_file


def _process_package_name(args: Namespace) -> str | None:
    if args.package is None:
        return None
    if not args.package:
        msg = "Package name must not be empty!"
        raise CLIValidationError(msg)
    return cast("str", args.package)


def _process_search_paths(args: Namespace) -> list[Path]:
    """Process user package search paths, existence is checked by package loader."""
    search_paths = cast("list[str]", args.search_paths)
    if any(not path for path in search_paths):
        msg = "One of package search paths is empty!"
        raise CLIValidationError(msg)
    return [Path(path) for path in search_paths]

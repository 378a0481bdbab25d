from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import NoReturn, TypeAlias

from moji.cli.artifacts import collect_planned_artifacts
from moji.cli.environment import Environment
from moji.cli.errors import cli_moji_error_handler
from moji.cli.options import Options
from moji.cli.parser.cancellation import Cancellation, CancellationReason
from moji.cli.parser.parser import build_options

from .executable import cli_get_executable_program
from .output import cli_message

# Compilation stages driven by resolved options, returns process exit code
CompilerPipeline: TypeAlias = Callable[[Options], int]


def cli_entry_point(
    prog: str | None = None,
    *,
    argv: Sequence[str] | None = None,
    environment: Environment | None = None,
    pipeline: CompilerPipeline | None = None,
) -> NoReturn:
    """CLI main entry."""
    prog = cli_get_executable_program(
        override=prog,
        warn_proper_installation=True,
    )
    if environment is None:
        environment = Environment.from_process()

    options = build_options(argv, environment, prog=prog)
    if isinstance(options, Cancellation):
        cli_emit_cancellation(options)
        sys.exit(options.exit_code)

    cli_message("INFO", f"Compiling `{options.main_file}`...", verbose=options.verbose)
    with cli_moji_error_handler():
        if pipeline is None:
            cli_emit_planned_artifacts(options)
            sys.exit(0)
        sys.exit(pipeline(options))


def cli_emit_cancellation(cancellation: Cancellation) -> None:
    """Show why compilation was not started, help goes to stdout as it is not an error."""
    stream = (
        sys.stdout
        if cancellation.reason == CancellationReason.HELP_REQUESTED
        else sys.stderr
    )
    print(cancellation.message, end="" if cancellation.message.endswith("\n") else "\n", file=stream)


def cli_emit_planned_artifacts(options: Options) -> None:
    """Display artifacts that compilation would produce, used when no compiler pipeline is attached."""
    artifacts = collect_planned_artifacts(options)
    if not artifacts:
        cli_message("INFO", "Nothing to produce.", verbose=options.verbose)
        return
    for artifact in artifacts:
        print(f"{artifact.kind.value}: {artifact.path}")

import sys
from collections.abc import Generator
from contextlib import contextmanager
from subprocess import CalledProcessError
from typing import NoReturn

from moji.cli.output import cli_fatal_abort, cli_message
from moji.exceptions import MojiError


@contextmanager
def cli_moji_error_handler(
    *,
    debug_user_friendly_errors: bool = True,
) -> Generator[None, None, NoReturn]:
    """Wrap toolchain stages to properly emit Moji internal errors."""
    try:
        yield
    except MojiError as me:
        if debug_user_friendly_errors:
            return cli_fatal_abort(f"{me.generic_error_name} {me!r}")
        raise  # re-throw exception due to unfriendly flag set for debugging
    except CalledProcessError as pe:
        command = " ".join(map(str, pe.cmd))
        cli_message(
            "ERROR",
            f"""Command process with cmd: {command} failed with exit code {pe.returncode}""",
        )
        # Propagate exit code from called process
        return sys.exit(pe.returncode)
    except KeyboardInterrupt:
        print()
        cli_message("INFO", "Interrupted by user (Ctrl+C)!")
        return sys.exit(0)
    # This is unreachable but error wrapper must fail
    cli_fatal_abort("Bug in a CLI: error handler must has no-return")

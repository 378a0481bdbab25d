from __future__ import annotations

import sys
from typing import Literal, NoReturn, TextIO, TypeAlias

CLIMessageLevel: TypeAlias = Literal["INFO", "WARNING", "ERROR"]

# Prefix for messages produced by CLI itself (not by compiler diagnostics)
CLI_MESSAGE_PREFIX = "👉  "


class CLIColor:
    """ANSI escape sequences used for CLI output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"

    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"


LEVEL_COLORS: dict[CLIMessageLevel, str] = {
    "INFO": CLIColor.BLUE,
    "WARNING": CLIColor.YELLOW,
    "ERROR": CLIColor.RED,
}


def cli_message(
    level: CLIMessageLevel,
    text: str,
    *,
    verbose: bool = True,
) -> None:
    """Emit a message from CLI (not a diagnostic from compiler).

    INFO messages are only shown when `verbose` is passed, warnings and errors go into stderr.
    """
    if level == "INFO" and not verbose:
        return

    stream = sys.stdout if level == "INFO" else sys.stderr
    color = LEVEL_COLORS[level] if _is_colored_stream(stream) else ""
    reset = CLIColor.RESET if color else ""
    print(f"{color}[{level}]{reset} {text}", file=stream)


def cli_fatal_abort(text: str) -> NoReturn:
    """Emit error and terminate toolchain."""
    cli_message(level="ERROR", text=text)
    sys.exit(1)


def render_cli_message(text: str) -> str:
    """Render message about invocation problem (e.g wrong flag) in user-facing form."""
    return f"{CLI_MESSAGE_PREFIX}{text}"


def _is_colored_stream(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())

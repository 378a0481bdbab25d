from dataclasses import dataclass
from enum import Enum, auto


class CancellationReason(Enum):
    """Why options construction was cancelled, driver picks exit code from that."""

    # User asked for help, not a failure
    HELP_REQUESTED = auto()

    # Malformed command line (unknown flag, missing flag value)
    PARSE_ERROR = auto()

    # Well formed command line with invalid values (e.g no input file)
    VALIDATION_ERROR = auto()


@dataclass(frozen=True, slots=True)
class Cancellation:
    """Result of options construction when compilation must not start."""

    reason: CancellationReason

    # Already rendered text for the user
    message: str

    @property
    def exit_code(self) -> int:
        return CANCELLATION_EXIT_CODES[self.reason]


CANCELLATION_EXIT_CODES: dict[CancellationReason, int] = {
    CancellationReason.HELP_REQUESTED: 0,
    CancellationReason.PARSE_ERROR: 2,
    CancellationReason.VALIDATION_ERROR: 1,
}


class HelpRequestedError(Exception):
    """Raised by argument parser as soon as help flag is met."""


class CLIParseError(Exception):
    """Raised by argument parser instead of exiting the process."""


class CLIValidationError(Exception):
    """Raised when parsed arguments has invalid values."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class MessageLevel(Enum):
    """Severity of a compiler message."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position inside source file, lines and columns are 1-based."""

    file: Path
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Message:
    """Single diagnostic emitted by any compilation stage."""

    level: MessageLevel
    text: str
    location: SourceLocation | None = None

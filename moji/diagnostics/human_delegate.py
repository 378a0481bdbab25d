import sys
from dataclasses import dataclass, field
from typing import TextIO

from moji.cli.output import CLIColor

from .message import Message, MessageLevel

LEVEL_COLORS: dict[MessageLevel, str] = {
    MessageLevel.ERROR: CLIColor.RED,
    MessageLevel.WARNING: CLIColor.MAGENTA,
    MessageLevel.NOTE: CLIColor.CYAN,
}


@dataclass(slots=True)
class HumanReadableCompilerDelegate:
    """Reports messages as text, colored if forced or when writing into terminal."""

    force_color: bool = False
    stream: TextIO = field(default_factory=lambda: sys.stderr, compare=False)

    def report(self, message: Message) -> None:
        level = message.level.value
        if self.colored:
            color = LEVEL_COLORS[message.level]
            level = f"{CLIColor.BOLD}{color}{level}{CLIColor.RESET}"

        if message.location is None:
            print(f"{level}: {message.text}", file=self.stream)
            return
        print(f"{message.location}: {level}: {message.text}", file=self.stream)

    @property
    def colored(self) -> bool:
        return self.force_color or self.stream.isatty()

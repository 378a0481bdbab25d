import json
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .message import Message


@dataclass(slots=True)
class JSONCompilerDelegate:
    """Reports messages as JSON objects (one per line) for editors and other tools."""

    stream: TextIO = field(default_factory=lambda: sys.stderr, compare=False)

    def report(self, message: Message) -> None:
        payload: dict[str, str | int] = {
            "type": message.level.value,
            "message": message.text,
        }
        if message.location is not None:
            payload["file"] = str(message.location.file)
            payload["line"] = message.location.line
            payload["character"] = message.location.column
        print(json.dumps(payload, ensure_ascii=False), file=self.stream)

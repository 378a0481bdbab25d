"""Compiler diagnostics (messages) and delegates which render them for the user."""

from .delegate import CompilerDelegate, select_compiler_delegate
from .human_delegate import HumanReadableCompilerDelegate
from .json_delegate import JSONCompilerDelegate
from .message import Message, MessageLevel, SourceLocation

__all__ = [
    "CompilerDelegate",
    "HumanReadableCompilerDelegate",
    "JSONCompilerDelegate",
    "Message",
    "MessageLevel",
    "SourceLocation",
    "select_compiler_delegate",
]

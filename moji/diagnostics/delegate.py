from typing import Protocol, TypeAlias

from .human_delegate import HumanReadableCompilerDelegate
from .json_delegate import JSONCompilerDelegate
from .message import Message


class CompilerDelegate(Protocol):
    """Capability to report compiler messages, stages depend only on that."""

    def report(self, message: Message) -> None: ...


# Closed set of delegates toolchain may select
CompilerDelegateVariant: TypeAlias = JSONCompilerDelegate | HumanReadableCompilerDelegate


def select_compiler_delegate(
    *,
    json_output: bool,
    force_color: bool,
) -> CompilerDelegate:
    """Select delegate: structured for tools (`--json`) or human readable one."""
    delegate: CompilerDelegateVariant
    if json_output:
        delegate = JSONCompilerDelegate()
    else:
        delegate = HumanReadableCompilerDelegate(force_color=force_color)
    return delegate

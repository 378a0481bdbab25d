"""Resolution of external programs used for final packaging (linker and archiver)."""

from moji.cli.environment import Environment
from moji.consts import DEFAULT_ARCHIVER, DEFAULT_LINKER


def resolve_linker(environment: Environment, linker_override: str | None) -> str:
    """Get linker program, environment compiler override has priority over `--linker` flag."""
    if environment.compiler:
        return environment.compiler
    if linker_override:
        return linker_override
    return DEFAULT_LINKER


def resolve_archiver(environment: Environment) -> str:
    """Get archiver program used for packing static libraries."""
    if environment.archiver:
        return environment.archiver
    return DEFAULT_ARCHIVER

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from moji.consts import (
    ARCHIVER_ENVIRONMENT_VARIABLE,
    COMPILER_ENVIRONMENT_VARIABLE,
    DEFAULT_PACKAGES_DIRECTORY,
    LOCAL_PACKAGES_DIRECTORY,
    PACKAGES_PATH_ENVIRONMENT_VARIABLE,
)


@dataclass(frozen=True, slots=True)
class Environment:
    """Snapshot of process environment which toolchain is allowed to observe.

    Populated once at process entry, everything else receives it explicitly.
    """

    # Base for local packages directory
    working_directory: Path

    # Additional packages directory (e.g `MOJI_PACKAGES_PATH`)
    packages_path: str | None = None

    # Overrides for external tools (e.g `CXX`, `AR`)
    compiler: str | None = None
    archiver: str | None = None

    @staticmethod
    def from_process(
        variables: Mapping[str, str] | None = None,
        working_directory: Path | None = None,
    ) -> Environment:
        """Read environment of current process (or given variables)."""
        if variables is None:
            variables = os.environ
        return Environment(
            working_directory=working_directory or Path.cwd(),
            packages_path=variables.get(PACKAGES_PATH_ENVIRONMENT_VARIABLE),
            compiler=variables.get(COMPILER_ENVIRONMENT_VARIABLE),
            archiver=variables.get(ARCHIVER_ENVIRONMENT_VARIABLE),
        )


def resolve_package_search_paths(
    cli_paths: Iterable[str | Path],
    environment: Environment,
) -> list[Path]:
    """Resolve ordered package search paths, first match wins for package loader.

    Order is: user paths from CLI, local packages directory, environment packages directory, default installation.
    Paths are not checked for existence and are never deduplicated.
    """
    search_paths = [Path(p) for p in cli_paths]
    search_paths.append(environment.working_directory.absolute() / LOCAL_PACKAGES_DIRECTORY)

    if environment.packages_path:
        search_paths.append(Path(environment.packages_path))

    search_paths.append(Path(DEFAULT_PACKAGES_DIRECTORY))
    return search_paths

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from moji.cli.options import Options


class ArtifactKind(Enum):
    """Kinds of files which later stages of compilation may write."""

    EXECUTABLE = "executable"
    STATIC_LIBRARY = "static library"
    INTERFACE = "interface"
    OBJECT = "object"
    LLVM_IR = "llvm ir"
    REPORT = "report"


@dataclass(frozen=True, slots=True)
class PlannedArtifact:
    kind: ArtifactKind
    path: Path


def collect_planned_artifacts(options: Options) -> list[PlannedArtifact]:
    """Get artifacts that compilation with given options will produce, in order of production.

    Formatting source code produces no artifacts.
    """
    if options.format:
        return []

    artifacts: list[PlannedArtifact] = []

    llvm_ir_path = options.llvm_ir_path()
    if llvm_ir_path is not None:
        artifacts.append(PlannedArtifact(ArtifactKind.LLVM_IR, llvm_ir_path))
    else:
        artifacts.append(PlannedArtifact(ArtifactKind.OBJECT, options.object_path()))

    if options.pack:
        assert options.out_path is not None, "Packing requires inferred output path"
        kind = ArtifactKind.EXECUTABLE if options.standalone else ArtifactKind.STATIC_LIBRARY
        artifacts.append(PlannedArtifact(kind, options.out_path))

    if options.interface_file is not None:
        artifacts.append(PlannedArtifact(ArtifactKind.INTERFACE, options.interface_file))

    if options.report_path is not None:
        artifacts.append(PlannedArtifact(ArtifactKind.REPORT, options.report_path))

    return artifacts

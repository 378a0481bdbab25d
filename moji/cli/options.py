from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from moji.cli.paths import infer_llvm_ir_path, infer_object_path
from moji.diagnostics.delegate import CompilerDelegate, select_compiler_delegate


@dataclass(frozen=True, slots=True)
class Options:
    """Resolved configuration of a single compiler invocation.

    Built once before any compilation work and only read afterwards by every stage.
    All output paths which stage may need are already inferred here.
    """

    main_file: Path

    # Absent for standalone (executable) packages
    main_package_name: str | None

    target_triple: str | None
    linker_override: str | None

    out_path: Path | None
    out_path_is_specified: bool
    interface_file: Path | None
    interface_file_is_specified: bool
    report_path: Path | None

    # Ordered by lookup precedence, first match wins
    package_search_paths: tuple[Path, ...]

    linker: str
    archiver: str

    report: bool
    json_output: bool
    format: bool
    force_color: bool
    optimize: bool
    print_ir: bool
    verbose: bool

    # Produce executable / static library, disabled by object-only and IR emission
    pack: bool = True

    @property
    def standalone(self) -> bool:
        return self.main_package_name is None

    def object_path(self) -> Path:
        return infer_object_path(self.main_file, pack=self.pack, out_path=self.out_path)

    def llvm_ir_path(self) -> Path | None:
        return infer_llvm_ir_path(self.main_file, print_ir=self.print_ir)

    def compiler_delegate(self) -> CompilerDelegate:
        return select_compiler_delegate(
            json_output=self.json_output,
            force_color=self.force_color,
        )

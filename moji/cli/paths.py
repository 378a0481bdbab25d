"""Derivation of artifact paths from the main file of a package.

Every artifact path is derived here so code generator, linker and packaging stages agree on them.
Paths are only computed, nothing is created or checked on filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from moji.consts import MOJI_INTERFACE_FILENAME, MOJI_REPORT_FILENAME

STATIC_LIBRARY_PREFIX = "lib"
STATIC_LIBRARY_SUFFIX = ".a"
OBJECT_FILE_SUFFIX = ".o"
LLVM_IR_SUFFIX = ".ll"


@dataclass(frozen=True, slots=True)
class DerivedPaths:
    """Output paths after applying defaults, `None` when not required for that compilation."""

    out_path: Path | None
    interface_file: Path | None
    report_path: Path | None


def configure_out_path(
    main_file: Path,
    *,
    main_package_name: str | None,
    pack: bool,
    report: bool,
    out_path: Path | None = None,
    interface_file: Path | None = None,
) -> DerivedPaths:
    """Fill output, interface and report paths which was not specified explicitly.

    Standalone (no package name) packages are packed into an executable named after main file,
    libraries into static archive `lib<package>.a`, both next to the main file.
    """
    standalone = main_package_name is None
    directory = main_file.parent

    if pack and out_path is None:
        if standalone:
            out_path = _replace_extension(main_file, "")
        else:
            library_name = f"{STATIC_LIBRARY_PREFIX}{main_package_name}{STATIC_LIBRARY_SUFFIX}"
            out_path = directory / library_name

    if not standalone and interface_file is None:
        interface_file = directory / MOJI_INTERFACE_FILENAME

    report_path = directory / MOJI_REPORT_FILENAME if report else None

    return DerivedPaths(
        out_path=out_path,
        interface_file=interface_file,
        report_path=report_path,
    )


def infer_object_path(
    main_file: Path,
    *,
    pack: bool,
    out_path: Path | None,
) -> Path:
    """Path of object file emitted by code generator.

    Explicit output path is used as is when only object file is requested (no packing).
    """
    if not pack and out_path is not None:
        return out_path
    return _replace_extension(main_file, OBJECT_FILE_SUFFIX)


def infer_llvm_ir_path(main_file: Path, *, print_ir: bool) -> Path | None:
    """Path of LLVM IR dump, only exists when IR emission is requested."""
    if not print_ir:
        return None
    return _replace_extension(main_file, LLVM_IR_SUFFIX)


def _replace_extension(path: Path, suffix: str) -> Path:
    # Only final extension, trailing dot is an empty extension (`bar.`), leading one is not (`.bar`)
    stem, dot, _ = path.name.rpartition(".")
    if not dot or not stem:
        stem = path.name
    return path.with_name(stem + suffix)

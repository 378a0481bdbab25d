import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from moji.cli.environment import Environment
from moji.cli.options import Options
from moji.cli.parser.cancellation import Cancellation, CancellationReason
from moji.cli.parser.parser import build_options
from moji.consts import DEFAULT_PACKAGES_DIRECTORY
from moji.diagnostics import (
    HumanReadableCompilerDelegate,
    JSONCompilerDelegate,
    Message,
    MessageLevel,
    SourceLocation,
)

ENVIRONMENT = Environment(working_directory=Path("/work"))


def _build(*argv: str, environment: Environment = ENVIRONMENT) -> Options:
    options = build_options(list(argv), environment)
    assert isinstance(options, Options), options
    return options


def _cancel(*argv: str) -> Cancellation:
    cancellation = build_options(list(argv), ENVIRONMENT)
    assert isinstance(cancellation, Cancellation)
    return cancellation


def test_standalone_defaults() -> None:
    options = _build("foo/bar.moji")
    assert options.main_file == Path("foo/bar.moji")
    assert options.standalone
    assert options.pack
    assert options.out_path == Path("foo/bar")
    assert not options.out_path_is_specified
    assert options.interface_file is None
    assert options.report_path is None
    assert options.llvm_ir_path() is None
    assert options.linker == "c++"
    assert options.archiver == "ar"
    assert options.package_search_paths == (
        Path("/work/packages"),
        Path(DEFAULT_PACKAGES_DIRECTORY),
    )


def test_library_package() -> None:
    options = _build("-p", "x", "lib/x.moji")
    assert not options.standalone
    assert options.main_package_name == "x"
    assert options.out_path == Path("lib/libx.a")
    assert options.interface_file == Path("lib/interface.mojii")


def test_explicit_interface_path() -> None:
    options = _build("-p", "x", "-i", "build/x.mojii", "lib/x.moji")
    assert options.interface_file == Path("build/x.mojii")
    assert options.interface_file_is_specified


def test_object_only_with_out_path() -> None:
    options = _build("-c", "-o", "out.o", "foo/whatever.moji")
    assert not options.pack
    assert options.out_path == Path("out.o")
    assert options.out_path_is_specified
    assert options.object_path() == Path("out.o")


def test_object_only_without_out_path() -> None:
    options = _build("-c", "a/b.moji")
    assert not options.pack
    assert options.out_path is None
    assert options.object_path() == Path("a/b.o")


def test_emit_llvm_disables_packing() -> None:
    options = _build("--emit-llvm", "a/b.moji")
    assert options.print_ir
    assert not options.pack
    assert options.out_path is None
    assert options.llvm_ir_path() == Path("a/b.ll")


def test_report() -> None:
    options = _build("-r", "a/b.moji")
    assert options.report
    assert options.report_path == Path("a/documentation.json")


def test_flags() -> None:
    options = _build(
        "--target",
        "x86_64-unknown-linux-gnu",
        "--format",
        "-O",
        "--color",
        "--json",
        "-v",
        "a.moji",
    )
    assert options.target_triple == "x86_64-unknown-linux-gnu"
    assert options.format
    assert options.optimize
    assert options.force_color
    assert options.json_output
    assert options.verbose
    assert not options.report
    assert not options.print_ir


def test_search_paths_order() -> None:
    environment = Environment(working_directory=Path("/work"), packages_path="/env/pkgs")
    options = _build("-S", "a", "-S", "b", "main.moji", environment=environment)
    assert options.package_search_paths == (
        Path("a"),
        Path("b"),
        Path("/work/packages"),
        Path("/env/pkgs"),
        Path(DEFAULT_PACKAGES_DIRECTORY),
    )


def test_linker_resolution() -> None:
    environment = Environment(working_directory=Path("/work"), compiler="clang++")
    options = _build("--linker", "custom", "main.moji", environment=environment)
    assert options.linker_override == "custom"
    assert options.linker == "clang++"

    assert _build("--linker", "custom", "main.moji").linker == "custom"


def test_compiler_delegate_selection() -> None:
    assert isinstance(_build("--json", "a.moji").compiler_delegate(), JSONCompilerDelegate)

    delegate = _build("--color", "a.moji").compiler_delegate()
    assert isinstance(delegate, HumanReadableCompilerDelegate)
    assert delegate.force_color


def test_compiler_delegate_reports_json(capsys: pytest.CaptureFixture[str]) -> None:
    delegate = _build("--json", "a.moji").compiler_delegate()
    delegate.report(Message(level=MessageLevel.ERROR, text="Unknown type"))
    assert json.loads(capsys.readouterr().err) == {
        "type": "error",
        "message": "Unknown type",
    }


def test_compiler_delegate_reports_human_readable(
    capsys: pytest.CaptureFixture[str],
) -> None:
    delegate = _build("a.moji").compiler_delegate()
    delegate.report(
        Message(
            level=MessageLevel.WARNING,
            text="Unused variable",
            location=SourceLocation(file=Path("a.moji"), line=1, column=2),
        ),
    )
    assert capsys.readouterr().err == "a.moji:1:2: warning: Unused variable\n"


def test_object_only_out_path_is_normalized() -> None:
    # Same file as given, but `./` prefix is not kept
    options = _build("-c", "-o", "./build/out.o", "a/b.moji")
    assert options.object_path() == Path("build/out.o")
    assert str(options.object_path()) == "build/out.o"


def test_options_are_immutable() -> None:
    options = _build("a.moji")
    with pytest.raises(FrozenInstanceError):
        options.out_path = Path("elsewhere")  # pyright: ignore[reportAttributeAccessIssue]


def test_help_requested() -> None:
    cancellation = _cancel("-h")
    assert cancellation.reason == CancellationReason.HELP_REQUESTED
    assert cancellation.exit_code == 0
    assert "--emit-llvm" in cancellation.message


def test_help_has_priority_over_validation() -> None:
    assert _cancel("--help").reason == CancellationReason.HELP_REQUESTED


def test_missing_main_file() -> None:
    cancellation = _cancel("-O")
    assert cancellation.reason == CancellationReason.VALIDATION_ERROR
    assert cancellation.exit_code == 1
    assert cancellation.message.startswith("👉  ")


def test_unknown_flag() -> None:
    cancellation = _cancel("--unknown", "a.moji")
    assert cancellation.reason == CancellationReason.PARSE_ERROR
    assert cancellation.exit_code == 2
    assert "--unknown" in cancellation.message
    assert "usage:" in cancellation.message


def test_missing_flag_value() -> None:
    assert _cancel("a.moji", "-o").reason == CancellationReason.PARSE_ERROR


def test_several_main_files() -> None:
    assert _cancel("a.moji", "b.moji").reason == CancellationReason.PARSE_ERROR


def test_empty_package_name() -> None:
    assert _cancel("-p", "", "a.moji").reason == CancellationReason.VALIDATION_ERROR


def test_empty_search_path() -> None:
    assert _cancel("-S", "", "a.moji").reason == CancellationReason.VALIDATION_ERROR


def test_main_file_not_naming_file() -> None:
    assert _cancel("/").reason == CancellationReason.VALIDATION_ERROR
    assert _cancel("foo/..").reason == CancellationReason.VALIDATION_ERROR

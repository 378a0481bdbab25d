from argparse import ArgumentParser


def add_package_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with package options into given parser."""
    group = parser.add_argument_group(
        "Package",
        "Package being compiled and where to search for its dependencies",
    )

    group.add_argument(
        "-p",
        dest="package",
        metavar="package",
        required=False,
        help="The name of the package. If not passed, package is compiled as standalone executable",
    )

    group.add_argument(
        "-S",
        dest="search_paths",
        metavar="search path",
        required=False,
        action="append",
        default=[],
        help="Adds the path to the package search path (before './packages')",
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "What and where to emit")

    group.add_argument(
        "-o",
        dest="out",
        metavar="out",
        required=False,
        help="Set output path for binary or assembly, by default will be inferred from main file",
    )

    group.add_argument(
        "-i",
        dest="interface_out",
        metavar="interface",
        required=False,
        help="Output interface to given path",
    )

    group.add_argument(
        "-c",
        dest="object",
        action="store_true",
        help="Produce object file, do not link",
    )

    group.add_argument(
        "-r",
        dest="report",
        action="store_true",
        help="Generate a JSON report about the package",
    )

    group.add_argument(
        "--format",
        dest="format",
        action="store_true",
        help="Format source code",
    )


def add_codegen_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with code generation and linkage options into given parser."""
    group = parser.add_argument_group("Codegen", "Code generation and linkage")

    group.add_argument(
        "--target",
        dest="target",
        metavar="target",
        required=False,
        help="LLVM triple of the compilation target",
    )

    group.add_argument(
        "--linker",
        dest="linker",
        metavar="linker",
        required=False,
        help="The linker to use to link the produced object files (`CXX` environment variable has priority)",
    )

    group.add_argument(
        "-O",
        dest="optimize",
        action="store_true",
        help="Compile with optimizations",
    )

    group.add_argument(
        "--emit-llvm",
        dest="emit_llvm",
        action="store_true",
        help="Print the IR to the standard output",
    )


def add_diagnostics_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with diagnostics options into given parser."""
    group = parser.add_argument_group("Diagnostics", "How compiler messages are shown")

    group.add_argument(
        "--json",
        dest="json",
        action="store_true",
        help="Show compiler messages as JSON",
    )

    group.add_argument(
        "--color",
        dest="color",
        action="store_true",
        help="Always show compiler messages in color",
    )

    group.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="store_true",
        help="If passed will enable INFO level logs from compiler.",
    )

"""Moji programming language.

Provides compiler front end configuration: CLI options, environment and derived artifact paths.
"""

from .cli.options import Options
from .cli.parser.parser import build_options

__all__ = [
    "Options",
    "build_options",
]

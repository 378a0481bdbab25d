from .error_handler import cli_moji_error_handler

__all__ = ["cli_moji_error_handler"]

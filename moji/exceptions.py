import re


def camel_to_kebab(s: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", s).lower()


class MojiError(Exception):
    """Parent for all Moji errors, raised by compilation stages driven from CLI."""

    def __repr__(self) -> str:
        return str(self) or self.__class__.__name__

    @property
    def generic_error_name(self) -> str:
        """Short tag of the error kind (e.g `[package-not-found-error]`)."""
        return f"[{camel_to_kebab(self.__class__.__name__)}]"

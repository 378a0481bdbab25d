"""Compiled-in defaults of the toolchain, overridable only from CLI or environment."""

MOJI_VERSION = "0.9"

# Serialized public surface of a package, emitted next to the main file
MOJI_INTERFACE_SUFFIX = ".mojii"
MOJI_INTERFACE_FILENAME = "interface" + MOJI_INTERFACE_SUFFIX

MOJI_REPORT_FILENAME = "documentation.json"

# Relative to current working directory, always searched right after user search paths
LOCAL_PACKAGES_DIRECTORY = "packages"

# Installation-wide packages, always searched last
DEFAULT_PACKAGES_DIRECTORY = "/usr/local/MojiPackages"

PACKAGES_PATH_ENVIRONMENT_VARIABLE = "MOJI_PACKAGES_PATH"
COMPILER_ENVIRONMENT_VARIABLE = "CXX"
ARCHIVER_ENVIRONMENT_VARIABLE = "AR"

DEFAULT_LINKER = "c++"
DEFAULT_ARCHIVER = "ar"

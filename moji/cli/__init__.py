"""Command line interface of the Moji compiler (options, environment, derived paths)."""

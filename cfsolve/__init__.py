"""Solutions to short competitive programming problems, with a command line."""

__version__ = "0.1.0"

__all__ = ["__version__"]
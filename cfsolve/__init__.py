"""Solutions to short competitive programming problems, with a command-line driver."""

__version__ = "0.1.0"
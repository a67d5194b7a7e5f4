"""Command-line booking of a small robot fleet stored in a CSV file."""

__version__ = "0.1.0"

"""Command-line note taking backed by plain files."""

__version__ = "0.1.0"

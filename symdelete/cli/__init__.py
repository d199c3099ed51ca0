"""Command-line interface for symdelete."""

from symdelete.cli.parser import create_parser

__all__ = ["create_parser"]

"""Utility functions for symdelete."""

from symdelete.utils.constants import Constants
from symdelete.utils.helpers import expand_file_path, read_text_file, write_file_safely
from symdelete.utils.logging import add_log_file_handler, setup_logger

__all__ = [
    "Constants",
    "add_log_file_handler",
    "expand_file_path",
    "read_text_file",
    "setup_logger",
    "write_file_safely",
]

"""Shared utility functions for symdelete."""

import os
from pathlib import Path
from typing import Callable, TextIO

from loguru import logger


def expand_file_path(filepath: str | None) -> str | None:
    """Expand user home directory in file path.

    Args:
        filepath: File path (may contain ~)

    Returns:
        Expanded file path string, or None if filepath is None
    """
    if not filepath:
        return None
    return os.path.expanduser(filepath)


def read_text_file(filepath: str, description: str = "file") -> str:
    """Read a UTF-8 text file, logging a hint before re-raising on failure.

    Args:
        filepath: Path to read (may contain ~)
        description: What the file is, for error messages

    Returns:
        The file contents
    """
    path = expand_file_path(filepath) or filepath
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        logger.error(f"✗ {description.capitalize()} not found: {path}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading {description}: {path}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {path}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise


def ensure_directory_exists(dir_path: str | Path) -> None:
    """Create directory if it doesn't exist.

    Raises:
        PermissionError: If directory creation is denied
        OSError: If directory creation fails for other OS-related reasons
    """
    dir_str = str(dir_path)
    try:
        os.makedirs(dir_str, exist_ok=True)
    except PermissionError:
        logger.error(f"✗ Permission denied creating output directory: {dir_str}")
        logger.error("  Please check directory permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error creating output directory {dir_str}: {e}")
        raise


def write_file_safely(
    file_path: str | Path,
    content_writer: Callable[[TextIO], None],
    operation_name: str = "writing file",
) -> None:
    """Write to a file, creating its parent directory first.

    Args:
        file_path: Path to the file to write
        content_writer: Callable that takes a file handle and writes content
        operation_name: Description of the operation for error messages

    Raises:
        PermissionError: If file writing is denied
        OSError: If file writing fails for OS-related reasons
    """
    file_str = str(file_path)
    try:
        ensure_directory_exists(os.path.dirname(file_str) or ".")
        with open(file_str, "w", encoding="utf-8") as f:
            content_writer(f)
    except PermissionError:
        logger.error(f"✗ Permission denied {operation_name}: {file_str}")
        logger.error("  Please check file permissions and try again")
        raise
    except OSError as e:
        logger.error(f"✗ OS error {operation_name} {file_str}: {e}")
        raise

"""Startup helpers that make sure the event log file exists.

Provides:
- ensure_log_file(): create the log directory and empty file if missing
- file_exists() / is_readable() / is_writable(): file checks used by ``doctor``
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class BootstrapError(Exception):
    """Raised when the log directory or file cannot be created.

    This is fatal: the CLI exits when it sees it.
    """


def ensure_log_file(directory: Path, file_name: str) -> Path:
    """Ensure ``directory/file_name`` exists, creating both as needed.

    Idempotent: existing directories and files are left untouched.

    Args:
        directory: Directory holding the event log.
        file_name: Name of the event log file.

    Returns:
        Path: Full path to the event log file.

    Raises:
        BootstrapError: If the directory or the file cannot be created.
    """
    directory = Path(directory)
    full_path = directory / file_name

    if not directory.exists():
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BootstrapError(f"Could not create directory: {directory}") from e
        logger.info("Directory created: %s", directory)
    elif not directory.is_dir():
        raise BootstrapError(f"Not a directory: {directory}")

    if not full_path.exists():
        try:
            full_path.touch()
        except OSError as e:
            raise BootstrapError(f"Could not create file: {full_path}") from e
        logger.info("File created: %s", full_path)

    return full_path


def file_exists(path: Path) -> bool:
    return Path(path).exists()


def is_readable(path: Path) -> bool:
    """Return True if *path* exists and the current user can read it."""
    path = Path(path)
    return path.exists() and os.access(path, os.R_OK)


def is_writable(path: Path) -> bool:
    """Return True if *path* exists and the current user can write it."""
    path = Path(path)
    return path.exists() and os.access(path, os.W_OK)

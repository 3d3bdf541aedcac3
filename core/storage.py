"""File helpers for the event log.

Passwords are never written to disk. The only files this project touches
are the rotating event log and its backups.
"""

import os
import sys


def ensure_directories(log_dir: str) -> None:
    """Create the log directory if it doesn't exist.

    On Unix systems, the directory is created with mode 0700 (owner only).
    """
    if sys.platform != "win32":
        os.makedirs(log_dir, mode=0o700, exist_ok=True)
    else:
        os.makedirs(log_dir, exist_ok=True)


def file_exists(filepath: str) -> bool:
    """Check if a file exists."""
    return os.path.isfile(filepath)


def read_lines(filepath: str) -> list[str]:
    """Read a text file into a list of stripped, non-empty lines.

    Returns:
        Lines of the file, or an empty list if it does not exist
    """
    if not file_exists(filepath):
        return []

    with open(filepath, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]

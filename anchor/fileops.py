"""File checks and writes that report their outcome as styled messages."""

from __future__ import annotations

import os
import sys
from pathlib import PurePath

from anchor.styles import LogLevel


def can_create(file_path: str) -> str:
    """Create (or truncate) the file and report the outcome."""
    try:
        with open(file_path, "wb"):
            pass
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} Can't create file with error: {error}\n"
    return f"{LogLevel.INFO.fmt()} Successfully created log file\n"


def can_read_file(file_path: str) -> str:
    """Report whether the file can be opened for reading."""
    try:
        with open(file_path, "rb"):
            pass
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} Can't read file with error: {error}\n"
    return f"{LogLevel.INFO.fmt()} Checking read permission ... Done!\n"


def can_write_file(file_path: str) -> str:
    """Report whether an existing file can be opened for writing."""
    try:
        fd = os.open(file_path, os.O_WRONLY)
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} Can't write log file with error {error}\n"
    os.close(fd)
    return f"{LogLevel.INFO.fmt()} Checking write permission ... Done!\n"


def file_is_exist(file_path: str) -> bool:
    """Return whether the path exists, complaining on stderr when it does not."""
    if os.path.exists(file_path):
        return True
    print(f"{LogLevel.ERROR.fmt()} {file_path}: File not found", file=sys.stderr)
    return False


def is_directory(file_path: str) -> bool:
    """Return whether the path is a directory, announcing it when it is."""
    if not os.path.isdir(file_path):
        return False
    name = PurePath(file_path).name
    if name in ("", ".", ".."):
        print("Can't get directory name", file=sys.stderr)
    else:
        print(f"{name}: Is a directory")
    return True


def write_file(file_path: str, content: str, success_msg: str) -> str:
    """Write content at the start of the file, creating it if needed.

    An existing file is not truncated: bytes beyond the new content remain.
    """
    try:
        fd = os.open(file_path, os.O_WRONLY | os.O_CREAT, 0o666)
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} Failed to open file with error {error}"
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(content.encode("utf-8"))
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} Failed create file with error: {error}\n"
    return f"{LogLevel.INFO.fmt()} {success_msg}\n"
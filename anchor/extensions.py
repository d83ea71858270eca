"""File extension lookup."""

from __future__ import annotations

from pathlib import PurePath

from anchor.styles import LogLevel


def get_file_ext(file_path: str) -> str:
    """Return the extension of the path without its dot.

    When the path has none, a styled error message is returned instead,
    which matches no known extension.
    """
    name = PurePath(file_path).name
    if name not in ("", ".", "..") and "." in name:
        stem, extension = name.rsplit(".", 1)
        if stem:
            return extension
    return f"{LogLevel.ERROR.fmt()} Cannot resolve file extension"
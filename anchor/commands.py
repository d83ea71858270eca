"""The cat, hash and fmt commands."""

from __future__ import annotations

import sys
import time
from concurrent.futures import ThreadPoolExecutor

from anchor.debugmode import debug_mode
from anchor.fileops import file_is_exist, is_directory
from anchor.formats import auto_formats_file
from anchor.hashing import check_md5, check_sha1, check_sha256, check_sha512
from anchor.timing import cal_time

_CAT_DELAY_SECONDS = 0.5


def _is_usable_file(file_path: str) -> bool:
    return not is_directory(file_path) and file_is_exist(file_path)


def _read_lossy(file_path: str) -> str:
    with open(file_path, "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def cat_command(file_path: str) -> None:
    """Print the whole content of the file, undecodable bytes replaced."""
    if not _is_usable_file(file_path):
        return

    def show() -> str:
        try:
            content = _read_lossy(file_path)
        except OSError as error:
            print(
                f"Error when reading file Error when opening file: {error}",
                file=sys.stderr,
            )
            return ""
        time.sleep(_CAT_DELAY_SECONDS)
        print(content, end="")
        return ""

    cal_time(show)


def hash_command(file_path: str, is_debug_mode: bool) -> str | None:
    """Print MD5, SHA-1, SHA-256 and SHA-512 digests of the file.

    Returns the printed report, or None when the path is not a usable file.
    """
    if not _is_usable_file(file_path):
        return None

    def digests() -> str:
        checks = (check_md5, check_sha1, check_sha256, check_sha512)
        with ThreadPoolExecutor(max_workers=len(checks)) as pool:
            result = "".join(pool.map(lambda check: check(file_path), checks))
        return result + debug_mode(is_debug_mode, result)

    return cal_time(digests)


def fmt_command(file_path: str) -> str:
    """Format the file in place by its extension and print the report."""
    return cal_time(lambda: auto_formats_file(file_path))
"""Debug mode for the hash command: save the report to a log file."""

from __future__ import annotations

from anchor.fileops import can_create, can_read_file, can_write_file, write_file
from anchor.styles import LogLevel

LOG_FILE = "hash_log.txt"


def debug_mode(is_debug: bool, content: str) -> str:
    """Write content to the log file when debugging and report each step.

    Without debugging, return a hint on how to turn it on.
    """
    if not is_debug:
        return f"{LogLevel.INFO.fmt()} To use debug mode, just typing --debug"

    steps = [
        can_create(LOG_FILE),
        can_read_file(LOG_FILE),
        can_write_file(LOG_FILE),
        write_file(LOG_FILE, content, "Successfully write all bytes to file!"),
        f"{LogLevel.SUCCESS.fmt()} Saved log as name {LOG_FILE}",
    ]
    return "".join(steps)
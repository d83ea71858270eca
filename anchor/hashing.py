"""File digests reported as styled messages."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from anchor.styles import LogLevel

_CHUNK_SIZE = 1 << 20


@dataclass(frozen=True)
class _Algorithm:
    name: str
    label: str
    open_error: str
    read_error: str


_MD5 = _Algorithm(
    "md5",
    "MD5",
    "Can't read file with error: ",
    "Error when memory-mapping file: ",
)
_SHA1 = _Algorithm(
    "sha1",
    "SHA1",
    "Can't read file with error: ",
    "Error when memory-mapping file ",
)
_SHA256 = _Algorithm(
    "sha256",
    "SHA256",
    "Can't open file with error: ",
    "Can't memory-mapping file with error ",
)
_SHA512 = _Algorithm(
    "sha512",
    "SHA512",
    "Can't open file with error: ",
    "Can't memory-mapping file with error ",
)


def _report_digest(file_path: str, algorithm: _Algorithm) -> str:
    try:
        handle = open(file_path, "rb")
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} {algorithm.open_error}{error}"
    hasher = hashlib.new(algorithm.name)
    try:
        with handle:
            for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
                hasher.update(chunk)
    except OSError as error:
        return f"{LogLevel.ERROR.fmt()} {algorithm.read_error}{error}"
    return f"{LogLevel.INFO.fmt()} {algorithm.label}: {hasher.hexdigest()}\n"


def check_md5(file_path: str) -> str:
    """Return a styled line with the MD5 digest of the file, or an error."""
    return _report_digest(file_path, _MD5)


def check_sha1(file_path: str) -> str:
    """Return a styled line with the SHA-1 digest of the file, or an error."""
    return _report_digest(file_path, _SHA1)


def check_sha256(file_path: str) -> str:
    """Return a styled line with the SHA-256 digest of the file, or an error."""
    return _report_digest(file_path, _SHA256)


def check_sha512(file_path: str) -> str:
    """Return a styled line with the SHA-512 digest of the file, or an error."""
    return _report_digest(file_path, _SHA512)
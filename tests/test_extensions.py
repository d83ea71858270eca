import pytest

from anchor.extensions import get_file_ext
from anchor.styles import LogLevel


@pytest.mark.parametrize(
    "path, expected",
    [
        ("data.json", "json"),
        ("config/settings.yml", "yml"),
        ("notes/readme.md", "md"),
        ("feed.xml", "xml"),
    ],
)
def test_known_extensions(path, expected):
    assert get_file_ext(path) == expected


def test_last_extension_wins():
    assert get_file_ext("archive.tar.gz") == "gz"


def test_trailing_dot_gives_empty_extension():
    assert get_file_ext("file.") == ""


@pytest.mark.parametrize("path", ["Makefile", ".bashrc", "..", ".", "", "dir.d/plain"])
def test_unresolvable(path):
    result = get_file_ext(path)
    assert result == f"{LogLevel.ERROR.fmt()} Cannot resolve file extension"


def test_trailing_slash_is_ignored():
    assert get_file_ext("folder.json/") == "json"
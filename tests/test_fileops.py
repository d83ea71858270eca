from anchor.fileops import (
    can_create,
    can_read_file,
    can_write_file,
    file_is_exist,
    is_directory,
    write_file,
)
from anchor.styles import LogLevel


def test_can_create_makes_empty_file(tmp_path):
    target = tmp_path / "log.txt"
    message = can_create(str(target))
    assert "Successfully created log file" in message
    assert message.startswith(LogLevel.INFO.fmt())
    assert target.read_bytes() == b""


def test_can_create_truncates(tmp_path):
    target = tmp_path / "log.txt"
    target.write_text("old content")
    can_create(str(target))
    assert target.read_text() == ""


def test_can_create_missing_directory(tmp_path):
    message = can_create(str(tmp_path / "missing" / "log.txt"))
    assert message.startswith(LogLevel.ERROR.fmt())
    assert "Can't create file with error" in message


def test_can_read_file(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("x")
    assert "Checking read permission ... Done!" in can_read_file(str(target))
    missing = can_read_file(str(tmp_path / "nope.txt"))
    assert "Can't read file with error" in missing
    assert missing.startswith(LogLevel.ERROR.fmt())


def test_can_write_file(tmp_path):
    target = tmp_path / "a.txt"
    target.write_text("keep")
    assert "Checking write permission ... Done!" in can_write_file(str(target))
    assert target.read_text() == "keep"
    missing = tmp_path / "nope.txt"
    assert "Can't write log file with error" in can_write_file(str(missing))
    assert not missing.exists()


def test_write_file_creates(tmp_path):
    target = tmp_path / "out.txt"
    message = write_file(str(target), "hello world", "All good")
    assert message == f"{LogLevel.INFO.fmt()} All good\n"
    assert target.read_text() == "hello world"


def test_write_file_does_not_truncate(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("abcdef")
    write_file(str(target), "xy", "done")
    assert target.read_text() == "xycdef"


def test_write_file_bad_path(tmp_path):
    message = write_file(str(tmp_path / "no" / "out.txt"), "data", "done")
    assert message.startswith(LogLevel.ERROR.fmt())
    assert "Failed to open file with error" in message


def test_file_is_exist(tmp_path, capsys):
    target = tmp_path / "a.txt"
    target.write_text("x")
    assert file_is_exist(str(target)) is True
    missing = str(tmp_path / "nope.txt")
    assert file_is_exist(missing) is False
    err = capsys.readouterr().err
    assert f"{missing}: File not found" in err


def test_is_directory(tmp_path, capsys):
    folder = tmp_path / "stuff"
    folder.mkdir()
    assert is_directory(str(folder)) is True
    assert "stuff: Is a directory" in capsys.readouterr().out
    target = tmp_path / "a.txt"
    target.write_text("x")
    assert is_directory(str(target)) is False
    assert is_directory(str(tmp_path / "nope")) is False
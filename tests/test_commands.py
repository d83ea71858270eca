import json

import pytest

from anchor.commands import cat_command, fmt_command, hash_command
from anchor.hashing import check_md5, check_sha1, check_sha256, check_sha512


@pytest.fixture
def sample(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(b"abc")
    return path


def test_cat_prints_content(sample, capsys):
    cat_command(str(sample))
    out = capsys.readouterr().out
    assert out.startswith("abc")
    assert "Finished in" in out


def test_cat_replaces_invalid_utf8(tmp_path, capsys):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"ok\xffend")
    cat_command(str(path))
    assert capsys.readouterr().out.startswith("ok\ufffdend")


def test_cat_missing_file_reports_not_found(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    cat_command(str(missing))
    captured = capsys.readouterr()
    assert "File not found" in captured.err
    assert captured.out == ""


def test_cat_directory_is_skipped(tmp_path, capsys):
    folder = tmp_path / "folder"
    folder.mkdir()
    cat_command(str(folder))
    assert capsys.readouterr().out == "folder: Is a directory\n"


def test_hash_contains_all_digests_in_order(sample, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = str(sample)
    result = hash_command(path, False)
    expected = check_md5(path) + check_sha1(path) + check_sha256(path) + check_sha512(path)
    assert result.startswith(expected)
    assert "To use debug mode, just typing --debug" in result


def test_hash_known_md5(sample, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = hash_command(str(sample), False)
    assert "MD5: 900150983cd24fb0d6963f7d28e17f72" in result


def test_hash_debug_writes_log(sample, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = str(sample)
    result = hash_command(path, True)
    log = (tmp_path / "hash_log.txt").read_text(encoding="utf-8")
    assert log == check_md5(path) + check_sha1(path) + check_sha256(path) + check_sha512(path)
    assert "Saved log as name hash_log.txt" in result


def test_hash_missing_file_returns_none(tmp_path, capsys):
    assert hash_command(str(tmp_path / "nope.txt"), False) is None
    assert "File not found" in capsys.readouterr().err


def test_hash_directory_returns_none(tmp_path):
    assert hash_command(str(tmp_path), False) is None


def test_fmt_json_rewrites_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"b":1,"a":[1,2]}', encoding="utf-8")
    result = fmt_command(str(path))
    assert "Successfully format JSON file!" in result
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": [1, 2], "b": 1}


def test_fmt_unknown_extension(tmp_path, capsys):
    path = tmp_path / "notes.txt"
    path.write_text("plain", encoding="utf-8")
    result = fmt_command(str(path))
    assert result == "Unknow file extension, skipping.."
    assert path.read_text(encoding="utf-8") == "plain"
    assert "Unknow file extension, skipping.." in capsys.readouterr().out
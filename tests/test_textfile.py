import pytest

from hexmatch.textfile import load_text_file


def test_reads_whole_file(tmp_path):
    path = tmp_path / "shader.vert"
    content = "line one\nline two\n"
    path.write_text(content, encoding="utf-8")
    assert load_text_file(path) == content


def test_keeps_line_endings(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb\r\n")
    assert load_text_file(str(path)) == "a\r\nb\r\n"


def test_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_text_file(path) == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_text_file(tmp_path / "missing.txt")
import pytest

from renumber.docs.model import LineRecord
from renumber.docs.pipeline import format_document, renumber_text


def test_renumber_text_scenario():
    text, count = renumber_text('Step 1: *Do "this"*\nStep 2: Do that\n')
    assert count == 2
    assert text == "1. Do this\n\n2. Do that"


def test_renumber_text_replaces_old_numbers():
    src = "5. Intro: alpha\n\n\n9. beta\n   \n  Title: gamma  \n"
    text, count = renumber_text(src)
    assert count == 3
    assert text == "1. alpha\n\n2. beta\n\n3. gamma"


def test_renumber_text_blank_input():
    assert renumber_text("") == ("", 0)
    assert renumber_text('  \n\t\n"*"\n') == ("", 0)


def test_renumber_text_long_document_grows_buffer():
    lines = [f"{i}. item number {i}" for i in range(500)]
    text, count = renumber_text("\n".join(lines))
    assert count == 500
    out = text.split("\n\n")
    assert out[0] == "1. item number 0"
    assert out[-1] == "500. item number 499"


def test_line_record_invariants():
    assert LineRecord("ok").text == "ok"
    with pytest.raises(ValueError):
        LineRecord("")
    with pytest.raises(ValueError):
        LineRecord(" padded")


def test_format_document_overwrites_source(tmp_path, capsys):
    src = tmp_path / "content-formatter.txt"
    src.write_bytes(b'Step 1: *Do "this"*\r\nStep 2: Do that\r\n')
    result = format_document(str(src))
    assert result.line_count == 2
    assert src.read_bytes() == b"1. Do this\n\n2. Do that"
    assert "File successfully formatted" in capsys.readouterr().out


def test_format_document_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        format_document(str(tmp_path / "missing.txt"))


def test_format_document_empty_file_untouched(tmp_path):
    src = tmp_path / "empty.txt"
    src.write_bytes(b"")
    with pytest.raises(ValueError):
        format_document(str(src))
    assert src.read_bytes() == b""


def test_format_document_blank_file_untouched(tmp_path):
    src = tmp_path / "blank.txt"
    src.write_bytes(b"  \n\n\t\n")
    with pytest.raises(ValueError, match="No lines"):
        format_document(str(src))
    assert src.read_bytes() == b"  \n\n\t\n"


def test_format_document_keeps_non_utf8_bytes(tmp_path):
    src = tmp_path / "latin1.txt"
    src.write_bytes(b"3. Caf\xe9: cr\xe8me *br\xfbl\xe9e*\n")
    result = format_document(str(src))
    assert result.line_count == 1
    assert src.read_bytes() == b"1. cr\xe8me br\xfbl\xe9e"


def test_format_document_write_failure_propagates(tmp_path, monkeypatch):
    src = tmp_path / "locked.txt"
    src.write_bytes(b"a\nb\n")

    def _refuse(text, out_path, encoding="utf-8"):
        raise PermissionError(f"Cannot write to file {out_path}")

    monkeypatch.setattr("renumber.docs.pipeline.write_txt", _refuse)
    with pytest.raises(PermissionError):
        format_document(str(src))
    assert src.read_bytes() == b"a\nb\n"

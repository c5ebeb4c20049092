import pytest

from main import _cli


def test_cli_formats_file(tmp_path, capsys):
    src = tmp_path / "notes.txt"
    src.write_text("1. a\n2. Title: b\n", encoding="utf-8")
    _cli(["--file", str(src)])
    assert src.read_text(encoding="utf-8") == "1. a\n\n2. b"
    assert "File successfully formatted" in capsys.readouterr().out


def test_cli_missing_file_exits_non_zero(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        _cli(["--file", str(tmp_path / "missing.txt")])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_blank_file_exits_non_zero(tmp_path):
    src = tmp_path / "blank.txt"
    src.write_text("\n \n", encoding="utf-8")
    with pytest.raises(SystemExit):
        _cli(["-f", str(src)])
    assert src.read_text(encoding="utf-8") == "\n \n"


def test_cli_rename_media(tmp_path, capsys):
    (tmp_path / "pic.webp").write_bytes(b"x")
    _cli(["--rename-media", str(tmp_path), "--seed", "1"])
    assert not (tmp_path / "pic.webp").exists()
    assert (tmp_path / "00042021.webp").exists()
    assert "Files renamed: 1" in capsys.readouterr().out


def test_cli_invalid_docx_exits_non_zero(tmp_path, capsys):
    src = tmp_path / "broken.docx"
    src.write_bytes(b"not a zip")
    with pytest.raises(SystemExit) as exc:
        _cli(["-f", str(src)])
    assert exc.value.code == 1
    assert "Error: Cannot open file" in capsys.readouterr().err
    assert src.read_bytes() == b"not a zip"


def test_cli_unwritable_destination_exits_non_zero(tmp_path, capsys, monkeypatch):
    src = tmp_path / "locked.txt"
    src.write_text("a\n", encoding="utf-8")

    def _refuse(text, out_path, encoding="utf-8"):
        raise PermissionError(f"Cannot write to file {out_path}")

    monkeypatch.setattr("renumber.docs.pipeline.write_txt", _refuse)
    with pytest.raises(SystemExit) as exc:
        _cli(["--file", str(src)])
    assert exc.value.code == 1
    assert "Error: Cannot write to file" in capsys.readouterr().err

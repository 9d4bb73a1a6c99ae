import os

from winix.touch import run


def test_creates_missing_file(tmp_path, capsys):
    target = tmp_path / "new.txt"
    run([str(target)])
    assert target.is_file()
    assert target.read_bytes() == b""
    assert f"Created '{target}'" in capsys.readouterr().out


def test_updates_existing_timestamp(tmp_path, capsys):
    target = tmp_path / "old.txt"
    target.write_text("keep")
    os.utime(target, (1000, 1000))
    run([str(target)])
    assert target.stat().st_mtime > 1000
    assert target.read_text() == "keep"
    assert "Updated timestamp for" in capsys.readouterr().out


def test_reports_create_failure(tmp_path, capsys):
    target = tmp_path / "no_such_dir" / "file.txt"
    run([str(target)])
    assert not target.exists()
    assert "touch: cannot create file" in capsys.readouterr().err


def test_handles_several_files(tmp_path):
    names = [tmp_path / "a", tmp_path / "b"]
    run([str(n) for n in names])
    assert all(n.exists() for n in names)
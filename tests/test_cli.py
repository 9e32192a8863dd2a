import os

import pytest

from dedup.cli import main


def last_line(out):
    return out.strip().splitlines()[-1]


def test_report_only_scenario(two_dirs, capsys):
    root, foo, bar = two_dirs

    rc = main(["--min-size", "0", str(root / "d1"), str(root / "d2")])

    out = capsys.readouterr().out
    assert rc == 0
    assert out.strip() == "Processed 2 files. Found 1 duplicates. Removing them would save 4 bytes."
    assert foo.exists() and bar.exists()


def test_verbose_prints_action_lines(two_dirs, capsys):
    root, _, bar = two_dirs

    main(["-v", str(root / "d1"), str(root / "d2")])

    captured = capsys.readouterr()
    link = os.path.join("..", "d1", "foo")
    assert f'(4 bytes) link "{bar}" -> "{link}"' in captured.out.splitlines()
    assert "[RUN] scanning root:" in captured.err


def test_empty_files_are_duplicates(tmp_path, write_file, capsys):
    write_file(tmp_path / "e1", b"")
    write_file(tmp_path / "e2", b"")

    rc = main(["--min-size", "0", str(tmp_path)])

    assert rc == 0
    assert last_line(capsys.readouterr().out) == (
        "Processed 2 files. Found 1 duplicates. Removing them would save 0 bytes."
    )


def test_remove(two_dirs, capsys):
    root, foo, bar = two_dirs

    rc = main(["--remove", "-v", str(root)])

    out = capsys.readouterr().out
    assert rc == 0
    assert f'(4 bytes) remove "{bar}"' in out.splitlines()
    assert last_line(out) == "Processed 2 files. Removed 1 files, saving 4 bytes."
    assert not bar.exists()
    assert foo.read_bytes() == b"AAAA"


def test_symlink(two_dirs, capsys):
    root, foo, bar = two_dirs

    rc = main(["--symlink", str(root)])

    assert rc == 0
    assert last_line(capsys.readouterr().out) == "Processed 2 files. Created 1 symlinks, saving 4 bytes."
    assert bar.is_symlink()
    assert os.readlink(bar) == os.path.join("..", "d1", "foo")
    assert bar.read_bytes() == b"AAAA"


def test_min_size_threshold(two_dirs, capsys):
    root, _, _ = two_dirs

    main(["-m", "4", str(root)])

    assert last_line(capsys.readouterr().out) == (
        "Processed 0 files. Found 0 duplicates. Removing them would save 0 bytes."
    )


def test_max_depth(tmp_path, write_file, capsys):
    write_file(tmp_path / "top", b"AAAA")
    write_file(tmp_path / "sub" / "nested", b"AAAA")

    main(["-d", "1", str(tmp_path)])

    assert last_line(capsys.readouterr().out) == (
        "Processed 1 files. Found 0 duplicates. Removing them would save 0 bytes."
    )


def test_blake3(two_dirs, capsys):
    root, _, _ = two_dirs

    assert main(["--blake3", str(root)]) == 0
    assert "Found 1 duplicates" in capsys.readouterr().out


def test_symlink_and_remove_are_exclusive(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--symlink", "--remove", str(tmp_path)])
    assert exc.value.code == 2


def test_paths_required(monkeypatch):
    monkeypatch.delenv("DEDUP_CONFIG", raising=False)
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_missing_root_fails(tmp_path, capsys):
    rc = main([str(tmp_path / "missing")])

    assert rc == 1
    assert "[ERROR]" in capsys.readouterr().err


def test_config_file_supplies_paths_and_mode(two_dirs, capsys):
    root, _, bar = two_dirs
    cfg = root / "dedup.yaml"
    cfg.write_text(f"paths: ['{root / 'd1'}', '{root / 'd2'}']\nmode: remove\n", encoding="utf-8")

    rc = main(["--config", str(cfg)])

    assert rc == 0
    assert last_line(capsys.readouterr().out) == "Processed 2 files. Removed 1 files, saving 4 bytes."
    assert not bar.exists()


def test_config_from_environment(two_dirs, capsys, monkeypatch):
    root, _, bar = two_dirs
    cfg = root / "dedup.yaml"
    cfg.write_text("mode: symlink\n", encoding="utf-8")
    monkeypatch.setenv("DEDUP_CONFIG", str(cfg))

    assert main([str(root / "d1"), str(root / "d2")]) == 0
    assert bar.is_symlink()


def test_invalid_config(tmp_path, capsys):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("mode: hardlink\n", encoding="utf-8")

    rc = main(["--config", str(cfg), str(tmp_path)])

    assert rc == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_invalid_min_size_from_flag(tmp_path, capsys):
    assert main(["--min-size", "-1", str(tmp_path)]) == 2

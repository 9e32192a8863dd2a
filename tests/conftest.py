from pathlib import Path

import pytest


@pytest.fixture
def write_file():
    def _write(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def two_dirs(tmp_path, write_file):
    foo = write_file(tmp_path / "d1" / "foo", b"AAAA")
    bar = write_file(tmp_path / "d2" / "bar", b"AAAA")
    return tmp_path, foo, bar

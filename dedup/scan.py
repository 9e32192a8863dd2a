from __future__ import annotations
import os
import stat
from pathlib import Path
from typing import Iterator, NamedTuple, Optional


class Entry(NamedTuple):
    path: Path
    size: int


def _raise(err: OSError) -> None:
    raise err


def admits(size: int, min_size: int) -> bool:
    # min_size 0 keeps empty files too
    return min_size == 0 or size > min_size


def iter_entries(root: str, min_size: int = 0, max_depth: Optional[int] = None) -> Iterator[Entry]:
    """Yield regular files under ``root`` in a stable, sorted order.

    Files directly inside ``root`` are depth 1. Symlinks are skipped and
    never followed. Walk errors are raised rather than ignored.
    """
    root_path = Path(root)
    st = os.lstat(root_path)
    if stat.S_ISREG(st.st_mode):
        if admits(st.st_size, min_size):
            yield Entry(root_path, st.st_size)
        return

    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
        dpath = Path(dirpath)
        depth = len(dpath.relative_to(root_path).parts) + 1
        dirnames.sort()
        if max_depth is not None:
            if depth >= max_depth:
                dirnames[:] = []
            if depth > max_depth:
                continue
        for name in sorted(filenames):
            p = dpath / name
            st = os.lstat(p)
            if not stat.S_ISREG(st.st_mode):
                continue
            if not admits(st.st_size, min_size):
                continue
            yield Entry(p, st.st_size)

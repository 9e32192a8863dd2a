"""
Size-bucketed duplicate index.

Files are first grouped by exact size. A size seen once holds a single path
and costs no reads at all; digests are only computed once a second file of
the same size shows up. Within a size, paths are grouped by partial digest
(leading block) and full digests settle equality.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from .util import Digest, Hasher


@dataclass
class Single:
    path: Path


@dataclass
class Grouped:
    by_partial: Dict[Digest, List[Path]] = field(default_factory=dict)

    def add(self, partial: Digest, path: Path) -> None:
        self.by_partial.setdefault(partial, []).append(path)

    def candidates(self, partial: Digest) -> List[Path]:
        return self.by_partial.get(partial, [])


SizeBucket = Union[Single, Grouped]


def upgrade(bucket: Single, prev_partial: Digest, path: Path, partial: Digest) -> Grouped:
    """Single -> Grouped, seeded with the existing path and a distinct newcomer."""
    grouped = Grouped()
    grouped.add(prev_partial, bucket.path)
    grouped.add(partial, path)
    return grouped


class DuplicateIndex:
    def __init__(self, hasher: Optional[Hasher] = None) -> None:
        self.hasher = hasher or Hasher()
        self.size_map: Dict[int, SizeBucket] = {}

    def __len__(self) -> int:
        return len(self.size_map)

    def _same_content(self, a: Path, b: Path) -> bool:
        return self.hasher.full(a) == self.hasher.full(b)

    def register(self, path: Path, size: int) -> Optional[Path]:
        """Record ``path`` and return the representative it duplicates, if any.

        Returns None when the content has not been seen before. The first
        path registered with a given content stays its representative.
        """
        bucket = self.size_map.get(size)

        if bucket is None:
            self.size_map[size] = Single(path)
            return None

        if isinstance(bucket, Single):
            prev_partial = self.hasher.partial(bucket.path)
            new_partial = self.hasher.partial(path)
            if new_partial == prev_partial and self._same_content(bucket.path, path):
                return bucket.path
            self.size_map[size] = upgrade(bucket, prev_partial, path, new_partial)
            return None

        new_partial = self.hasher.partial(path)
        for prev_path in bucket.candidates(new_partial):
            if self._same_content(prev_path, path):
                return prev_path
        bucket.add(new_partial, path)
        return None

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from .actions import Decision
from .util import format_bytes


@dataclass
class RunStats:
    files: int = 0
    actions: int = 0
    saved_bytes: int = 0
    size_buckets: int = 0
    partial_hashes: int = 0
    full_hashes: int = 0

    def record(self, decision: Decision) -> None:
        self.actions += 1
        self.saved_bytes += decision.size

    def as_dict(self) -> Dict[str, int]:
        return {
            "files": self.files,
            "actions": self.actions,
            "saved_bytes": self.saved_bytes,
            "size_buckets": self.size_buckets,
            "partial_hashes": self.partial_hashes,
            "full_hashes": self.full_hashes,
        }


def action_line(mode: str, decision: Decision) -> str:
    size = format_bytes(decision.size)
    if mode == "remove":
        return f'({size}) remove "{decision.duplicate}"'
    return f'({size}) link "{decision.duplicate}" -> "{decision.link_target}"'


def summary_line(mode: str, stats: RunStats) -> str:
    line = f"Processed {stats.files} files. "
    saved = format_bytes(stats.saved_bytes)
    if mode == "remove":
        return line + f"Removed {stats.actions} files, saving {saved}."
    if mode == "symlink":
        return line + f"Created {stats.actions} symlinks, saving {saved}."
    return line + f"Found {stats.actions} duplicates. Removing them would save {saved}."

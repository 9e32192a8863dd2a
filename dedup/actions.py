from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

MODES = ("report", "remove", "symlink")


@dataclass
class Decision:
    duplicate: Path
    representative: Path
    link_target: Path
    size: int


def apply_action(mode: str, decision: Decision) -> None:
    """Remove the duplicate, or replace it with a relative symlink.

    Report mode leaves the filesystem untouched. Failures propagate.
    """
    if mode == "report":
        return
    if mode not in MODES:
        raise ValueError(f"mode must be one of {', '.join(MODES)}")
    decision.duplicate.unlink()
    if mode == "symlink":
        os.symlink(decision.link_target, decision.duplicate)

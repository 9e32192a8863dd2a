# dedup/dedupe.py
"""
Duplicate detection run:
1. Walk each root in order and register every admitted file in one index
2. For each duplicate, compute a relative link target to its representative
3. Apply the configured action (report, remove or symlink) and tally savings
"""
from __future__ import annotations
import os
import sys
from typing import Callable, Optional

from .actions import Decision, apply_action
from .config import DedupConfig
from .index import DuplicateIndex
from .paths import relative_path
from .report import RunStats
from .scan import iter_entries
from .util import Hasher, format_bytes

ActionCallback = Callable[[Decision], None]
LogCallback = Callable[[str], None]


def dedup_paths(
    cfg: DedupConfig,
    action_cb: Optional[ActionCallback] = None,
    log_cb: Optional[LogCallback] = None,
) -> RunStats:
    """
    Find duplicates across ``cfg.paths`` and act on them per ``cfg.mode``.

    Any I/O error aborts the run by propagating to the caller.
    """

    def emit_log(message: str) -> None:
        if cfg.verbose:
            print(message, file=sys.stderr)
        if log_cb:
            log_cb(message)

    hasher = Hasher(
        algorithm=cfg.hashing.algorithm,
        block_len=cfg.hashing.block_bytes,
        chunk_size=cfg.hashing.chunk_bytes,
    )
    index = DuplicateIndex(hasher)
    stats = RunStats()

    emit_log(
        f"[DEDUP] mode={cfg.mode} | min_size={cfg.scanner.min_size:,} | "
        f"max_depth={cfg.scanner.max_depth} | hash={cfg.hashing.algorithm}"
    )

    for root in cfg.paths:
        emit_log(f"[RUN] scanning root: {root}")
        for entry in iter_entries(root, cfg.scanner.min_size, cfg.scanner.max_depth):
            stats.files += 1
            prev_path = index.register(entry.path, entry.size)
            # A root reached twice, under any spelling, meets its own files again
            if prev_path is None or os.path.samefile(prev_path, entry.path):
                continue
            decision = Decision(
                duplicate=entry.path,
                representative=prev_path,
                link_target=relative_path(entry.path, prev_path),
                size=entry.size,
            )
            apply_action(cfg.mode, decision)
            stats.record(decision)
            if action_cb:
                action_cb(decision)

    stats.size_buckets = len(index)
    stats.partial_hashes = hasher.partial_count
    stats.full_hashes = hasher.full_count
    emit_log("[DEDUP] " + " | ".join(f"{key}={value:,}" for key, value in stats.as_dict().items()))
    emit_log(f"[DONE] {stats.actions} duplicates, {format_bytes(stats.saved_bytes)}.")
    return stats

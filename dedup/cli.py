"""Command-line interface for dedup."""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from .actions import Decision
from .config import DedupConfig, load_config
from .dedupe import dedup_paths
from .report import action_line, summary_line


def _configure_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="YAML configuration file (default: $DEDUP_CONFIG if set)")
    parser.add_argument("-m", "--min-size", type=int, help="Minimum size (in bytes) of files to search")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print file names and sizes of the found duplicates")
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        help="Do not search files beyond this depth. Files in the specified paths are considered depth 1.",
    )
    parser.add_argument("--blake3", action="store_true", help="Use BLAKE3 instead of SHA-256 for content digests")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("-s", "--symlink", action="store_true", help="Replace duplicate files by symlinks")
    mode.add_argument("--remove", action="store_true", help="Remove duplicate files")
    parser.add_argument("paths", nargs="*", help="Directories to search")


def build_parser(prog: Optional[str] = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog or "dedup", description="Find duplicate files in a directory structure")
    _configure_parser(parser)
    return parser


def config_from_args(args: argparse.Namespace) -> DedupConfig:
    config_path = args.config or os.environ.get("DEDUP_CONFIG")
    cfg = load_config(Path(config_path) if config_path else None)

    if args.min_size is not None:
        cfg.scanner.min_size = args.min_size
    if args.max_depth is not None:
        cfg.scanner.max_depth = args.max_depth
    if args.verbose:
        cfg.verbose = True
    if args.blake3:
        cfg.hashing.algorithm = "blake3"
    if args.remove:
        cfg.mode = "remove"
    elif args.symlink:
        cfg.mode = "symlink"
    cfg.paths.extend(args.paths)
    # assignment above bypasses field validation
    return DedupConfig.model_validate(cfg.model_dump())


def run(cfg: DedupConfig) -> int:
    def print_action(decision: Decision) -> None:
        if cfg.verbose:
            print(action_line(cfg.mode, decision))

    stats = dedup_paths(cfg, action_cb=print_action)
    print(summary_line(cfg.mode, stats))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        cfg = config_from_args(args)
    except (OSError, ValidationError, yaml.YAMLError) as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        return 2
    if not cfg.paths:
        parser.error("the following arguments are required: paths")

    try:
        return run(cfg)
    except OSError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

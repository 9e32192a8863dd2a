from __future__ import annotations
from pathlib import Path


class RelativePathError(RuntimeError):
    """Raised when a canonical path yields a component that is not a plain name."""


def relative_path(base: Path, target: Path) -> Path:
    """Path that reaches ``target`` from the directory containing ``base``.

    Both paths are canonicalized first, so ``base`` must not itself be a
    symlink: resolving it would measure from the link's destination.
    Canonical parts past the shared anchor are always plain names, so
    RelativePathError marks a defect rather than a recoverable error.
    """
    abs_base = Path(base).resolve(strict=True).parent
    abs_target = Path(target).resolve(strict=True)

    base_parts = abs_base.parts
    target_parts = abs_target.parts

    common = 0
    for a, b in zip(base_parts, target_parts):
        if a != b:
            break
        common += 1

    ups = []
    for part in base_parts[common:]:
        if part in ("", ".", "..") or part == abs_base.anchor:
            raise RelativePathError(f"Unexpected component {part!r} in {abs_base}")
        ups.append("..")

    return Path(*ups, *target_parts[common:])

from __future__ import annotations
from pathlib import Path
import hashlib
from typing import Any, Dict

import blake3

HASH_BLOCK_LEN = 65536
HASH_BUFLEN = 65536

Digest = bytes

_BINARY_PREFIXES = ["Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"]


def new_hasher(algorithm: str = "sha256") -> Any:
    if algorithm == "sha256":
        return hashlib.sha256()
    if algorithm == "blake3":
        return blake3.blake3()
    raise ValueError(f"Unsupported hash algorithm: {algorithm}")


def partial_digest(path: Path, block_len: int = HASH_BLOCK_LEN, algorithm: str = "sha256") -> Digest:
    """Digest of the leading block of a file.

    The whole block buffer is hashed even when the file is shorter than the
    block; unread bytes stay zero.
    """
    h = new_hasher(algorithm)
    buf = bytearray(block_len)
    view = memoryview(buf)
    total_read = 0
    with open(path, "rb") as f:
        while total_read < block_len:
            n = f.readinto(view[total_read:])
            if not n:
                break
            total_read += n
    h.update(buf)
    return h.digest()


def full_digest(path: Path, chunk_size: int = HASH_BUFLEN, algorithm: str = "sha256") -> Digest:
    """Digest of a whole file, streamed through one reused chunk buffer.

    Every chunk is hashed at full buffer length, so a short final read
    carries over the tail of the previous chunk (zeros for the first one).
    """
    h = new_hasher(algorithm)
    buf = bytearray(chunk_size)
    with open(path, "rb") as f:
        while True:
            n = f.readinto(buf)
            if not n:
                break
            h.update(buf)
    return h.digest()


def cached_full_digest(
    path: Path,
    cache: Dict[Path, Digest],
    chunk_size: int = HASH_BUFLEN,
    algorithm: str = "sha256",
) -> Digest:
    digest = cache.get(path)
    if digest is None:
        digest = full_digest(path, chunk_size, algorithm)
        cache[path] = digest
    return digest


class Hasher:
    """Computes digests for the index and memoizes full digests per path."""

    def __init__(
        self,
        algorithm: str = "sha256",
        block_len: int = HASH_BLOCK_LEN,
        chunk_size: int = HASH_BUFLEN,
    ) -> None:
        new_hasher(algorithm)  # raises on unknown algorithm
        self.algorithm = algorithm
        self.block_len = block_len
        self.chunk_size = chunk_size
        self.full_hashes: Dict[Path, Digest] = {}
        self.partial_count = 0
        self.full_count = 0

    def partial(self, path: Path) -> Digest:
        self.partial_count += 1
        return partial_digest(path, self.block_len, self.algorithm)

    def full(self, path: Path) -> Digest:
        if path not in self.full_hashes:
            self.full_count += 1
        return cached_full_digest(path, self.full_hashes, self.chunk_size, self.algorithm)


def format_bytes(num: int) -> str:
    if num < 1024:
        return f"{num} bytes"
    value = float(num)
    for prefix in _BINARY_PREFIXES:
        value /= 1024.0
        if value < 1024:
            break
    return f"{value:.1f} {prefix}B"

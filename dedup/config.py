from __future__ import annotations
from pathlib import Path
from typing import List, Literal, Optional
from pydantic import BaseModel, Field
import yaml

class ScanConfig(BaseModel):
    min_size: int = Field(default=0, ge=0)
    max_depth: Optional[int] = Field(default=None, ge=0)

class HashConfig(BaseModel):
    algorithm: Literal["sha256", "blake3"] = "sha256"
    block_bytes: int = Field(default=65536, gt=0)  # partial digest window
    chunk_bytes: int = Field(default=65536, gt=0)  # full digest read size

class DedupConfig(BaseModel):
    paths: List[str] = Field(default_factory=list)
    mode: Literal["report", "remove", "symlink"] = "report"
    verbose: bool = False
    scanner: ScanConfig = Field(default_factory=ScanConfig)
    hashing: HashConfig = Field(default_factory=HashConfig)

def load_config(path: Optional[Path] = None) -> DedupConfig:
    if path is None:
        return DedupConfig()
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    return DedupConfig(**data)

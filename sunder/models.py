from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List

@dataclass(frozen=True)
class ChildFolder:
    name: str
    path: str

@dataclass(frozen=True)
class CategorizedFolder:
    name: str
    path: str
    size_bytes: int
    category: str

@dataclass(frozen=True)
class ScanProgress:
    scanned_folders: int
    total_folders: int
    percent: float
    current_folder: str

    def to_dict(self) -> dict:
        return asdict(self)

@dataclass
class ScanResult:
    total_size_bytes: int
    folders: List[CategorizedFolder] = field(default_factory=list)
    root: str = ""
    elapsed_sec: float = 0.0

    def to_dict(self) -> dict:
        # wire payload: only what a host needs to render the result
        return {
            "total_size_bytes": self.total_size_bytes,
            "folders": [asdict(f) for f in self.folders],
        }

@dataclass
class CategoryGroup:
    category: str
    total_bytes: int = 0
    folders: List[CategorizedFolder] = field(default_factory=list)

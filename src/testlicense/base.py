from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple


@dataclass(frozen=True)
class LicenseFile:
    filename: str
    contents: bytes


@dataclass(frozen=True)
class Match:
    type: str
    name: str
    percent: float  # share of the whole document covered by this match


@dataclass(frozen=True)
class Coverage:
    percent: float
    matches: Tuple[Match, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CoverOptions:
    min_score: float = 0.0


class DirnamesReader(Protocol):
    def readdirnames(self, n: int) -> List[str]: ...


class Scorer(Protocol):
    def cover(self, data: bytes, options: CoverOptions) -> Optional[Coverage]: ...

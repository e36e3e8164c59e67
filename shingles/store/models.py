from __future__ import annotations

from dataclasses import dataclass


@dataclass
class NGram:
    """单个 n-gram 及其出现次数（次数只增不减）。"""

    text: str
    occurrences: int = 1


@dataclass(frozen=True)
class ShingleRecord:
    key: int
    text: str
    count: int
    frequency: float

from __future__ import annotations

from typing import Iterable, List, Optional

from .models import ShingleRecord


def frequency(count: int, total: int) -> float:
    """相对频率 = 出现次数 / 去重后的 n-gram 总数（total 为 0 时返回 0.0）。"""
    if total <= 0:
        return 0.0
    return float(count) / float(total)


def rank_records(
    records: Iterable[ShingleRecord],
    descending: bool = True,
    limit: Optional[int] = None,
) -> List[ShingleRecord]:
    """
    按出现次数排序（纯函数，便于单测）

    - 排序稳定：次数相同的记录保持输入顺序（升序、降序均如此）
    - limit：仅保留前 N 条；limit <= 0 返回空列表
    """
    if limit is not None and limit <= 0:
        return []
    ranked = sorted(records, key=lambda r: r.count, reverse=descending)
    if limit is not None:
        return ranked[:limit]
    return ranked

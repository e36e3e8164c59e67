"""
n-gram 计数仓库模块

提供身份键（CRC32）、线程安全的计数结构与按频次排序的遍历。
"""

from .identity import IdentityFunction, crc32_identity
from .models import NGram, ShingleRecord
from .ranking import frequency, rank_records
from .shingle_store import ShingleStore

__all__ = [
    "IdentityFunction",
    "NGram",
    "ShingleRecord",
    "ShingleStore",
    "crc32_identity",
    "frequency",
    "rank_records",
]

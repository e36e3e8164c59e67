"""
Shingle（词级 n-gram）统计：
- 英文切句/抽词与停用词规范化
- 滑动窗口生成 n-gram
- 线程安全的去重计数与按频次排序遍历
"""

from shingles.ngram import NGramLength, compute_ngrams
from shingles.store import NGram, ShingleRecord, ShingleStore, rank_records
from shingles.tokenizer import sentences, words

__all__ = [
    "NGram",
    "NGramLength",
    "ShingleRecord",
    "ShingleStore",
    "compute_ngrams",
    "rank_records",
    "sentences",
    "words",
]

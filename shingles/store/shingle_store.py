from __future__ import annotations

from threading import RLock
from typing import Dict, Iterator, List, Optional

from loguru import logger

from shingles.ngram.generator import compute_ngrams, validate_length
from shingles.tokenizer.tokenizers import LatinRegexTokenizer, Tokenizer

from .identity import IdentityFunction, crc32_identity
from .models import NGram, ShingleRecord
from .ranking import frequency, rank_records


class ShingleStore:
    """
    n-gram 计数仓库（线程安全）：
    - 以身份键（默认 CRC32）索引 n-gram，重复出现时累加次数
    - 记录首次插入顺序，作为唯一的顺序原语
    - 所有读写共用同一把锁，读操作基于锁内快照
    """

    def __init__(
        self,
        n: Optional[int] = None,
        *,
        tokenizer: Optional[Tokenizer] = None,
        identity: IdentityFunction = crc32_identity,
    ) -> None:
        self._lock = RLock()
        self._tokenizer = tokenizer or LatinRegexTokenizer()
        self._identity = identity
        self._n: Optional[int] = None
        self._ngrams: Dict[int, NGram] = {}
        self._order: List[int] = []
        if n is not None:
            self.initialize(n)

    @property
    def n(self) -> Optional[int]:
        return self._n

    def initialize(self, n: int) -> None:
        """重置仓库并设定 n-gram 长度（重新初始化会丢弃已有数据，不做合并）。"""
        n = validate_length(n)
        with self._lock:
            self._n = n
            self._ngrams = {}
            self._order = []

    def incorporate(self, corpus: str, normalize: bool = False) -> int:
        """
        切句 -> 抽词 -> 生成 n-gram -> 逐个计数。

        返回本次新增的 n-gram 实例数（含重复）。
        """
        n = self._require_initialized()
        added = 0
        for sentence in self._tokenizer.sentences(corpus):
            for ngram in compute_ngrams(self._tokenizer.words(sentence, normalize), n):
                self.add(ngram)
                added += 1
        logger.debug(f"语料计数完成: corpus_length={len(corpus or '')}, ngrams={added}")
        return added

    def add(self, text: str) -> None:
        key = self._identity(text)
        with self._lock:
            existing = self._ngrams.get(key)
            if existing is not None:
                existing.occurrences += 1
                return
            self._ngrams[key] = NGram(text=text, occurrences=1)
            self._order.append(key)

    def get(self, text: str) -> Optional[NGram]:
        key = self._identity(text)
        with self._lock:
            existing = self._ngrams.get(key)
            if existing is None:
                return None
            return NGram(text=existing.text, occurrences=existing.occurrences)

    def count(self) -> int:
        with self._lock:
            return len(self._order)

    def total_occurrences(self) -> int:
        with self._lock:
            return sum(ngram.occurrences for ngram in self._ngrams.values())

    def walk(self) -> Iterator[ShingleRecord]:
        """遍历全部 n-gram（顺序不作保证）。"""
        return iter(self._snapshot(use_order=False))

    def sorted_walk(self, descending: bool = True, limit: Optional[int] = None) -> Iterator[ShingleRecord]:
        """按出现次数排序遍历，默认降序；不会改变仓库内部顺序。"""
        return iter(rank_records(self._snapshot(use_order=True), descending=descending, limit=limit))

    def _snapshot(self, use_order: bool) -> List[ShingleRecord]:
        with self._lock:
            total = len(self._order)
            keys = list(self._order) if use_order else list(self._ngrams.keys())
            return [
                ShingleRecord(
                    key=key,
                    text=self._ngrams[key].text,
                    count=self._ngrams[key].occurrences,
                    frequency=frequency(self._ngrams[key].occurrences, total),
                )
                for key in keys
            ]

    def _require_initialized(self) -> int:
        if self._n is None:
            raise RuntimeError("ShingleStore 尚未初始化，请先调用 initialize(n)")
        return self._n

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        with self._lock:
            return self._identity(text) in self._ngrams

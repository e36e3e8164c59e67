"""
Shingle 统计服务

封装 ShingleStore：日志、并发批量导入、榜单报表与文本输出
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, Optional

from loguru import logger

from shingles.core.config import settings
from shingles.schemas.shingle_schema import ShingleRecordOut, ShingleReport
from shingles.services.formatting import format_record
from shingles.store.shingle_store import ShingleStore


class ShingleService:
    """
    Shingle 统计服务

    - n / normalize / max_workers 未传入时读取 settings
    - 同一个 store 可被多个线程并发写入
    """

    def __init__(
        self,
        store: Optional[ShingleStore] = None,
        *,
        n: Optional[int] = None,
        normalize: Optional[bool] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        length = settings.NGRAM_LENGTH if n is None else n
        self._store = store if store is not None else ShingleStore()
        if self._store.n is None:
            self._store.initialize(length)
        self._normalize = settings.NORMALIZE if normalize is None else bool(normalize)
        self._max_workers = int(settings.INGEST_WORKERS if max_workers is None else max_workers)
        if self._max_workers < 1:
            raise ValueError("max_workers 必须 >= 1")
        logger.info(
            f"Shingle 服务初始化完成: n={self._store.n}, normalize={self._normalize}, "
            f"max_workers={self._max_workers}"
        )

    @property
    def store(self) -> ShingleStore:
        return self._store

    def incorporate(self, corpus: str, normalize: Optional[bool] = None) -> int:
        """
        导入单个语料

        Args:
            corpus: 输入文本
            normalize: 是否小写并剔除停用词，默认使用服务配置

        Returns:
            本次计入的 n-gram 实例数
        """
        flag = self._normalize if normalize is None else bool(normalize)
        try:
            added = self._store.incorporate(corpus, flag)
        except Exception as e:
            logger.error(f"语料导入失败: {e}")
            raise
        logger.info(f"语料导入完成: ngrams={added}, distinct={self._store.count()}")
        return added

    def incorporate_many(self, corpora: Iterable[str], normalize: Optional[bool] = None) -> int:
        """并发导入多个语料，任一语料失败时抛出第一个异常。"""
        flag = self._normalize if normalize is None else bool(normalize)
        items = list(corpora)
        if not items:
            return 0

        logger.debug(f"并发导入语料: corpora={len(items)}, max_workers={self._max_workers}")
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            futures = [executor.submit(self._store.incorporate, corpus, flag) for corpus in items]
            try:
                added = sum(future.result() for future in futures)
            except Exception as e:
                logger.error(f"并发导入失败: {e}")
                raise

        logger.info(
            f"并发导入完成: corpora={len(items)}, ngrams={added}, distinct={self._store.count()}"
        )
        return added

    def report(self, limit: Optional[int] = None) -> ShingleReport:
        records = [ShingleRecordOut.from_record(r) for r in self._store.sorted_walk(limit=limit)]
        return ShingleReport(
            ngram_length=self._store.n,
            distinct_count=self._store.count(),
            total_occurrences=self._store.total_occurrences(),
            records=records,
        )

    def lines(self, sorted_by_count: bool = True) -> Iterator[str]:
        records = self._store.sorted_walk() if sorted_by_count else self._store.walk()
        for record in records:
            yield format_record(record)

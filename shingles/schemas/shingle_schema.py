from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from shingles.store.models import ShingleRecord


class ShingleRecordOut(BaseModel):
    hash: int = Field(..., description="n-gram 身份键（32 位哈希）")
    ngram: str = Field(..., description="n-gram 文本")
    count: int = Field(..., ge=1, description="出现次数")
    frequency: float = Field(..., description="相对频率：次数 / 去重 n-gram 总数")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_record(cls, record: ShingleRecord) -> "ShingleRecordOut":
        return cls(hash=record.key, ngram=record.text, count=record.count, frequency=record.frequency)


class ShingleReport(BaseModel):
    ngram_length: int = Field(..., alias="ngramLength", description="n-gram 长度")
    distinct_count: int = Field(..., alias="distinctCount", description="去重后的 n-gram 数量")
    total_occurrences: int = Field(..., alias="totalOccurrences", description="n-gram 实例总数（含重复）")
    records: List[ShingleRecordOut] = Field(default_factory=list, description="按频次降序的记录")

    model_config = ConfigDict(populate_by_name=True)

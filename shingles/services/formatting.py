from __future__ import annotations

from shingles.store.models import ShingleRecord


def format_record(record: ShingleRecord) -> str:
    """渲染单条记录：hash:<h>, ngram:'<text>', count:<c>, frequency:<f>"""
    return (
        f"hash:{record.key}, ngram:'{record.text}', "
        f"count:{record.count}, frequency:{record.frequency:g}"
    )

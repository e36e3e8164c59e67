from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence


class NGramLength(IntEnum):
    UNIGRAM = 1
    BIGRAM = 2
    TRIGRAM = 3
    FOURGRAM = 4
    FIVEGRAM = 5
    SIXGRAM = 6
    SEVENGRAM = 7
    EIGHTGRAM = 8


def validate_length(length: int) -> int:
    length = int(length)
    if length < 1:
        raise ValueError(f"n-gram 长度必须是正整数: {length}")
    return length


def compute_ngrams(words: Sequence[str], length: int) -> List[str]:
    """
    在单词序列上滑动长度为 length 的窗口，每个窗口以单个空格拼接成一个 n-gram。

    - 输出顺序与单词顺序一致，不去重（去重在 ShingleStore 中完成）
    - length 大于单词数时返回空列表
    """
    length = validate_length(length)
    last = len(words) - length
    return [" ".join(words[i : i + length]) for i in range(last + 1)]

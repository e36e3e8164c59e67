from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List

from .stopwords import STOPWORDS

# 句子：不含 . , ; - ? ! 的最长片段，首尾落在单词边界（换行不算分隔符）
_SENTENCE_RE = re.compile(r"\b[^.,;\-?!]+\b")
# 单词：字母/数字/下划线/撇号/连字符组成的最长片段
_WORD_RE = re.compile(r"\b[\w'-]+\b")


def sentences(text: str) -> Iterator[str]:
    """
    按标点切分句子，返回惰性迭代器（每次调用都是新的迭代器，可重复消费）。

    仅对拉丁字母系文本切分可靠，其他文字不保证正确。
    """
    if not text:
        return iter(())
    return (match.group(0) for match in _SENTENCE_RE.finditer(text))


def words(sentence: str, normalize: bool = False) -> List[str]:
    """
    从句子中按从左到右顺序抽取单词。

    - normalize=True：统一小写，并剔除停用词（大小写不敏感）
    - normalize=False：保留原始大小写，不做过滤
    """
    if not sentence:
        return []
    tokens = _WORD_RE.findall(sentence)
    if not normalize:
        return tokens
    lowered = (token.lower() for token in tokens)
    return [token for token in lowered if token not in STOPWORDS]


@dataclass(frozen=True)
class TokenizerInfo:
    tokenizer_id: str
    name: str
    description: str


class Tokenizer:
    info: TokenizerInfo

    def sentences(self, text: str) -> Iterator[str]:
        raise NotImplementedError

    def words(self, sentence: str, normalize: bool = False) -> List[str]:
        raise NotImplementedError

    def tokenize(self, text: str, normalize: bool = False) -> List[List[str]]:
        """按句返回单词序列（空句子不输出）。"""
        result: List[List[str]] = []
        for sentence in self.sentences(text):
            tokens = self.words(sentence, normalize)
            if tokens:
                result.append(tokens)
        return result


class LatinRegexTokenizer(Tokenizer):
    info = TokenizerInfo(
        tokenizer_id="latin-regex",
        name="Latin regex tokenizer",
        description="基于正则的句子/单词切分，附带固定英文停用词表，仅适用于拉丁字母系文本",
    )

    def sentences(self, text: str) -> Iterator[str]:
        return sentences(text)

    def words(self, sentence: str, normalize: bool = False) -> List[str]:
        return words(sentence, normalize)

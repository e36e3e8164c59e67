"""
英文分词模块：
- 按标点切分句子、按正则抽取单词
- 规范化：小写 + 固定英文停用词剔除
"""

from .stopwords import STOPWORDS, is_stopword
from .tokenizers import LatinRegexTokenizer, Tokenizer, TokenizerInfo, sentences, words

__all__ = [
    "STOPWORDS",
    "LatinRegexTokenizer",
    "Tokenizer",
    "TokenizerInfo",
    "is_stopword",
    "sentences",
    "words",
]

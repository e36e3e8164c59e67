from __future__ import annotations

import zlib
from typing import Callable

IdentityFunction = Callable[[str], int]


def crc32_identity(text: str) -> int:
    """
    n-gram 的身份键：UTF-8 文本的 32 位 CRC32（IEEE）。

    非加密哈希，碰撞的两个不同文本会被视为同一个 n-gram（已接受的精度损失）。
    """
    return zlib.crc32(text.encode("utf-8")) & 0xFFFFFFFF

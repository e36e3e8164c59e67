"""
服务模块入口。

注意：这里不要做“强导入”，导入 formatting 等轻量模块时不应连带加载 settings。
"""

from __future__ import annotations

from typing import Any

__all__ = ["ShingleService", "format_record"]


_LAZY_IMPORTS = {
    "ShingleService": (".shingle_service", "ShingleService"),
    "format_record": (".formatting", "format_record"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(name)
    module_path, attr = _LAZY_IMPORTS[name]
    from importlib import import_module

    module = import_module(module_path, __name__)
    return getattr(module, attr)

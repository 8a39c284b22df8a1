"""功能模块聚合与公共导出。"""

from . import assets

__all__ = [
    "assets",
]

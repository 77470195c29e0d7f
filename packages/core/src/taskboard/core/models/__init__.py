"""taskboard Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import (
    CATEGORY_LABELS,
    CATEGORY_TAGS,
    COMPLETED_FIRST_RANKS,
    PENDING_FIRST_RANKS,
    STATUS_LABELS,
    TaskCategory,
    TaskStatus,
)
from .task import Task

__all__ = [
    # 枚举
    "TaskStatus",
    "TaskCategory",
    # 查找表
    "STATUS_LABELS",
    "CATEGORY_LABELS",
    "CATEGORY_TAGS",
    "PENDING_FIRST_RANKS",
    "COMPLETED_FIRST_RANKS",
    # Task
    "Task",
]

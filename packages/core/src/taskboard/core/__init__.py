"""taskboard.core -- 任务组合树、排序/筛选策略与偏好设置

公共接口从此入口导入。
"""

from .board import ROOT_GROUP_ID, TaskBoard
from .composite import TaskComponent, TaskGroup, TaskGroupFactory, TaskLeaf, TaskNode
from .config import TaskBoardConfig, load_config
from .exceptions import InvalidStatusError, TaskBoardError, UnknownCategoryError
from .models import Task, TaskCategory, TaskStatus
from .preferences import (
    PREFERENCE_KEYS,
    WILDCARD_KEY,
    PreferenceChange,
    Preferences,
    PreferenceValues,
    PresentationState,
)
from .strategy import (
    ByCategory,
    BySearchText,
    ByStatus,
    FilterDescriptor,
    KeySortStrategy,
    ShowAll,
    StrategyInfo,
    TaskSorterFilterer,
    parse_filter_descriptor,
)

__all__ = [
    # 看板
    "TaskBoard",
    "ROOT_GROUP_ID",
    # 模型
    "Task",
    "TaskStatus",
    "TaskCategory",
    # 组合树
    "TaskComponent",
    "TaskNode",
    "TaskLeaf",
    "TaskGroup",
    "TaskGroupFactory",
    # 策略
    "TaskSorterFilterer",
    "KeySortStrategy",
    "FilterDescriptor",
    "ShowAll",
    "ByStatus",
    "ByCategory",
    "BySearchText",
    "StrategyInfo",
    "parse_filter_descriptor",
    # 偏好设置
    "Preferences",
    "PreferenceValues",
    "PreferenceChange",
    "PresentationState",
    "PREFERENCE_KEYS",
    "WILDCARD_KEY",
    # 配置
    "TaskBoardConfig",
    "load_config",
    # 异常
    "TaskBoardError",
    "InvalidStatusError",
    "UnknownCategoryError",
]

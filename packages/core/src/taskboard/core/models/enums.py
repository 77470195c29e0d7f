"""枚举定义

包含 TaskStatus、TaskCategory 两个封闭枚举，以及展示层使用的
标签表、分类样式标签表和状态排序权重表。
"""

from enum import StrEnum

from ..exceptions import InvalidStatusError, UnknownCategoryError


class TaskStatus(StrEnum):
    """任务状态

    不校验流转合法性：任意状态都可以直接改为任意状态。
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @classmethod
    def parse(cls, raw: "TaskStatus | str") -> "TaskStatus":
        """按枚举值或展示标签解析状态（不区分大小写）

        Raises:
            InvalidStatusError: 无法匹配任何状态
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            needle = raw.strip().casefold()
            for status in cls:
                if needle in (status.value.casefold(), status.label.casefold()):
                    return status
        raise InvalidStatusError(raw)


class TaskCategory(StrEnum):
    """任务分类，取代原先每个分类一个子类的做法"""

    GENERIC = "generic"
    PERSONAL = "personal"
    WORK = "work"
    STUDY = "study"
    VOLUNTEER = "volunteer"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self]

    @property
    def tag(self) -> str:
        return CATEGORY_TAGS[self]

    @classmethod
    def parse(cls, raw: "TaskCategory | str") -> "TaskCategory":
        """按枚举值或展示标签解析分类（不区分大小写）

        Raises:
            UnknownCategoryError: 无法匹配任何分类
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            needle = raw.strip().casefold()
            for category in cls:
                if needle in (category.value, category.label.casefold()):
                    return category
        raise UnknownCategoryError(raw)


STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "Pending",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.COMPLETED: "Completed",
}

CATEGORY_LABELS: dict[TaskCategory, str] = {
    TaskCategory.GENERIC: "Generic Task",
    TaskCategory.PERSONAL: "Personal",
    TaskCategory.WORK: "Work",
    TaskCategory.STUDY: "Study",
    TaskCategory.VOLUNTEER: "Volunteer Work",
}

# 分类 -> 展示样式标签（展示层据此选择样式）
CATEGORY_TAGS: dict[TaskCategory, str] = {
    TaskCategory.GENERIC: "task-generic",
    TaskCategory.PERSONAL: "task-personal",
    TaskCategory.WORK: "task-work",
    TaskCategory.STUDY: "task-study",
    TaskCategory.VOLUNTEER: "task-volunteer",
}

# 状态排序权重：数值越小越靠前
PENDING_FIRST_RANKS: dict[TaskStatus, int] = {
    TaskStatus.PENDING: 0,
    TaskStatus.IN_PROGRESS: 1,
    TaskStatus.COMPLETED: 2,
}

COMPLETED_FIRST_RANKS: dict[TaskStatus, int] = {
    TaskStatus.COMPLETED: 0,
    TaskStatus.IN_PROGRESS: 1,
    TaskStatus.PENDING: 2,
}

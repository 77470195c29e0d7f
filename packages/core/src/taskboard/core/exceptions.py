"""taskboard 异常体系

运行期的可预期失败（叶子节点上的 add/remove、未知策略键、未知配置键）
一律以布尔值或 None 返回，不抛异常；这里只定义越过封闭枚举边界的错误。
"""


class TaskBoardError(Exception):
    """taskboard 基础异常"""


class InvalidStatusError(TaskBoardError, ValueError):
    """状态值不在 TaskStatus 枚举内"""

    def __init__(self, value: object) -> None:
        """
        Args:
            value: 无法解析的原始状态值
        """
        super().__init__(f"未知任务状态: {value!r}")
        self.value = value


class UnknownCategoryError(TaskBoardError, ValueError):
    """分类值不在 TaskCategory 枚举内"""

    def __init__(self, value: object) -> None:
        """
        Args:
            value: 无法解析的原始分类值
        """
        super().__init__(f"未知任务分类: {value!r}")
        self.value = value

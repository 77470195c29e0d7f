"""TaskBoard -- 应用入口对象

持有根分组、排序/筛选上下文和偏好设置，三者的生命周期都由这里管理。
展示层通过本对象完成：创建任务/分组、移除、查找、修改状态、
以及获取当前筛选排序后的可见任务列表。
"""

import structlog

from .composite import TaskGroup, TaskGroupFactory, TaskLeaf, TaskNode
from .config import TaskBoardConfig
from .models import Task, TaskCategory, TaskStatus
from .preferences import Preferences
from .strategy import TaskSorterFilterer

log = structlog.get_logger()

ROOT_GROUP_ID = "root"


class TaskBoard:
    """任务看板"""

    def __init__(
        self,
        config: TaskBoardConfig | None = None,
        preferences: Preferences | None = None,
    ) -> None:
        config = config or TaskBoardConfig()
        self.preferences = preferences or Preferences(config.preferences)
        self.sorter = TaskSorterFilterer(
            default_sort=config.default_sort,
            default_filter=config.default_filter,
        )
        self._groups = TaskGroupFactory()
        self.root = TaskGroup(ROOT_GROUP_ID, "All tasks")

    def _resolve_group(self, group_id: str | None) -> TaskGroup | None:
        if group_id is None or group_id == ROOT_GROUP_ID:
            return self.root
        node = self.root.get_child(group_id)
        if isinstance(node, TaskGroup):
            return node
        return None

    def create_task(
        self,
        title: str,
        description: str = "",
        category: TaskCategory | str | None = None,
        group_id: str | None = None,
    ) -> Task | None:
        """创建任务并挂到指定分组（默认根分组）

        Args:
            category: 任务分类，None 时使用偏好 default_task_type

        Returns:
            新建的 Task；group_id 不存在或不是分组时返回 None

        Raises:
            UnknownCategoryError: category 不在 TaskCategory 枚举内
        """
        group = self._resolve_group(group_id)
        if group is None:
            log.warning("task_group_not_found", group_id=group_id)
            return None

        if category is None:
            category = self.preferences.get("default_task_type")
        task = Task.create(title, description, category=category)
        group.add(TaskLeaf(task))
        log.info(
            "task_created",
            task_id=task.task_id,
            category=task.category,
            group_id=group.node_id,
        )
        return task

    def create_group(
        self,
        title: str,
        color: str | None = None,
        parent_id: str | None = None,
    ) -> TaskGroup | None:
        """创建分组并挂到父分组（默认根分组）下"""
        parent = self._resolve_group(parent_id)
        if parent is None:
            log.warning("task_group_not_found", group_id=parent_id)
            return None

        group = self._groups.create_group(title, color or "primary")
        parent.add(group)
        log.info("group_created", group_id=group.node_id, parent_id=parent.node_id)
        return group

    def find(self, node_id: str) -> TaskNode | None:
        return self.root.get_child(node_id)

    def remove(self, node_id: str) -> bool:
        removed = self.root.remove(node_id)
        if removed:
            log.info("node_removed", node_id=node_id)
        return removed

    def set_status(self, node_id: str, status: TaskStatus | str) -> bool:
        """修改任务状态；对分组则修改其子树中的全部任务

        Returns:
            False 如果节点不存在

        Raises:
            InvalidStatusError: status 不在 TaskStatus 枚举内
        """
        new_status = TaskStatus.parse(status)
        node = self.find(node_id)
        if node is None:
            return False
        if isinstance(node, TaskGroup):
            node.set_group_status(new_status)
        else:
            node.set_status(new_status)
        return True

    def toggle_group(self, group_id: str) -> bool:
        node = self.find(group_id)
        if not isinstance(node, TaskGroup):
            return False
        node.toggle_expanded()
        return True

    def visible_tasks(self) -> list[Task]:
        """当前筛选排序后的任务；show_completed_tasks 为 False 时隐藏已完成任务"""
        tasks = self.root.tasks()
        if not self.preferences.get("show_completed_tasks"):
            tasks = [t for t in tasks if t.status != TaskStatus.COMPLETED]
        return self.sorter.process(tasks)

    def task_count(self) -> int:
        return self.root.count_tasks()

"""任务组合树 -- TaskLeaf / TaskGroup

叶子包装单个 Task，分组持有有序的子节点列表（叶子或嵌套分组）。
两者实现同一组能力（TaskComponent 协议），调用方无需区分类型；
节点种类是封闭集合 TaskNode = TaskLeaf | TaskGroup，不存在未实现方法的基类。
"""

from collections.abc import Callable, Iterable, Iterator
from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

import structlog

from .models import Task, TaskCategory, TaskStatus

log = structlog.get_logger()


@runtime_checkable
class TaskComponent(Protocol):
    """组合树节点的统一接口"""

    @property
    def node_id(self) -> str: ...

    @property
    def title(self) -> str: ...

    def add(self, component: "TaskNode") -> bool: ...

    def remove(self, node_id: str) -> bool: ...

    def get_child(self, node_id: str) -> "TaskNode | None": ...

    def is_composite(self) -> bool: ...

    def count_tasks(self) -> int: ...


class TaskLeaf:
    """叶子节点 -- 包装一个 Task，组合操作全部是空操作"""

    def __init__(self, task: Task) -> None:
        self.task = task

    def __repr__(self) -> str:
        return f"TaskLeaf({self.task.task_id!r}, {self.task.title!r})"

    @property
    def node_id(self) -> str:
        return self.task.task_id

    @property
    def title(self) -> str:
        return self.task.title

    def add(self, component: "TaskNode") -> bool:
        return False

    def remove(self, node_id: str) -> bool:
        return False

    def get_child(self, node_id: str) -> "TaskNode | None":
        return None

    def is_composite(self) -> bool:
        return False

    def count_tasks(self) -> int:
        return 1

    # 以下委托给被包装的 Task

    @property
    def description(self) -> str:
        return self.task.description

    @property
    def status(self) -> TaskStatus:
        return self.task.status

    def set_status(self, status: TaskStatus | str) -> None:
        self.task.set_status(status)

    @property
    def category(self) -> TaskCategory:
        return self.task.category

    @property
    def type_label(self) -> str:
        return self.task.type_label

    @property
    def created_at(self) -> datetime:
        return self.task.created_at


class TaskGroup:
    """分组节点 -- 持有有序子节点，计数与批量状态操作递归进行

    树深度不限。add 会拒绝把自身或祖先分组挂到自己下面，避免形成环。
    """

    def __init__(self, group_id: str, title: str, color: str = "primary") -> None:
        self._group_id = group_id
        self._title = title
        self.children: list[TaskNode] = []
        self.color = color
        self.expanded = True
        self.created_at = datetime.now(UTC)

    def __repr__(self) -> str:
        return f"TaskGroup({self._group_id!r}, {self._title!r}, children={len(self.children)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator["TaskNode"]:
        return iter(self.children)

    @property
    def node_id(self) -> str:
        return self._group_id

    @property
    def title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title

    def add(self, component: "TaskNode") -> bool:
        """追加子节点到末尾

        Returns:
            False 如果 component 是自身或包含自身的分组（会形成环）
        """
        if component is self or (
            isinstance(component, TaskGroup) and component._contains(self)
        ):
            log.warning(
                "group_add_cycle_rejected",
                group_id=self._group_id,
                component_id=component.node_id,
            )
            return False
        self.children.append(component)
        return True

    def remove(self, node_id: str) -> bool:
        """按 ID 移除子节点

        先在直接子节点中查找；没有命中时按顺序递归到子分组，
        第一个成功的子分组即返回。
        """
        remaining = [child for child in self.children if child.node_id != node_id]
        if len(remaining) != len(self.children):
            self.children = remaining
            return True

        for child in self.children:
            if child.is_composite() and child.remove(node_id):
                return True
        return False

    def get_child(self, node_id: str) -> "TaskNode | None":
        """深度优先查找：每个子节点先比对自身，再递归其子树"""
        for child in self.children:
            if child.node_id == node_id:
                return child
            if child.is_composite():
                found = child.get_child(node_id)
                if found is not None:
                    return found
        return None

    def is_composite(self) -> bool:
        return True

    def count_tasks(self) -> int:
        return sum(child.count_tasks() for child in self.children)

    def toggle_expanded(self) -> None:
        self.expanded = not self.expanded

    def flatten_leaves(self) -> list[TaskLeaf]:
        """按顺序收集整棵子树中的所有叶子"""
        leaves: list[TaskLeaf] = []
        for child in self.children:
            if isinstance(child, TaskGroup):
                leaves.extend(child.flatten_leaves())
            else:
                leaves.append(child)
        return leaves

    def tasks(self) -> list[Task]:
        return [leaf.task for leaf in self.flatten_leaves()]

    def set_group_status(self, status: TaskStatus | str) -> None:
        """把子树中所有叶子设为同一状态

        Raises:
            InvalidStatusError: status 不在 TaskStatus 枚举内
        """
        new_status = TaskStatus.parse(status)
        for leaf in self.flatten_leaves():
            leaf.set_status(new_status)

    def _contains(self, node: "TaskNode") -> bool:
        # 按对象身份查找，不依赖 ID 唯一
        for child in self.children:
            if child is node:
                return True
            if isinstance(child, TaskGroup) and child._contains(node):
                return True
        return False


TaskNode = TaskLeaf | TaskGroup


class TaskGroupFactory:
    """分组工厂 -- 为分组分配递增 ID"""

    def __init__(self, prefix: str = "group") -> None:
        self._prefix = prefix
        self._last_group_id = 0

    def next_id(self) -> str:
        self._last_group_id += 1
        return f"{self._prefix}-{self._last_group_id}"

    def create_group(self, title: str, color: str = "primary") -> TaskGroup:
        return TaskGroup(self.next_id(), title, color)

    def create_group_from_filter(
        self,
        title: str,
        tasks: Iterable[Task],
        predicate: Callable[[Task], bool],
        color: str = "primary",
    ) -> TaskGroup:
        """创建分组，并为每个满足 predicate 的任务添加叶子"""
        group = self.create_group(title, color)
        for task in tasks:
            if predicate(task):
                group.add(TaskLeaf(task))
        return group

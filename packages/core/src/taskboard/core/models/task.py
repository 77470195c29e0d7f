"""Task 数据模型

单一 Task 类型 + 分类枚举字段；分类相关的展示差异通过查表获得。
"""

from datetime import UTC, datetime

import structlog
from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID

from .enums import TaskCategory, TaskStatus

log = structlog.get_logger()


class Task(BaseModel):
    """Task 数据模型

    只能通过 set_status 修改状态；task_id 与 created_at 创建后不可变。
    """

    model_config = ConfigDict(validate_assignment=True)

    task_id: str = Field(frozen=True, description="唯一标识，默认 ULID 格式")
    title: str = Field(description="任务标题")
    description: str = Field(default="", description="任务描述")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="当前状态")
    category: TaskCategory = Field(default=TaskCategory.GENERIC, description="任务分类")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        frozen=True,
        description="创建时间",
    )

    @classmethod
    def create(
        cls,
        title: str,
        description: str = "",
        category: TaskCategory | str = TaskCategory.GENERIC,
        task_id: str | None = None,
    ) -> "Task":
        """创建任务，未指定 task_id 时生成 ULID"""
        return cls(
            task_id=task_id or str(ULID()),
            title=title,
            description=description,
            category=TaskCategory.parse(category),
        )

    @property
    def type_label(self) -> str:
        """分类的展示名称"""
        return self.category.label

    @property
    def status_label(self) -> str:
        return self.status.label

    @property
    def presentation_tag(self) -> str:
        return self.category.tag

    def set_status(self, status: TaskStatus | str) -> None:
        """覆盖当前状态（不校验流转合法性）

        Raises:
            InvalidStatusError: status 不在 TaskStatus 枚举内
        """
        new_status = TaskStatus.parse(status)
        log.debug(
            "task_status_changed",
            task_id=self.task_id,
            from_status=self.status,
            to_status=new_status,
        )
        self.status = new_status

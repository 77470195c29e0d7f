"""全局 pytest 配置 -- 共享任务样本 fixture"""

from datetime import UTC, datetime, timedelta

import pytest
from taskboard.core.models import Task, TaskCategory, TaskStatus


def make_task(
    task_id: str,
    title: str,
    *,
    description: str = "",
    status: TaskStatus = TaskStatus.PENDING,
    category: TaskCategory = TaskCategory.GENERIC,
    minutes: int = 0,
) -> Task:
    """构造创建时间可控的 Task（基准时间 + minutes 分钟）"""
    return Task(
        task_id=task_id,
        title=title,
        description=description,
        status=status,
        category=category,
        created_at=datetime(2024, 1, 1, tzinfo=UTC) + timedelta(minutes=minutes),
    )


@pytest.fixture
def task_factory():
    """提供 make_task 构造函数"""
    return make_task


@pytest.fixture
def sample_tasks() -> list[Task]:
    """四个分类/状态/时间各不相同的任务"""
    return [
        make_task("t1", "Banana", category=TaskCategory.WORK, minutes=10),
        make_task(
            "t2",
            "apple",
            description="buy fruit",
            status=TaskStatus.COMPLETED,
            category=TaskCategory.PERSONAL,
            minutes=30,
        ),
        make_task(
            "t3",
            "Cherry",
            status=TaskStatus.IN_PROGRESS,
            category=TaskCategory.STUDY,
            minutes=20,
        ),
        make_task("t4", "Shop", category=TaskCategory.PERSONAL, minutes=0),
    ]

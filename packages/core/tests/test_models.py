"""Domain Models 单元测试

测试内容：
1. 枚举值与解析
2. Task 默认值、分类标签、状态修改
3. Pydantic 模型校验
"""

from datetime import datetime

import pytest
from pydantic import ValidationError
from taskboard.core.exceptions import InvalidStatusError, UnknownCategoryError
from taskboard.core.models import (
    CATEGORY_TAGS,
    COMPLETED_FIRST_RANKS,
    PENDING_FIRST_RANKS,
    Task,
    TaskCategory,
    TaskStatus,
)


class TestEnums:
    """枚举序列化/解析测试"""

    def test_task_status_values(self):
        """TaskStatus 枚举值正确"""
        assert TaskStatus.PENDING == "PENDING"
        assert TaskStatus.IN_PROGRESS == "IN_PROGRESS"
        assert TaskStatus.COMPLETED == "COMPLETED"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("PENDING", TaskStatus.PENDING),
            ("in_progress", TaskStatus.IN_PROGRESS),
            ("In Progress", TaskStatus.IN_PROGRESS),
            ("completed", TaskStatus.COMPLETED),
            (TaskStatus.COMPLETED, TaskStatus.COMPLETED),
        ],
    )
    def test_status_parse(self, raw, expected):
        """按值或标签解析状态，不区分大小写"""
        assert TaskStatus.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["Concluída", "done", "", 3, None])
    def test_status_parse_rejects_unknown(self, raw):
        """未知状态抛出 InvalidStatusError"""
        with pytest.raises(InvalidStatusError):
            TaskStatus.parse(raw)

    def test_invalid_status_is_value_error(self):
        """InvalidStatusError 同时是 ValueError"""
        with pytest.raises(ValueError):
            TaskStatus.parse("nope")

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("work", TaskCategory.WORK),
            ("Work", TaskCategory.WORK),
            ("volunteer work", TaskCategory.VOLUNTEER),
            ("Generic Task", TaskCategory.GENERIC),
        ],
    )
    def test_category_parse(self, raw, expected):
        """按值或标签解析分类"""
        assert TaskCategory.parse(raw) is expected

    def test_category_parse_rejects_unknown(self):
        """未知分类抛出 UnknownCategoryError"""
        with pytest.raises(UnknownCategoryError):
            TaskCategory.parse("hobby")

    def test_every_category_has_tag(self):
        """每个分类都有展示标签"""
        assert set(CATEGORY_TAGS) == set(TaskCategory)

    def test_rank_tables_are_total(self):
        """状态排序权重覆盖全部状态"""
        assert set(PENDING_FIRST_RANKS) == set(TaskStatus)
        assert set(COMPLETED_FIRST_RANKS) == set(TaskStatus)


class TestTask:
    """Task 模型测试"""

    def test_defaults(self):
        """默认状态 PENDING，默认分类 GENERIC"""
        task = Task(task_id="1", title="Write", description="draft")
        assert task.status == TaskStatus.PENDING
        assert task.category == TaskCategory.GENERIC
        assert task.type_label == "Generic Task"
        assert isinstance(task.created_at, datetime)
        assert task.created_at.tzinfo is not None

    def test_create_generates_ulid(self):
        """create 未指定 ID 时生成 26 位 ULID"""
        a = Task.create("A")
        b = Task.create("B")
        assert len(a.task_id) == 26
        assert a.task_id != b.task_id

    def test_create_with_category_string(self):
        """create 接受分类字符串"""
        task = Task.create("Deploy", category="work", task_id="w1")
        assert task.task_id == "w1"
        assert task.category == TaskCategory.WORK
        assert task.type_label == "Work"
        assert task.presentation_tag == "task-work"

    @pytest.mark.parametrize(
        "category,label",
        [
            (TaskCategory.PERSONAL, "Personal"),
            (TaskCategory.WORK, "Work"),
            (TaskCategory.STUDY, "Study"),
            (TaskCategory.VOLUNTEER, "Volunteer Work"),
        ],
    )
    def test_type_label_per_category(self, category, label):
        """分类标签查表获得"""
        assert Task(task_id="x", title="x", category=category).type_label == label

    def test_set_status_any_transition(self):
        """状态可在任意值之间直接切换"""
        task = Task(task_id="1", title="t")
        task.set_status(TaskStatus.COMPLETED)
        assert task.status == TaskStatus.COMPLETED
        task.set_status("Pending")
        assert task.status == TaskStatus.PENDING
        assert task.status_label == "Pending"

    def test_set_status_rejects_unknown(self):
        """未知状态被拒绝，原状态保留"""
        task = Task(task_id="1", title="t")
        with pytest.raises(InvalidStatusError):
            task.set_status("archived")
        assert task.status == TaskStatus.PENDING

    def test_created_at_is_frozen(self):
        """created_at 创建后不可修改"""
        task = Task(task_id="1", title="t")
        with pytest.raises(ValidationError):
            task.created_at = datetime(2000, 1, 1)

    def test_task_id_is_frozen(self):
        """task_id 是节点查找的标识，创建后不可修改"""
        task = Task(task_id="1", title="t")
        with pytest.raises(ValidationError):
            task.task_id = "2"
        assert task.task_id == "1"

    def test_status_assignment_validated(self):
        """直接赋值也会校验状态"""
        task = Task(task_id="1", title="t")
        with pytest.raises(ValidationError):
            task.status = "archived"

    def test_missing_title_rejected(self):
        """缺少必填字段时校验失败"""
        with pytest.raises(ValidationError):
            Task(task_id="1")

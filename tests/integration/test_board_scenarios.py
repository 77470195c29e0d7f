"""端到端场景测试 -- 看板 + 组合树 + 策略 + 偏好设置

场景：
1. Work 分组（A 待办、B 已完成、Sub{C 待办}）整体标记完成
2. 偏好变更驱动可见列表，reset 后恢复
3. 环境变量配置注入看板
"""

from taskboard.core import (
    PreferenceChange,
    TaskBoard,
    TaskCategory,
    TaskStatus,
    WILDCARD_KEY,
    load_config,
)


class TestWorkGroupScenario:
    """Work 分组场景"""

    def test_group_completion_flow(self):
        """计数、批量完成、移除后查找"""
        board = TaskBoard()
        work = board.create_group("Work")
        a = board.create_task("A", category=TaskCategory.WORK, group_id=work.node_id)
        b = board.create_task("B", category=TaskCategory.WORK, group_id=work.node_id)
        sub = board.create_group("Sub", parent_id=work.node_id)
        c = board.create_task("C", category=TaskCategory.WORK, group_id=sub.node_id)
        board.create_task("Shop", category=TaskCategory.PERSONAL)
        board.set_status(b.task_id, TaskStatus.COMPLETED)

        assert work.count_tasks() == 3
        assert board.task_count() == 4

        board.set_status(work.node_id, TaskStatus.COMPLETED)
        assert [leaf.title for leaf in work.flatten_leaves()] == ["A", "B", "C"]
        assert {leaf.status for leaf in work.flatten_leaves()} == {TaskStatus.COMPLETED}

        board.sorter.set_filter_strategy("type:Work")
        board.sorter.set_sort_strategy("alpha-za")
        assert [t.title for t in board.visible_tasks()] == ["C", "B", "A"]

        board.sorter.set_filter_strategy("pending")
        assert [t.title for t in board.visible_tasks()] == ["Shop"]

        assert board.remove(c.task_id) is True
        assert board.find(c.task_id) is None
        assert work.count_tasks() == len(work.flatten_leaves()) == 2
        assert board.find(a.task_id) is not None


class TestPreferenceDrivenView:
    """偏好设置驱动可见列表"""

    def test_show_completed_toggle_and_reset(self):
        """隐藏已完成任务后 reset 恢复显示，通知按顺序到达"""
        board = TaskBoard()
        changes: list[PreferenceChange] = []
        board.preferences.subscribe(changes.append)

        done = board.create_task("done")
        board.create_task("open")
        board.set_status(done.task_id, "Completed")

        assert board.preferences.set("show_completed_tasks", False) is True
        assert [t.title for t in board.visible_tasks()] == ["open"]

        board.preferences.reset_to_defaults()
        assert len(board.visible_tasks()) == 2
        assert [change.key for change in changes] == ["show_completed_tasks", WILDCARD_KEY]


class TestEnvironmentConfig:
    """环境变量配置注入"""

    def test_env_config_applies_to_board(self, monkeypatch):
        """默认策略与偏好来自环境变量"""
        monkeypatch.setenv("TASKBOARD_DEFAULT_SORT", "alpha-az")
        monkeypatch.setenv("TASKBOARD_DEFAULT_FILTER", "search:report")
        monkeypatch.setenv("TASKBOARD_THEME", "dark")
        monkeypatch.delenv("TASKBOARD_LANGUAGE", raising=False)
        monkeypatch.delenv("TASKBOARD_NOTIFICATION_TIMEOUT_MS", raising=False)

        board = TaskBoard(load_config())
        board.create_task("Weekly report")
        board.create_task("Annual Report", "numbers")
        board.create_task("Groceries")

        assert [t.title for t in board.visible_tasks()] == ["Annual Report", "Weekly report"]
        assert board.preferences.presentation.dark_theme is True

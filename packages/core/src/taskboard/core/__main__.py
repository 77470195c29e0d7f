"""CLI 入口模块 -- python -m taskboard.core <command>

支持的命令：
  demo [排序键] [筛选键]  构建示例看板并输出处理后的任务列表
  strategies             列出已注册的排序/筛选键
"""

import sys

from .board import TaskBoard
from .config import load_config
from .logging_config import setup_logging
from .models import TaskCategory, TaskStatus

USAGE = """用法: python -m taskboard.core <command>
命令:
  demo [sort] [filter]  构建示例看板并输出处理后的任务列表
  strategies            列出已注册的排序/筛选键"""


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print(USAGE)
        sys.exit(1)

    setup_logging()
    command = sys.argv[1]

    if command == "demo":
        sys.exit(run_demo(sys.argv[2:]))
    elif command == "strategies":
        list_strategies()
    else:
        print(f"未知命令: {command}")
        print("可用命令: demo, strategies")
        sys.exit(1)


def build_demo_board() -> TaskBoard:
    """示例看板：Work 分组含子分组 Sub，外加一个个人任务"""
    board = TaskBoard(load_config())
    work = board.create_group("Work", color="info")
    if work is None:
        raise RuntimeError("无法在根分组下创建 Work 分组")
    sub = board.create_group("Sub", parent_id=work.node_id)
    if sub is None:
        raise RuntimeError("无法在 Work 分组下创建 Sub 分组")

    board.create_task("Write report", "quarterly numbers", TaskCategory.WORK, work.node_id)
    review = board.create_task("Review PR", "", TaskCategory.WORK, work.node_id)
    board.create_task("Prepare slides", "", TaskCategory.STUDY, sub.node_id)
    board.create_task("Shop", "groceries", TaskCategory.PERSONAL)
    if review is not None:
        review.set_status(TaskStatus.COMPLETED)
    return board


def run_demo(args: list[str]) -> int:
    board = build_demo_board()
    if len(args) > 0 and not board.sorter.set_sort_strategy(args[0]):
        print(f"未知排序键: {args[0]}")
        return 1
    if len(args) > 1 and not board.sorter.set_filter_strategy(args[1]):
        print(f"未知筛选键: {args[1]}")
        return 1

    info = board.sorter.current_strategies_info()
    print(f"排序: {info['sort'].name} / 筛选: {info['filter'].name}")
    print(f"任务总数: {board.task_count()}")
    for task in board.visible_tasks():
        print(f"  [{task.status_label:<11}] {task.title} ({task.type_label})")
    return 0


def list_strategies() -> None:
    sorter = TaskBoard().sorter
    print("排序键:")
    for info in sorter.available_sort_strategies():
        print(f"  {info.key:<16} {info.name}")
    print("筛选键:")
    for info in sorter.available_filter_strategies():
        print(f"  {info.key:<16} {info.name}")
    for kind in sorter.filter_kinds():
        if kind.parameterized:
            print(f"  {kind.key_pattern:<16} (带参数)")


if __name__ == "__main__":
    main()

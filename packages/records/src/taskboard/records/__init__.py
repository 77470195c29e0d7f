"""taskboard.records -- 项目跟踪数据定义

Client / Project / TaskRecord / Employee 记录模型与 SQLite 表结构。
"""

from .models import Client, Employee, Project, TaskRecord
from .schema import TABLES, init_schema

__all__ = [
    "Client",
    "Project",
    "TaskRecord",
    "Employee",
    "TABLES",
    "init_schema",
]

"""项目跟踪 SQLite 表结构

四张表 DDL，外键内联声明。只负责建表，不提供读写，也不校验数据。
使用 aiosqlite 异步操作。
"""

import aiosqlite

# clients 表 DDL
_CLIENTS_DDL = """
CREATE TABLE IF NOT EXISTS clients (
    cnpj            INTEGER PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    address         VARCHAR(255) NOT NULL,
    phone           VARCHAR(255) NOT NULL,
    contact_person  VARCHAR(255) NOT NULL,
    email           VARCHAR(255) NOT NULL
);
"""

# projects 表 DDL
_PROJECTS_DDL = """
CREATE TABLE IF NOT EXISTS projects (
    project_id   INTEGER PRIMARY KEY,
    manager      VARCHAR(255) NOT NULL,
    start_date   DATE NOT NULL,
    end_date     DATE NOT NULL,
    description  VARCHAR(255) NOT NULL,
    client_cnpj  INTEGER NOT NULL,

    FOREIGN KEY (client_cnpj) REFERENCES clients(cnpj)
);
"""

# task_records 表 DDL
_TASK_RECORDS_DDL = """
CREATE TABLE IF NOT EXISTS task_records (
    record_id   INTEGER PRIMARY KEY,
    name        VARCHAR(255) NOT NULL,
    hours       BIGINT NOT NULL,
    assignee    VARCHAR(255) NOT NULL,
    project_id  INTEGER NOT NULL,

    FOREIGN KEY (project_id) REFERENCES projects(project_id)
);
"""

# employees 表 DDL
_EMPLOYEES_DDL = """
CREATE TABLE IF NOT EXISTS employees (
    registration    INTEGER PRIMARY KEY,
    name            VARCHAR(255) NOT NULL,
    role            VARCHAR(255) NOT NULL,
    phone           VARCHAR(255) NOT NULL,
    email           VARCHAR(255) NOT NULL,
    task_record_id  INTEGER NOT NULL,

    FOREIGN KEY (task_record_id) REFERENCES task_records(record_id)
);
"""

# 按外键依赖顺序排列
TABLES: dict[str, str] = {
    "clients": _CLIENTS_DDL,
    "projects": _PROJECTS_DDL,
    "task_records": _TASK_RECORDS_DDL,
    "employees": _EMPLOYEES_DDL,
}


async def init_schema(conn: aiosqlite.Connection) -> None:
    """开启外键约束并按依赖顺序建表

    Args:
        conn: aiosqlite 数据库连接
    """
    await conn.execute("PRAGMA foreign_keys = ON;")
    for ddl in TABLES.values():
        await conn.execute(ddl)
    await conn.commit()

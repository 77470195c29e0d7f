"""structlog 配置模块

dev 模式：彩色控制台输出；json 模式：每行一条 JSON。
CLI 入口调用一次；库代码只使用 structlog.get_logger()。
"""

import logging
import os

import structlog

LOG_FORMATS = ("dev", "json")


def _select_renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """初始化 structlog 与标准库 logging

    Args:
        log_format: "dev" 或 "json"，None 时读取 TASKBOARD_LOG_FORMAT（默认 dev）
        log_level: 日志级别名，None 时读取 TASKBOARD_LOG_LEVEL（默认 INFO）
    """
    log_format = log_format or os.environ.get("TASKBOARD_LOG_FORMAT", "dev")
    log_level = log_level or os.environ.get("TASKBOARD_LOG_LEVEL", "INFO")
    if log_format not in LOG_FORMATS:
        log_format = "dev"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_select_renderer(log_format),
            foreign_pre_chain=pre_chain,
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

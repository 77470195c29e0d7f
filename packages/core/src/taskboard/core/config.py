"""TaskBoardConfig -- 配置加载

从环境变量加载默认策略键与偏好设置默认值。

环境变量:
    TASKBOARD_DEFAULT_SORT: 初始排序键（默认 date-newest）
    TASKBOARD_DEFAULT_FILTER: 初始筛选键（默认 all）
    TASKBOARD_THEME: 偏好默认主题（light/dark）
    TASKBOARD_LANGUAGE: 偏好默认语言
    TASKBOARD_NOTIFICATION_TIMEOUT_MS: 偏好默认通知停留时间（毫秒）
    TASKBOARD_LOG_FORMAT / TASKBOARD_LOG_LEVEL: 见 logging_config
"""

import os

import structlog
from pydantic import BaseModel, Field, ValidationError

from .preferences import PreferenceValues
from .strategy import DEFAULT_FILTER_KEY, DEFAULT_SORT_KEY

log = structlog.get_logger()

# 环境变量 -> PreferenceValues 字段
_PREFERENCE_ENV_VARS: dict[str, str] = {
    "TASKBOARD_THEME": "theme",
    "TASKBOARD_LANGUAGE": "language",
    "TASKBOARD_NOTIFICATION_TIMEOUT_MS": "notification_timeout_ms",
}


class TaskBoardConfig(BaseModel):
    """应用配置"""

    default_sort: str = Field(default=DEFAULT_SORT_KEY, description="初始排序键")
    default_filter: str = Field(default=DEFAULT_FILTER_KEY, description="初始筛选键")
    preferences: PreferenceValues = Field(
        default_factory=PreferenceValues,
        description="偏好设置默认值",
    )


def load_config() -> TaskBoardConfig:
    """从环境变量加载配置

    非法取值逐个记录 warning 并使用该项默认值，其余变量照常生效，不阻塞启动。

    Returns:
        TaskBoardConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("TASKBOARD_DEFAULT_SORT"):
        kwargs["default_sort"] = val

    if val := os.environ.get("TASKBOARD_DEFAULT_FILTER"):
        kwargs["default_filter"] = val

    preferences = PreferenceValues()
    for env_var, field in _PREFERENCE_ENV_VARS.items():
        if not (val := os.environ.get(env_var)):
            continue
        try:
            preferences = PreferenceValues.model_validate(
                {**preferences.model_dump(), field: val}
            )
        except ValidationError as exc:
            log.warning(
                "invalid_preference_config",
                env_var=env_var,
                value=val,
                fallback=getattr(preferences, field),
                error_count=exc.error_count(),
            )
    kwargs["preferences"] = preferences

    return TaskBoardConfig(**kwargs)

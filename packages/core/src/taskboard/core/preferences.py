"""Preferences -- 界面偏好设置存储

固定的一组命名设置 + 默认值。实例由应用入口显式创建并传递（不是全局单例），
每次成功修改都会重新推导展示状态并按订阅顺序通知观察者。
"""

from collections.abc import Callable
from typing import Any, Literal

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .models import TaskCategory

log = structlog.get_logger()

# reset_to_defaults 通知使用的通配键
WILDCARD_KEY = "*"


class PreferenceValues(BaseModel):
    """全部偏好设置及其默认值"""

    model_config = ConfigDict(extra="forbid")

    theme: Literal["light", "dark"] = Field(default="light", description="界面主题")
    language: str = Field(default="pt-BR", description="界面语言")
    show_completed_tasks: bool = Field(default=True, description="是否显示已完成任务")
    auto_save: bool = Field(default=True, description="自动保存")
    notification_timeout_ms: int = Field(
        default=3000, ge=0, description="通知停留时间（毫秒）"
    )
    max_notifications_history: int = Field(default=10, ge=0, description="通知历史上限")
    default_task_color: str = Field(default="blue", description="新任务默认颜色")
    default_task_type: TaskCategory = Field(
        default=TaskCategory.PERSONAL, description="新任务默认分类"
    )
    sidebar_collapsed: bool = Field(default=False, description="侧边栏是否折叠")


PREFERENCE_KEYS: tuple[str, ...] = tuple(PreferenceValues.model_fields)


class PreferenceChange(BaseModel):
    """变更通知：key 为通配键时 value 为 None"""

    key: str
    value: Any = None


class PresentationState(BaseModel):
    """由偏好设置推导出的展示状态，供展示层直接使用"""

    dark_theme: bool
    lang: str
    toast_delay_ms: int
    sidebar_collapsed: bool

    @classmethod
    def derive(cls, values: PreferenceValues) -> "PresentationState":
        return cls(
            dark_theme=values.theme == "dark",
            lang=values.language,
            toast_delay_ms=values.notification_timeout_ms,
            sidebar_collapsed=values.sidebar_collapsed,
        )


PreferenceListener = Callable[[PreferenceChange], None]


class Preferences:
    """偏好设置存储

    只能修改 PreferenceValues 中已定义的键；未知键或校验失败返回 False，
    状态与观察者都不受影响。观察者抛出的异常直接传播给调用方。
    """

    def __init__(self, defaults: PreferenceValues | None = None) -> None:
        """
        Args:
            defaults: 本实例的默认值，None 时使用 PreferenceValues()
        """
        self._defaults = defaults if defaults is not None else PreferenceValues()
        self._values = self._defaults.model_copy()
        self._listeners: list[PreferenceListener] = []
        self.presentation = PresentationState.derive(self._values)

    def get(self, key: str) -> Any:
        """读取设置，未知键返回 None"""
        if key not in PREFERENCE_KEYS:
            return None
        return getattr(self._values, key)

    def set(self, key: str, value: Any) -> bool:
        if key not in PREFERENCE_KEYS:
            log.debug("preference_unknown_key", key=key)
            return False

        try:
            updated = PreferenceValues.model_validate(
                {**self._values.model_dump(), key: value}
            )
        except ValidationError as exc:
            log.warning(
                "preference_invalid_value",
                key=key,
                value=value,
                error_count=exc.error_count(),
            )
            return False

        self._values = updated
        self._notify(key, getattr(updated, key))
        return True

    def all(self) -> dict[str, Any]:
        """返回全部设置的副本"""
        return self._values.model_dump()

    def reset_to_defaults(self) -> None:
        self._values = self._defaults.model_copy()
        self._notify(WILDCARD_KEY, None)

    def subscribe(self, listener: PreferenceListener) -> Callable[[], None]:
        """注册观察者

        Returns:
            取消订阅的函数（重复调用无副作用）
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, key: str, value: Any) -> None:
        # 先推导展示状态，观察者读到的是修改后的状态
        self.presentation = PresentationState.derive(self._values)
        log.info("preference_changed", key=key, value=value)
        change = PreferenceChange(key=key, value=value)
        for listener in list(self._listeners):
            listener(change)

"""排序/筛选策略 -- TaskSorterFilterer

排序策略：按字符串键注册的无状态排序函数。
筛选策略：以数据描述的筛选器（ShowAll / ByStatus / ByCategory / BySearchText），
按 kind 区分；"type:<分类>" 与 "search:<文本>" 两种字符串键会被解析为
带参数的描述符，不进入静态注册表。

process() 固定先筛选后排序，返回新列表，不修改输入。
"""

import unicodedata
from collections.abc import Callable, Iterable, Sequence
from typing import Annotated, Any, Literal, Protocol

import structlog
from pydantic import BaseModel, Field, TypeAdapter

from .exceptions import UnknownCategoryError
from .models import (
    COMPLETED_FIRST_RANKS,
    PENDING_FIRST_RANKS,
    Task,
    TaskCategory,
    TaskStatus,
)

log = structlog.get_logger()

DEFAULT_SORT_KEY = "date-newest"
DEFAULT_FILTER_KEY = "all"

TYPE_FILTER_PREFIX = "type:"
SEARCH_FILTER_PREFIX = "search:"


def collation_key(text: str) -> tuple[str, str]:
    """近似 locale 感知的比较键：主键忽略重音与大小写；次键大小写互换，相同字母时小写在前"""
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), text.swapcase()


# ---------------------------------------------------------------------------
# 排序策略
# ---------------------------------------------------------------------------


class SortStrategy(Protocol):
    """排序策略接口"""

    name: str

    def sort(self, tasks: Iterable[Task]) -> list[Task]: ...


class KeySortStrategy:
    """基于排序键的稳定排序（降序同样保持相等元素的原始顺序）"""

    def __init__(
        self,
        name: str,
        key: Callable[[Task], Any],
        reverse: bool = False,
    ) -> None:
        self.name = name
        self._key = key
        self._reverse = reverse

    def __repr__(self) -> str:
        return f"KeySortStrategy({self.name!r}, reverse={self._reverse})"

    def sort(self, tasks: Iterable[Task]) -> list[Task]:
        return sorted(tasks, key=self._key, reverse=self._reverse)


def _default_sort_strategies() -> dict[str, SortStrategy]:
    return {
        "date-newest": KeySortStrategy(
            "Newest first", lambda t: t.created_at, reverse=True
        ),
        "date-oldest": KeySortStrategy("Oldest first", lambda t: t.created_at),
        "alpha-az": KeySortStrategy("Title (A-Z)", lambda t: collation_key(t.title)),
        "alpha-za": KeySortStrategy(
            "Title (Z-A)", lambda t: collation_key(t.title), reverse=True
        ),
        "status-pending": KeySortStrategy(
            "Pending first", lambda t: PENDING_FIRST_RANKS[t.status]
        ),
        "status-complete": KeySortStrategy(
            "Completed first", lambda t: COMPLETED_FIRST_RANKS[t.status]
        ),
        "type": KeySortStrategy("Task type", lambda t: collation_key(t.type_label)),
    }


# ---------------------------------------------------------------------------
# 筛选描述符
# ---------------------------------------------------------------------------

# 状态筛选的静态键
_STATUS_FILTER_KEYS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "pending",
    TaskStatus.IN_PROGRESS: "in-progress",
    TaskStatus.COMPLETED: "completed",
}


class _FilterBase(BaseModel):
    """筛选描述符公共部分，子类提供 matches"""

    def filter(self, tasks: Iterable[Task]) -> list[Task]:
        return [task for task in tasks if self.matches(task)]


class ShowAll(_FilterBase):
    """不筛选"""

    kind: Literal["all"] = "all"

    @property
    def key(self) -> str:
        return "all"

    @property
    def name(self) -> str:
        return "All tasks"

    def matches(self, task: Task) -> bool:
        return True


class ByStatus(_FilterBase):
    """按状态筛选"""

    kind: Literal["status"] = "status"
    status: TaskStatus

    @property
    def key(self) -> str:
        return _STATUS_FILTER_KEYS[self.status]

    @property
    def name(self) -> str:
        return self.status.label

    def matches(self, task: Task) -> bool:
        return task.status == self.status


class ByCategory(_FilterBase):
    """按分类筛选"""

    kind: Literal["category"] = "category"
    category: TaskCategory

    @property
    def key(self) -> str:
        return f"{TYPE_FILTER_PREFIX}{self.category.value}"

    @property
    def name(self) -> str:
        return f"Type: {self.category.label}"

    def matches(self, task: Task) -> bool:
        return task.category == self.category


class BySearchText(_FilterBase):
    """标题或描述包含搜索文本（不区分大小写）"""

    kind: Literal["search"] = "search"
    text: str

    @property
    def key(self) -> str:
        return f"{SEARCH_FILTER_PREFIX}{self.text}"

    @property
    def name(self) -> str:
        return f'Search: "{self.text}"'

    def matches(self, task: Task) -> bool:
        needle = self.text.casefold()
        return needle in task.title.casefold() or needle in task.description.casefold()


FilterDescriptor = Annotated[
    ShowAll | ByStatus | ByCategory | BySearchText,
    Field(discriminator="kind"),
]

_filter_adapter = TypeAdapter(FilterDescriptor)


def parse_filter_descriptor(data: dict[str, Any]) -> FilterDescriptor:
    """从字典（如 model_dump() 的输出）还原筛选描述符"""
    return _filter_adapter.validate_python(data)


def _default_filters() -> dict[str, FilterDescriptor]:
    return {
        "all": ShowAll(),
        "pending": ByStatus(status=TaskStatus.PENDING),
        "in-progress": ByStatus(status=TaskStatus.IN_PROGRESS),
        "completed": ByStatus(status=TaskStatus.COMPLETED),
    }


# ---------------------------------------------------------------------------
# 上下文
# ---------------------------------------------------------------------------


class StrategyInfo(BaseModel):
    """策略键与展示名称"""

    key: str
    name: str


class FilterKindInfo(BaseModel):
    """筛选描述符种类（含带参数的种类）"""

    kind: str
    key_pattern: str = Field(description="字符串键格式，如 type:<category>")
    parameterized: bool


FILTER_KINDS: list[FilterKindInfo] = [
    FilterKindInfo(kind="all", key_pattern="all", parameterized=False),
    FilterKindInfo(
        kind="status",
        key_pattern="|".join(_STATUS_FILTER_KEYS.values()),
        parameterized=False,
    ),
    FilterKindInfo(
        kind="category",
        key_pattern=f"{TYPE_FILTER_PREFIX}<category>",
        parameterized=True,
    ),
    FilterKindInfo(
        kind="search",
        key_pattern=f"{SEARCH_FILTER_PREFIX}<text>",
        parameterized=True,
    ),
]


class TaskSorterFilterer:
    """排序/筛选上下文 -- 持有策略注册表与当前选中的策略

    选择未知键时返回 False 并保持当前策略不变。
    """

    def __init__(
        self,
        default_sort: str = DEFAULT_SORT_KEY,
        default_filter: str = DEFAULT_FILTER_KEY,
    ) -> None:
        """初始化上下文

        Args:
            default_sort: 初始排序键，未知时回退到 date-newest
            default_filter: 初始筛选键（可为 type:/search: 形式），未知时回退到 all
        """
        self._sort_strategies: dict[str, SortStrategy] = _default_sort_strategies()
        self._filters: dict[str, FilterDescriptor] = _default_filters()

        self._current_sort_key = DEFAULT_SORT_KEY
        self._current_sort: SortStrategy = self._sort_strategies[DEFAULT_SORT_KEY]
        self._current_filter_key = DEFAULT_FILTER_KEY
        self._current_filter: FilterDescriptor = self._filters[DEFAULT_FILTER_KEY]

        if not self.set_sort_strategy(default_sort):
            log.warning("default_sort_fallback", requested=default_sort, fallback=DEFAULT_SORT_KEY)
        if not self.set_filter_strategy(default_filter):
            log.warning("default_filter_fallback", requested=default_filter, fallback=DEFAULT_FILTER_KEY)

    # ---- 注册 ----

    def register_sort_strategy(self, key: str, strategy: SortStrategy) -> None:
        """注册（或覆盖）一个排序策略"""
        self._sort_strategies[key] = strategy

    def register_filter(self, key: str, descriptor: FilterDescriptor) -> None:
        """注册（或覆盖）一个静态筛选键"""
        self._filters[key] = descriptor

    # ---- 选择 ----

    def set_sort_strategy(self, key: str) -> bool:
        strategy = self._sort_strategies.get(key)
        if strategy is None:
            log.warning("sort_strategy_unknown", key=key)
            return False
        self._current_sort_key = key
        self._current_sort = strategy
        return True

    def set_filter_strategy(self, key: str) -> bool:
        """按键选择筛选策略

        行为规则:
            1. 静态注册表中的键 -> 直接使用
            2. "type:<分类>" -> ByCategory（分类未知时失败）
            3. "search:<文本>" -> BySearchText（首个冒号之后的全部内容）
            4. 其余 -> 失败
        """
        descriptor = self._filters.get(key)
        if descriptor is None:
            descriptor = self._parse_parameterized(key)
        if descriptor is None:
            log.warning("filter_strategy_unknown", key=key)
            return False
        self._current_filter_key = key
        self._current_filter = descriptor
        return True

    def set_filter(self, descriptor: FilterDescriptor) -> None:
        self._current_filter_key = descriptor.key
        self._current_filter = descriptor

    @staticmethod
    def _parse_parameterized(key: str) -> FilterDescriptor | None:
        if key.startswith(TYPE_FILTER_PREFIX):
            raw = key[len(TYPE_FILTER_PREFIX):]
            try:
                return ByCategory(category=TaskCategory.parse(raw))
            except UnknownCategoryError:
                return None
        if key.startswith(SEARCH_FILTER_PREFIX):
            return BySearchText(text=key[len(SEARCH_FILTER_PREFIX):])
        return None

    @property
    def current_sort_key(self) -> str:
        return self._current_sort_key

    @property
    def current_filter_key(self) -> str:
        return self._current_filter_key

    @property
    def current_filter(self) -> FilterDescriptor:
        return self._current_filter

    # ---- 应用 ----

    def process(self, tasks: Sequence[Task]) -> list[Task]:
        """先筛选后排序，返回新列表"""
        filtered = self._current_filter.filter(tasks)
        return self._current_sort.sort(filtered)

    # ---- 查询 ----

    def available_sort_strategies(self) -> list[StrategyInfo]:
        return [
            StrategyInfo(key=key, name=strategy.name)
            for key, strategy in self._sort_strategies.items()
        ]

    def available_filter_strategies(self) -> list[StrategyInfo]:
        """静态注册的筛选键（不含 type:/search: 形式）"""
        return [
            StrategyInfo(key=key, name=descriptor.name)
            for key, descriptor in self._filters.items()
        ]

    def filter_kinds(self) -> list[FilterKindInfo]:
        return list(FILTER_KINDS)

    def current_strategies_info(self) -> dict[str, StrategyInfo]:
        return {
            "sort": StrategyInfo(key=self._current_sort_key, name=self._current_sort.name),
            "filter": StrategyInfo(
                key=self._current_filter_key, name=self._current_filter.name
            ),
        }

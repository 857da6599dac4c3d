"""Data model shared by the grouping pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Protocol, TypeAlias, runtime_checkable

UNGROUPED = "ungrouped"


@runtime_checkable
class Item(Protocol):
    """A renderable record (e.g. an open buffer) with a mutable group id."""

    id: Any
    name: str
    group: int | None

    def current(self) -> bool: ...

    def visible(self) -> bool: ...


Matcher: TypeAlias = Callable[[Any], bool]


@dataclass
class SimpleItem:
    """Plain item used by the CLI and in tests."""

    id: Any
    name: str
    group: int | None = None
    is_current: bool = False
    is_visible: bool = False

    def current(self) -> bool:
        return self.is_current

    def visible(self) -> bool:
        return self.is_visible


@dataclass
class Group:
    id: int
    name: str
    display_name: str
    matcher: Any = None  # usually a Matcher; anything non-callable never matches
    priority: int = 0
    highlight: dict[str, Any] | None = None
    icon: str | None = None
    hidden: bool = False
    separator: Any = None  # strategy name, strategy callable, or None for pill

    @property
    def is_ungrouped(self) -> bool:
        return self.name == UNGROUPED


@dataclass
class Bucket:
    """Items assigned to one group during a single sort pass.

    Group metadata is stamped on the first insertion, so an empty bucket keeps
    ``id=None`` and only its ``priority``.
    """

    priority: int
    items: list[Any] = field(default_factory=list)
    id: int | None = None
    name: str | None = None
    display_name: str | None = None
    hidden: bool = False

    def stamp(self, group: Group) -> None:
        self.id = group.id
        self.name = group.name
        self.display_name = group.display_name
        self.priority = group.priority
        self.hidden = group.hidden

    @property
    def is_stamped(self) -> bool:
        return self.name is not None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True)
class ClickTarget:
    handler: str
    group_id: int


@dataclass
class ItemView:
    item: Any
    suppressed: bool = False
    type: Literal["item"] = "item"


@dataclass
class GroupMarker:
    type: Literal["group_start", "group_end"]
    text: str
    width: int
    group_id: int
    click: ClickTarget | None = None


RenderView: TypeAlias = ItemView | GroupMarker


@dataclass
class GroupContext:
    """Caller-owned grouping state for one tab bar.

    ``groups`` is keyed by id in registration order; ``buckets`` holds the
    result of the latest sort pass in ascending priority order.
    """

    groups: dict[int, Group] = field(default_factory=dict)
    buckets: list[Bucket] = field(default_factory=list)

    def reset(self, groups: dict[int, Group]) -> None:
        self.groups = groups
        self.buckets = []

    @property
    def ungrouped(self) -> Group | None:
        for group in self.groups.values():
            if group.is_ungrouped:
                return group
        return None

    def group_named(self, name: str) -> Group | None:
        for group in self.groups.values():
            if group.name == name:
                return group
        return None

    def bucket_for(self, group_id: int) -> Bucket | None:
        for bucket in self.buckets:
            if bucket.id == group_id:
                return bucket
        return None

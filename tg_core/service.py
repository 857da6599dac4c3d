"""Stateful facade binding one tab bar's grouping state and collaborators."""

from __future__ import annotations

from typing import Any, Callable, Mapping, MutableMapping, Sequence

from tg_core import classifier, commands, decorate, markers, partition, registry
from tg_core.click import GROUP_CLICK_HANDLER, ClickHandlers, Clickable, make_clickable
from tg_core.config import GroupDefinition, GroupsOptions, TabGroupsConfig
from tg_core.models import Group, GroupContext, RenderView
from tg_core.separators import HighlightLookup, SeparatorRegistry, WidthFn


class TabGroups:
    """Grouping pipeline for a single tab bar.

    Expected call order per redraw: ``setup`` once, then ``refresh`` (or
    ``assign_groups`` -> ``sort_by_groups`` -> ``add_markers``) for every draw.
    """

    def __init__(
        self,
        *,
        measure: WidthFn | None = None,
        separators: SeparatorRegistry | None = None,
        clickable: Clickable = make_clickable,
    ) -> None:
        self.context = GroupContext()
        self.options = GroupsOptions()
        self.highlights = HighlightLookup()
        if measure is not None:
            self.highlights.measure = measure
        self.separators = separators or SeparatorRegistry()
        self._clickable = clickable
        self.click_handlers = ClickHandlers()
        self.click_handlers.register(GROUP_CLICK_HANDLER, self.handle_group_click)

    @classmethod
    def from_config(cls, config: TabGroupsConfig, **kwargs: Any) -> "TabGroups":
        groups = cls(**kwargs)
        groups.setup(config)
        return groups

    def setup(self, config: TabGroupsConfig | None) -> None:
        """Register the config's groups; its highlight table is updated in place."""
        if config is None:
            return
        self.options = config.groups.options
        self.highlights.table = config.highlights
        registry.setup(self.context, config.groups.items, config.highlights)

    def setup_groups(
        self,
        definitions: Sequence[GroupDefinition | Mapping[str, Any]] | None,
        highlights: MutableMapping[str, Mapping[str, Any]] | None = None,
    ) -> None:
        if highlights is not None:
            self.highlights.table = highlights
        registry.setup(self.context, definitions, highlights)

    @property
    def groups(self) -> list[Group]:
        return list(self.context.groups.values())

    def get_by_id(self, group_id: int | None) -> Group | None:
        return registry.get_by_id(self.context, group_id)

    def classify(self, item: Any) -> int | None:
        return classifier.classify(self.context, item)

    def assign_groups(self, items: Sequence[Any]) -> None:
        classifier.assign_groups(self.context, items)

    def sort_by_groups(self, items: Sequence[Any]) -> list[Any]:
        return partition.sort_by_groups(self.context, items)

    def add_markers(self, items: Sequence[Any]) -> list[RenderView] | list[Any]:
        return markers.add_markers(
            self.context,
            items,
            self.highlights,
            separators=self.separators,
            clickable=self._clickable,
        )

    def refresh(self, items: Sequence[Any]) -> list[RenderView] | list[Any]:
        """Classify, sort and bracket ``items`` in one redraw pass."""
        self.assign_groups(items)
        return self.add_markers(self.sort_by_groups(items))

    def set_hidden(self, group_id: int | None, value: bool) -> None:
        commands.set_hidden(self.context, group_id, value)

    def toggle_hidden(self, group_id: int | None = None, name: str | None = None) -> None:
        commands.toggle_hidden(self.context, group_id, name)

    def command(self, group_name: str, callback: Callable[[Any], Any]) -> None:
        commands.command(self.context, group_name, callback)

    def names(self, include_empty: bool = False) -> list[str]:
        return commands.names(self.context, include_empty)

    def handle_group_click(self, group_id: int) -> None:
        commands.handle_group_click(self.context, group_id)

    def click(self, handler: str, target_id: int) -> Any:
        return self.click_handlers.dispatch(handler, target_id)

    def on_item_enter(self, item: Any) -> None:
        commands.on_item_enter(
            self.context,
            item,
            toggle_hidden_on_enter=self.options.toggle_hidden_on_enter,
        )

    def component(self, item: Any, component: str, length: int) -> tuple[str, int]:
        return decorate.group_component(self.context, item, component, length, self.highlights)

    def set_current_hl(self, item: Any, current_hl: MutableMapping[str, str]) -> None:
        decorate.set_current_hl(self.context, item, self.highlights, current_hl)

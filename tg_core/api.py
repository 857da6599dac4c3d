"""Public API surface for tg_core."""

from tg_core.classifier import assign_groups, classify
from tg_core.click import GROUP_CLICK_HANDLER, ClickHandlers, make_clickable
from tg_core.commands import (
    command,
    handle_group_click,
    names,
    on_item_enter,
    set_hidden,
    toggle_hidden,
)
from tg_core.config import (
    GroupDefinition,
    GroupsOptions,
    GroupsSection,
    TabGroupsConfig,
    load_config,
    parse_config,
    resolve_config_path,
)
from tg_core.decorate import group_component, set_current_hl
from tg_core.markers import add_markers
from tg_core.models import (
    UNGROUPED,
    Bucket,
    ClickTarget,
    Group,
    GroupContext,
    GroupMarker,
    Item,
    ItemView,
    Matcher,
    RenderView,
    SimpleItem,
)
from tg_core.partition import sort_by_groups
from tg_core.registry import get_by_id, sanitize_name, setup
from tg_core.separators import (
    HighlightLookup,
    SeparatorRegistry,
    SeparatorStrategy,
    count_label,
    pill,
    tab,
)
from tg_core.service import TabGroups

__all__ = [
    "GROUP_CLICK_HANDLER",
    "UNGROUPED",
    "Bucket",
    "ClickHandlers",
    "ClickTarget",
    "Group",
    "GroupContext",
    "GroupDefinition",
    "GroupMarker",
    "GroupsOptions",
    "GroupsSection",
    "HighlightLookup",
    "Item",
    "ItemView",
    "Matcher",
    "RenderView",
    "SeparatorRegistry",
    "SeparatorStrategy",
    "SimpleItem",
    "TabGroups",
    "TabGroupsConfig",
    "add_markers",
    "assign_groups",
    "classify",
    "command",
    "count_label",
    "get_by_id",
    "group_component",
    "handle_group_click",
    "load_config",
    "make_clickable",
    "names",
    "on_item_enter",
    "parse_config",
    "pill",
    "resolve_config_path",
    "sanitize_name",
    "set_current_hl",
    "set_hidden",
    "setup",
    "sort_by_groups",
    "tab",
    "toggle_hidden",
]

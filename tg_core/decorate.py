"""Per-item decoration with group icon and highlight."""

from __future__ import annotations

from typing import Any, MutableMapping

from tg_core.models import GroupContext
from tg_core.separators import HighlightLookup


def group_component(
    ctx: GroupContext,
    item: Any,
    component: str,
    length: int,
    highlights: HighlightLookup,
) -> tuple[str, int]:
    """Prefix a rendered tab with its group's highlight and icon."""
    group = ctx.groups.get(getattr(item, "group", None))
    if group is None:
        return component, length
    icon = f"{group.icon}{highlights.padding}" if group.icon else ""
    hl = highlights.hl(group.name) if group.highlight else ""
    decorated = f"{hl}{icon}{component}{highlights.hl('buffer')}"
    return decorated, length + highlights.measure(icon)


def set_current_hl(
    ctx: GroupContext,
    item: Any,
    highlights: HighlightLookup,
    current_hl: MutableMapping[str, str],
) -> None:
    """Store the selected/visible/base highlight marker for the item's group."""
    group = ctx.groups.get(getattr(item, "group", None))
    if group is None or not group.highlight:
        return
    name = group.name
    if item.current():
        hl_name = f"{name}_selected"
    elif item.visible():
        hl_name = f"{name}_visible"
    else:
        hl_name = name
    current_hl[name] = highlights.hl(hl_name)

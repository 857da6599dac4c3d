"""Group-level commands: visibility toggling and per-group callbacks."""

from __future__ import annotations

import logging
from typing import Any, Callable

from tg_common.errors import UnknownGroupError
from tg_common.logging import bound_group
from tg_core.models import GroupContext

logger = logging.getLogger(__name__)


def set_hidden(ctx: GroupContext, group_id: int | None, value: bool) -> None:
    """Set the hidden flag of a group; an unknown id is a caller bug."""
    if group_id is None:
        raise UnknownGroupError("A group id is required to set its hidden state")
    group = ctx.groups.get(group_id)
    if group is None:
        raise UnknownGroupError(
            f"Group {group_id} is not registered",
            context={"group_id": group_id, "registered": list(ctx.groups)},
        )
    with bound_group(group.id, group.name):
        group.hidden = value
        logger.debug("Group hidden=%s", value)


def toggle_hidden(
    ctx: GroupContext, group_id: int | None = None, name: str | None = None
) -> None:
    """Flip the hidden flag of the group with ``group_id``, else ``name``."""
    group = ctx.groups.get(group_id) if group_id is not None else None
    if group is None and name is not None:
        group = ctx.group_named(name)
    if group is None:
        logger.debug("toggle_hidden: no group for id=%r name=%r", group_id, name)
        return
    with bound_group(group.id, group.name):
        group.hidden = not group.hidden
        logger.debug("Group hidden=%s", group.hidden)


def command(ctx: GroupContext, group_name: str, callback: Callable[[Any], Any]) -> None:
    """Call ``callback`` once for every item currently in the named group."""
    bucket = next((b for b in ctx.buckets if b.name == group_name), None)
    if bucket is None:
        return
    for item in list(bucket.items):
        callback(item)


def names(ctx: GroupContext, include_empty: bool = False) -> list[str]:
    """Group names in registration order, optionally skipping empty groups."""
    result: list[str] = []
    for group in ctx.groups.values():
        bucket = ctx.bucket_for(group.id)
        if include_empty or (bucket is not None and len(bucket) > 0):
            result.append(group.name)
    return result


def handle_group_click(ctx: GroupContext, group_id: int) -> None:
    """Click handler bound to ``group_start`` markers."""
    toggle_hidden(ctx, group_id)


def on_item_enter(ctx: GroupContext, item: Any, *, toggle_hidden_on_enter: bool) -> None:
    """Reveal a hidden group when one of its items becomes current."""
    if not toggle_hidden_on_enter:
        return
    group = ctx.groups.get(getattr(item, "group", None))
    if group is not None and group.hidden:
        set_hidden(ctx, group.id, False)

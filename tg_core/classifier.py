"""Assign items to registered groups."""

from __future__ import annotations

from typing import Any, Iterable

from tg_core.models import GroupContext


def classify(ctx: GroupContext, item: Any) -> int | None:
    """Return the id of the first group whose matcher accepts ``item``.

    Groups are tried in registration order, not priority order. Items matched
    by no group fall back to the ungrouped id; ``None`` means nothing is
    registered and the caller keeps the item's current group.
    """
    if not ctx.groups:
        return None
    ungrouped_id = None
    for group_id, group in ctx.groups.items():
        if group.is_ungrouped:
            ungrouped_id = group.id
        if callable(group.matcher) and group.matcher(item):
            return group_id
    return ungrouped_id


def assign_groups(ctx: GroupContext, items: Iterable[Any]) -> None:
    """Write the classified group id onto each item."""
    for item in items:
        group_id = classify(ctx, item)
        if group_id is not None:
            item.group = group_id

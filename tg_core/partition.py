"""Stable partition of items into per-group buckets."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from tg_core.models import Bucket, Group, GroupContext

logger = logging.getLogger(__name__)


def _group_for(ctx: GroupContext, item: Any) -> Group | None:
    group = ctx.groups.get(getattr(item, "group", None))
    if group is None:
        group = ctx.ungrouped
        logger.debug(
            "Item %r has unregistered group %r; using ungrouped",
            getattr(item, "name", item),
            getattr(item, "group", None),
        )
    return group


def sort_by_groups(ctx: GroupContext, items: Sequence[Any]) -> list[Any]:
    """Bucket ``items`` by group and flatten the buckets by ascending priority.

    Items keep their input order inside a bucket. The bucket list is stored on
    ``ctx.buckets`` for marker synthesis and group commands. With no groups
    registered the items are returned as given.
    """
    if not ctx.groups:
        ctx.buckets = []
        return list(items)

    by_priority: dict[int, Bucket] = {}
    for priority in sorted({group.priority for group in ctx.groups.values()}):
        by_priority[priority] = Bucket(priority=priority)

    for item in items:
        group = _group_for(ctx, item)
        if group is None:
            continue
        bucket = by_priority[group.priority]
        if not bucket.is_stamped:
            bucket.stamp(group)
        bucket.items.append(item)

    ctx.buckets = list(by_priority.values())
    return [item for bucket in ctx.buckets for item in bucket.items]

"""Bracket each rendered group run with start/end marker views."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Sequence

from tg_common.logging import bound_group
from tg_core.click import GROUP_CLICK_HANDLER, Clickable, make_clickable
from tg_core.models import (
    UNGROUPED,
    Bucket,
    ClickTarget,
    Group,
    GroupContext,
    GroupMarker,
    ItemView,
    RenderView,
)
from tg_core.separators import HighlightLookup, SeparatorRegistry, count_label


@lru_cache(maxsize=None)
def default_separators() -> SeparatorRegistry:
    """Registry shared by every ``add_markers`` call that does not pass one."""
    return SeparatorRegistry()


def group_markers(
    bucket: Bucket,
    group: Group,
    highlights: HighlightLookup,
    separators: SeparatorRegistry,
    clickable: Clickable = make_clickable,
) -> tuple[GroupMarker, GroupMarker]:
    with bound_group(group.id, group.name):
        strategy = separators.resolve(group.separator)
    label = count_label(group, len(bucket))
    text, width = strategy(bucket.display_name or group.display_name, group, highlights, label)
    start = GroupMarker(
        type="group_start",
        text=clickable(GROUP_CLICK_HANDLER, group.id, text),
        width=width,
        group_id=group.id,
        click=ClickTarget(handler=GROUP_CLICK_HANDLER, group_id=group.id),
    )
    end = GroupMarker(
        type="group_end",
        text=highlights.hl("fill") + highlights.padding,
        width=highlights.measure(highlights.padding),
        group_id=group.id,
    )
    return start, end


def add_markers(
    ctx: GroupContext,
    items: Sequence[Any],
    highlights: HighlightLookup,
    *,
    separators: SeparatorRegistry | None = None,
    clickable: Clickable = make_clickable,
) -> list[RenderView] | list[Any]:
    """Turn the buckets of the last sort pass into the final render sequence.

    Items of hidden groups stay in the sequence as suppressed views. Every
    non-empty bucket other than ``ungrouped`` is wrapped in a ``group_start``
    and a ``group_end`` marker. Without buckets (grouping never set up) the
    input items come back unchanged, not wrapped in views.
    """
    if not ctx.buckets:
        return list(items)

    registry = separators or default_separators()
    result: list[RenderView] = []
    for bucket in ctx.buckets:
        group = ctx.groups.get(bucket.id) if bucket.id is not None else None
        suppressed = bool(group and group.hidden)
        views: list[RenderView] = [ItemView(item, suppressed=suppressed) for item in bucket]

        if group is not None and bucket.name != UNGROUPED and views:
            start, end = group_markers(bucket, group, highlights, registry, clickable)
            views = [start, *views, end]
        result.extend(views)
    return result

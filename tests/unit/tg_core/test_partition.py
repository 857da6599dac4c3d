"""Tests for the stable group partition."""

from __future__ import annotations

import pytest

from tg_core.api import (
    GroupContext,
    HighlightLookup,
    SimpleItem,
    add_markers,
    names,
    setup,
    sort_by_groups,
)

pytestmark = pytest.mark.unit_core


def test_sort_by_groups_keeps_group_runs(dummy_ctx: GroupContext, dummy_items) -> None:
    sorted_items = sort_by_groups(dummy_ctx, dummy_items)

    assert [item.name for item in sorted_items] == ["dummy-1.txt", "dummy-2.txt", "file-2.txt"]
    assert len(dummy_ctx.buckets) == 2


def test_sort_by_groups_is_stable_within_bucket(dummy_ctx: GroupContext) -> None:
    items = [
        SimpleItem(id=1, name="file-a", group=2),
        SimpleItem(id=2, name="dummy-b", group=1),
        SimpleItem(id=3, name="file-c", group=2),
        SimpleItem(id=4, name="dummy-d", group=1),
    ]

    result = sort_by_groups(dummy_ctx, items)

    assert [item.id for item in result] == [2, 4, 1, 3]


def test_sort_by_groups_orders_by_priority(ctx: GroupContext) -> None:
    setup(ctx, [{"name": "first", "priority": 5}, {"name": "second", "priority": 1}])
    items = [
        SimpleItem(id=1, name="a", group=1),
        SimpleItem(id=2, name="b", group=3),
        SimpleItem(id=3, name="c", group=2),
    ]

    result = sort_by_groups(ctx, items)

    assert [item.id for item in result] == [3, 2, 1]
    assert [bucket.priority for bucket in ctx.buckets] == [1, 3, 5]


def test_groups_sharing_a_priority_share_a_bucket(ctx: GroupContext) -> None:
    # "first" (priority 2) and the appended ungrouped group (id 2) collide.
    setup(ctx, [{"name": "first", "priority": 2}])
    items = [SimpleItem(id=1, name="u", group=2), SimpleItem(id=2, name="f", group=1)]

    result = sort_by_groups(ctx, items)

    assert [item.id for item in result] == [1, 2]
    assert len(ctx.buckets) == 1
    assert ctx.buckets[0].name == "ungrouped"
    # The bucket carries the first-stamped identity, so "first" is neither
    # bracketed nor listed by names().
    assert names(ctx) == ["ungrouped"]
    views = add_markers(ctx, result, HighlightLookup())
    assert [view.type for view in views] == ["item", "item"]


def test_sort_by_groups_stamps_bucket_metadata(dummy_ctx: GroupContext, dummy_items) -> None:
    sort_by_groups(dummy_ctx, dummy_items)

    first = dummy_ctx.buckets[0]
    assert first.id == 1
    assert first.name == "test_group"
    assert first.display_name == "test-group"
    assert first.hidden is False
    assert len(first) == 2


def test_empty_bucket_stays_unstamped(dummy_ctx: GroupContext) -> None:
    sort_by_groups(dummy_ctx, [SimpleItem(id=1, name="file", group=2)])

    empty = dummy_ctx.buckets[0]
    assert len(empty) == 0
    assert empty.id is None
    assert empty.is_stamped is False


def test_sort_by_groups_is_idempotent(dummy_ctx: GroupContext, dummy_items) -> None:
    first = sort_by_groups(dummy_ctx, dummy_items)
    second = sort_by_groups(dummy_ctx, dummy_items)

    assert first == second
    assert len(dummy_ctx.buckets) == 2


def test_unknown_group_id_lands_in_ungrouped(dummy_ctx: GroupContext) -> None:
    items = [SimpleItem(id=1, name="orphan", group=42), SimpleItem(id=2, name="dummy", group=1)]

    result = sort_by_groups(dummy_ctx, items)

    assert [item.id for item in result] == [2, 1]
    assert dummy_ctx.buckets[-1].name == "ungrouped"


def test_sort_without_groups_returns_items(ctx: GroupContext) -> None:
    items = [SimpleItem(id=1, name="a")]

    assert sort_by_groups(ctx, items) == items
    assert ctx.buckets == []

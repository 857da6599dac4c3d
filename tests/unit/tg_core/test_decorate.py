from __future__ import annotations

import pytest

from tg_core.api import GroupContext, HighlightLookup, SimpleItem, group_component, set_current_hl, setup

pytestmark = pytest.mark.unit_core


@pytest.fixture
def styled_ctx(ctx: GroupContext) -> GroupContext:
    setup(ctx, [{"name": "tests", "icon": "T", "highlight": {"guifg": "red"}}, {"name": "plain"}])
    return ctx


def test_group_component_adds_icon_and_highlight(
    styled_ctx: GroupContext, hls: HighlightLookup
) -> None:
    item = SimpleItem(id=1, name="a", group=1)

    component, length = group_component(styled_ctx, item, "a.py", 4, hls)

    assert component == "%#TabGroupsTests#T a.py%#TabGroupsBuffer#"
    assert length == 4 + 2


def test_group_component_without_icon_keeps_length(
    styled_ctx: GroupContext, hls: HighlightLookup
) -> None:
    item = SimpleItem(id=1, name="a", group=2)

    component, length = group_component(styled_ctx, item, "a.py", 4, hls)

    assert component == "a.py%#TabGroupsBuffer#"
    assert length == 4


def test_group_component_unknown_group_is_unchanged(
    styled_ctx: GroupContext, hls: HighlightLookup
) -> None:
    item = SimpleItem(id=1, name="a", group=None)

    assert group_component(styled_ctx, item, "a.py", 4, hls) == ("a.py", 4)


@pytest.mark.parametrize(
    ("current", "visible", "expected"),
    [
        (True, False, "%#TabGroupsTestsSelected#"),
        (False, True, "%#TabGroupsTestsVisible#"),
        (False, False, "%#TabGroupsTests#"),
    ],
)
def test_set_current_hl_picks_state_variant(
    styled_ctx: GroupContext, hls: HighlightLookup, current: bool, visible: bool, expected: str
) -> None:
    item = SimpleItem(id=1, name="a", group=1, is_current=current, is_visible=visible)
    current_hl: dict[str, str] = {}

    set_current_hl(styled_ctx, item, hls, current_hl)

    assert current_hl == {"tests": expected}


def test_set_current_hl_ignores_groups_without_highlight(
    styled_ctx: GroupContext, hls: HighlightLookup
) -> None:
    current_hl: dict[str, str] = {}

    set_current_hl(styled_ctx, SimpleItem(id=1, name="a", group=2), hls, current_hl)

    assert current_hl == {}

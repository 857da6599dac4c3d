"""Normalize user group definitions into registered groups."""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, MutableMapping, Sequence

from tg_core.config import GroupDefinition, coerce_definition
from tg_core.models import UNGROUPED, Group, GroupContext

logger = logging.getLogger(__name__)

_ILLEGAL_NAME_CHARS = re.compile(r"[^0-9A-Za-z]+")

# Derived highlight suffix -> base buffer style supplying the missing background.
_HIGHLIGHT_BASES: dict[str, str] = {
    "_selected": "buffer_selected",
    "_visible": "buffer_visible",
    "": "buffer",
}

HighlightTable = MutableMapping[str, Mapping[str, Any]]


def sanitize_name(name: str) -> str:
    """Collapse every run of non-alphanumeric characters into ``_``."""
    return _ILLEGAL_NAME_CHARS.sub("_", name)


def _enrich(index: int, definition: GroupDefinition) -> Group:
    highlight = definition.highlight
    return Group(
        id=index,
        name=sanitize_name(definition.name),
        display_name=definition.name,
        matcher=definition.matcher,
        priority=definition.priority if definition.priority is not None else index,
        highlight=dict(highlight) if isinstance(highlight, Mapping) else None,
        icon=definition.icon,
        hidden=False,
        separator=definition.separator,
    )


def _merge_keep(spec: Mapping[str, Any], defaults: Mapping[str, Any]) -> dict[str, Any]:
    """Keep attributes already in ``spec``, fill the missing ones from ``defaults``."""
    merged = {key: value for key, value in defaults.items() if value is not None}
    merged.update(spec)
    return merged


def derive_highlights(name: str, spec: Mapping[str, Any], highlights: HighlightTable) -> None:
    """Add ``<name>``, ``<name>_selected`` and ``<name>_visible`` entries."""
    for suffix, base_name in _HIGHLIGHT_BASES.items():
        base = highlights.get(base_name) or {}
        highlights[f"{name}{suffix}"] = _merge_keep(spec, {"guibg": base.get("guibg")})


def setup(
    ctx: GroupContext,
    definitions: Sequence[GroupDefinition | Mapping[str, Any]] | None,
    highlights: HighlightTable | None = None,
) -> None:
    """Replace the registered groups of ``ctx`` with ``definitions``.

    ``None`` leaves the current state untouched. Group ids follow registration
    order starting at 1, and an ``ungrouped`` group is appended unless one of
    the definitions already sanitizes to that name. Definitions that carry a
    highlight mapping add three entries to ``highlights`` (mutated in place).
    """
    if definitions is None:
        return

    groups: dict[int, Group] = {}
    ungrouped_seen = False
    for index, raw in enumerate(definitions, start=1):
        definition = coerce_definition(raw, index)
        group = _enrich(index, definition)
        ungrouped_seen = ungrouped_seen or group.name == UNGROUPED
        groups[index] = group
        if highlights is not None and isinstance(definition.highlight, Mapping):
            derive_highlights(group.name, definition.highlight, highlights)

    if not ungrouped_seen:
        last_position = len(groups) + 1
        groups[last_position] = _enrich(last_position, GroupDefinition(name=UNGROUPED))

    ctx.reset(groups)
    logger.debug("Registered %d groups: %s", len(groups), [g.name for g in groups.values()])


def get_by_id(ctx: GroupContext, group_id: int | None) -> Group | None:
    if group_id is None:
        return None
    return ctx.groups.get(group_id)

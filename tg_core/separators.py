"""
Separator strategies: decorated group labels and their display widths.

A strategy is a pure function ``(name, group, highlights, count) -> (text, width)``.
Two are built in (``pill`` and ``tab``); more can be registered by name or
published under the ``tabgroups.separators`` entry-point group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from importlib.metadata import EntryPoint
from typing import Any, Callable, Mapping, TypeAlias

from rich.cells import cell_len

from tg_common.errors import StrategyError
from tg_core.loader import discover_entrypoints, load_entrypoint
from tg_core.models import Group

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "tabgroups.separators"
DEFAULT_STYLE = "pill"
PADDING = " "
HL_PREFIX = "TabGroups"
PILL_LEFT = "█"
PILL_RIGHT = "█"

WidthFn: TypeAlias = Callable[[str], int]


def _camel(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


@dataclass
class HighlightLookup:
    """Highlight table plus the measuring rules used to lay out a label."""

    table: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    measure: WidthFn = cell_len
    padding: str = PADDING

    def hl(self, name: str) -> str:
        """Statusline marker that switches to the highlight ``name``."""
        return f"%#{HL_PREFIX}{_camel(name)}#"

    def width(self, *parts: str) -> int:
        return sum(self.measure(part) for part in parts)


SeparatorStrategy: TypeAlias = Callable[[str, Group, HighlightLookup, str], tuple[str, int]]


def count_label(group: Group, count: int) -> str:
    """``"(N)"`` for hidden groups, so the collapsed size stays visible."""
    return f"({count})" if group.hidden else ""


def pill(name: str, group: Group, hls: HighlightLookup, count: str) -> tuple[str, int]:
    bg_hl = hls.hl("fill")
    sep_hl = hls.hl("group_separator")
    label_hl = hls.hl("group_label")
    padding = hls.padding
    indicator = "".join(
        (bg_hl, padding, sep_hl, PILL_LEFT, label_hl, name, count, sep_hl, PILL_RIGHT, padding)
    )
    length = hls.width(PILL_LEFT, PILL_RIGHT, name, count, padding, padding)
    return indicator, length


def tab(name: str, group: Group, hls: HighlightLookup, count: str) -> tuple[str, int]:
    hl = hls.hl("fill")
    indicator_hl = hls.hl("buffer")
    padding = hls.padding
    length = hls.width(name, padding * 4, count)
    indicator = "".join((hl, padding, indicator_hl, padding, name, count, hl, padding))
    return indicator, length


class SeparatorRegistry:
    """Named separator strategies, including entry-point provided ones.

    Entry points are scanned once, on the first lookup of a name that is not
    registered, so resolving built-ins never touches package metadata.
    """

    def __init__(self, strategies: Mapping[str, SeparatorStrategy] | None = None) -> None:
        self._strategies: dict[str, SeparatorStrategy] = {"pill": pill, "tab": tab}
        if strategies:
            for name, strategy in strategies.items():
                self.register(name, strategy)
        self._entrypoints: dict[str, EntryPoint] | None = None

    @property
    def _pending_entrypoints(self) -> dict[str, EntryPoint]:
        if self._entrypoints is None:
            self._entrypoints = discover_entrypoints([ENTRYPOINT_GROUP])
        return self._entrypoints

    def register(self, name: str, strategy: Any) -> None:
        if not callable(strategy):
            raise StrategyError(
                f"Separator strategy {name!r} is not callable",
                context={"name": name, "type": type(strategy).__name__},
            )
        self._strategies[name] = strategy

    def get(self, name: str) -> SeparatorStrategy:
        if name not in self._strategies:
            entry_point = self._pending_entrypoints.pop(name, None)
            if entry_point is not None:
                load_entrypoint(entry_point, self.register, label="separator strategy")
        if name not in self._strategies:
            raise KeyError(f"Separator strategy '{name}' not found")
        return self._strategies[name]

    def available(self) -> list[str]:
        return sorted({*self._strategies, *self._pending_entrypoints})

    def resolve(self, spec: Any) -> SeparatorStrategy:
        """Map a group's separator setting to a strategy; unknown names use pill."""
        if spec is None:
            return self._strategies[DEFAULT_STYLE]
        if callable(spec):
            return spec
        if isinstance(spec, str):
            try:
                return self.get(spec)
            except KeyError:
                logger.warning("Unknown separator style %r; using %s", spec, DEFAULT_STYLE)
                return self._strategies[DEFAULT_STYLE]
        logger.warning(
            "Separator style of type %s is not usable; using %s",
            type(spec).__name__,
            DEFAULT_STYLE,
        )
        return self._strategies[DEFAULT_STYLE]

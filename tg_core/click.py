"""Clickable tabline regions bound to a handler name and a group id."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeAlias

logger = logging.getLogger(__name__)

GROUP_CLICK_HANDLER = "handle_group_click"

Clickable: TypeAlias = Callable[[str, int, str], str]


def make_clickable(handler: str, target_id: int, text: str) -> str:
    """Wrap ``text`` in a ``%<id>@<handler>@ ... %X`` click region."""
    if not text:
        return text
    return f"%{target_id}@{handler}@{text}%X"


class ClickHandlers:
    """Dispatch table from handler names to callables taking a target id."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[int], Any]] = {}

    def register(self, name: str, handler: Callable[[int], Any]) -> None:
        self._handlers[name] = handler

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def dispatch(self, name: str, target_id: int) -> Any:
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("No click handler registered as %s", name)
            return None
        return handler(target_id)

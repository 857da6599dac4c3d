"""Shared helpers for tabline-groups."""

from tg_common.api import TabGroupsError, configure_logging

__all__ = ["configure_logging", "TabGroupsError"]

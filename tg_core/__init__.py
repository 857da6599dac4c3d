"""Classification, ordering and marker synthesis for grouped tab bars."""

from tg_core.api import TabGroups, TabGroupsConfig, load_config

__all__ = ["TabGroups", "TabGroupsConfig", "load_config"]

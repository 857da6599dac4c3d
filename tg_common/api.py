"""Public API surface for tg_common."""

from tg_common.config.env import parse_bool_env, parse_path_env
from tg_common.errors import (
    ConfigurationError,
    StrategyError,
    TabGroupsError,
    UnknownGroupError,
    error_to_payload,
)
from tg_common.logging import bound_group, configure_logging

__all__ = [
    "bound_group",
    "configure_logging",
    "ConfigurationError",
    "StrategyError",
    "TabGroupsError",
    "UnknownGroupError",
    "error_to_payload",
    "parse_bool_env",
    "parse_path_env",
]

"""Logging setup for tabgroups: stdlib loggers rendered through structlog.

Library modules log with ``logging.getLogger(__name__)``. Records emitted
inside :func:`bound_group` carry ``group_id`` and ``group`` fields in both the
console and the JSON rendering.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import ContextManager

import structlog

from tg_common.config.env import parse_bool_env, parse_path_env

LEVEL_ENV = "TG_LOG_LEVEL"
JSON_ENV = "TG_LOG_JSON"
FILE_ENV = "TG_LOG_FILE"


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.INFO
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    return logging.getLevelNamesMapping().get(value.upper(), logging.INFO)


def bound_group(group_id: int, name: str) -> ContextManager[object]:
    """Tag every record logged inside the ``with`` block with a group."""
    return structlog.contextvars.bound_contextvars(group_id=group_id, group=name)


def _formatter(json: bool) -> logging.Formatter:
    renderer = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ],
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    force: bool = False,
) -> None:
    """Install the structlog formatter on the root logger.

    ``TG_LOG_LEVEL`` applies when ``level`` is not given, ``TG_LOG_JSON``
    switches to JSON lines and ``TG_LOG_FILE`` adds a file handler. Without
    ``force``, an already configured root logger is left alone.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        return

    formatter = _formatter(bool(parse_bool_env(os.environ.get(JSON_ENV))))
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file = parse_path_env(os.environ.get(FILE_ENV))
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)

    root_logger.handlers[:] = handlers
    root_logger.setLevel(_resolve_level(level or os.environ.get(LEVEL_ENV), debug))

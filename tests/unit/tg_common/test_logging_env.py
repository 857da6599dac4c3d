"""Tests for logging setup and env parsing helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from tg_common.config.env import parse_bool_env, parse_path_env
from tg_common.logging import _resolve_level, bound_group, configure_logging
from tg_core.api import (
    GroupContext,
    HighlightLookup,
    SimpleItem,
    add_markers,
    set_hidden,
    setup,
    sort_by_groups,
)

pytestmark = pytest.mark.unit_common


@pytest.mark.parametrize(
    ("value", "debug", "expected"),
    [
        (None, False, logging.INFO),
        (None, True, logging.DEBUG),
        ("warning", False, logging.WARNING),
        ("10", False, logging.DEBUG),
        (logging.ERROR, False, logging.ERROR),
        ("nonsense", False, logging.INFO),
    ],
)
def test_resolve_level(value, debug: bool, expected: int) -> None:
    assert _resolve_level(value, debug) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, None), ("1", True), (" Yes ", True), ("off", False), ("", False)],
)
def test_parse_bool_env(value, expected) -> None:
    assert parse_bool_env(value) is expected


def test_parse_path_env() -> None:
    assert parse_path_env(None) is None
    assert parse_path_env("   ") is None
    assert parse_path_env("/etc/tabgroups.yml") == Path("/etc/tabgroups.yml")
    assert parse_path_env("~/x.yml") == Path.home() / "x.yml"


@pytest.fixture
def json_log(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Configure JSON logging into a file; yields a reader for the parsed records."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "tg.log"
    monkeypatch.setenv("TG_LOG_JSON", "1")
    monkeypatch.setenv("TG_LOG_FILE", str(log_file))

    def records() -> list[dict]:
        for handler in root.handlers:
            handler.flush()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]

    yield records
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_logging_honours_env(json_log, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TG_LOG_LEVEL", "WARNING")
    configure_logging(force=True)
    root = logging.getLogger()

    assert root.level == logging.WARNING
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    logging.getLogger("tg_core.test").info("dropped")
    logging.getLogger("tg_core.test").warning("hidden group toggled")

    assert [record["event"] for record in json_log()] == ["hidden group toggled"]


def test_explicit_level_beats_env(monkeypatch: pytest.MonkeyPatch, json_log) -> None:
    monkeypatch.setenv("TG_LOG_LEVEL", "ERROR")

    configure_logging(level="DEBUG", force=True)

    assert logging.getLogger().level == logging.DEBUG


def test_bound_group_fields_reach_records(json_log) -> None:
    configure_logging(level="DEBUG", force=True)

    with bound_group(3, "docs"):
        logging.getLogger("tg_core.test").info("inside")
    logging.getLogger("tg_core.test").info("outside")

    inside, outside = json_log()
    assert (inside["group_id"], inside["group"]) == (3, "docs")
    assert "group" not in outside


def test_visibility_change_logs_group(json_log) -> None:
    configure_logging(level="DEBUG", force=True)
    ctx = GroupContext()
    setup(ctx, [{"name": "test-group"}])

    set_hidden(ctx, 1, True)

    record = next(r for r in json_log() if r["event"] == "Group hidden=True")
    assert record["group_id"] == 1
    assert record["group"] == "test_group"


def test_separator_fallback_warning_names_group(json_log) -> None:
    configure_logging(level="WARNING", force=True)
    ctx = GroupContext()
    setup(ctx, [{"name": "docs", "separator": "zigzag"}])
    items = sort_by_groups(ctx, [SimpleItem(id=1, name="readme.md", group=1)])

    add_markers(ctx, items, HighlightLookup())

    (record,) = [r for r in json_log() if r["level"] == "warning"]
    assert "zigzag" in record["event"]
    assert record["group"] == "docs"

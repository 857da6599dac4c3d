from collections import defaultdict

import pytest
from rich.console import Console
from rich.table import Table

from tg_core.api import GroupContext, HighlightLookup, SimpleItem, setup

# Markers declared in pyproject.toml
KNOWN_MARKERS = {"unit_core", "unit_common", "unit_ui"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Print per-marker statistics at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(
        lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0}
    )

    for outcome in ["passed", "failed", "skipped"]:
        for report in terminalreporter.stats.get(outcome, []):
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
            f"{stats['duration']:.2f}",
        )

    console = Console()
    console.print("\n")
    console.print(table)


def fixed_width(text: str) -> int:
    """One column per character, including the wide pill glyphs."""
    return len(text)


def is_dummy(item) -> bool:
    return "dummy" in item.name


@pytest.fixture
def ctx() -> GroupContext:
    return GroupContext()


@pytest.fixture
def hls() -> HighlightLookup:
    return HighlightLookup(measure=fixed_width)


@pytest.fixture
def dummy_ctx(ctx: GroupContext) -> GroupContext:
    """Context with one ``test-group`` catching dummy items, plus ungrouped."""
    setup(ctx, [{"name": "test-group", "matcher": is_dummy}])
    return ctx


@pytest.fixture
def dummy_items() -> list[SimpleItem]:
    return [
        SimpleItem(id=1, name="dummy-1.txt", group=1),
        SimpleItem(id=2, name="dummy-2.txt", group=1),
        SimpleItem(id=3, name="file-2.txt", group=2),
    ]

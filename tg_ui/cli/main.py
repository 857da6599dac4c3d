"""
Command-line interface for tabline-groups.

Inspects a group configuration: lists groups, previews how item names are
classified and bracketed, and validates config files.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from tg_common.api import TabGroupsError, configure_logging, error_to_payload
from tg_core.api import (
    GroupMarker,
    RenderView,
    SimpleItem,
    TabGroups,
    load_config,
    resolve_config_path,
)
from tg_ui.models import TableModel
from tg_ui.table_layout import build_rich_table
from tg_ui.theme import context_lines, marker_text, presenter_message, visibility_text

console = Console(highlight=False)

app = typer.Typer(help="Inspect tab bar group configurations.", no_args_is_help=True)

ConfigOption = typer.Option(
    None,
    "--config",
    "-c",
    help="Group config (YAML/JSON); defaults to $TG_CONFIG_PATH or ./tabgroups.yml.",
)


def _present(level: str, message: str) -> None:
    console.print(presenter_message(level, message), soft_wrap=True)


def _load_groups(config_path: Optional[Path]) -> TabGroups:
    try:
        config = load_config(config_path)
    except TabGroupsError as exc:
        payload = error_to_payload(exc)
        _present("error", escape(payload["error"]))
        for line in context_lines(payload["error_context"]):
            console.print(line, soft_wrap=True)
        raise typer.Exit(1)
    return TabGroups.from_config(config)


def _view_row(index: int, view: RenderView, groups: TabGroups) -> list[str]:
    if isinstance(view, GroupMarker):
        group = groups.get_by_id(view.group_id)
        label = group.display_name if group else str(view.group_id)
        return [str(index), marker_text(view.type), escape(label), str(view.width)]
    group = groups.get_by_id(view.item.group)
    label = group.display_name if group else "-"
    state = "suppressed" if view.suppressed else ""
    return [str(index), escape(view.item.name), escape(label), state]


@app.callback()
def entry(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log level (DEBUG, INFO, WARNING, ...)."
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""
    configure_logging(level=log_level, debug=debug, force=True)


@app.command("groups")
def list_groups(
    config: Optional[Path] = ConfigOption,
    show_all: bool = typer.Option(
        True, "--all/--user-only", help="Include the reserved ungrouped group."
    ),
) -> None:
    """List registered groups in registration order."""
    groups = _load_groups(config)
    rows = [
        [
            str(group.id),
            group.name,
            escape(group.display_name),
            str(group.priority),
            "custom" if callable(group.separator) else str(group.separator or "pill"),
            visibility_text(group.hidden),
        ]
        for group in groups.groups
        if show_all or not group.is_ungrouped
    ]
    model = TableModel(
        title="Tab groups",
        columns=["ID", "Name", "Display name", "Priority", "Separator", "State"],
        rows=rows,
    )
    console.print(build_rich_table(model, console=console))


@app.command("classify")
def classify_names(
    names: List[str] = typer.Argument(..., help="Item names to classify, in tab order."),
    config: Optional[Path] = ConfigOption,
    hide: List[str] = typer.Option(
        [], "--hide", help="Group name to hide before rendering (repeatable)."
    ),
) -> None:
    """Show the render sequence produced for the given item names."""
    groups = _load_groups(config)
    for name in hide:
        group = groups.context.group_named(name)
        if group is None:
            _present("warning", f"Unknown group: {name}")
            continue
        groups.set_hidden(group.id, True)

    items = [SimpleItem(id=index, name=name) for index, name in enumerate(names, start=1)]
    views = groups.refresh(items)
    model = TableModel(
        title="Render sequence",
        columns=["#", "View", "Group", "Width/State"],
        rows=[_view_row(index, view, groups) for index, view in enumerate(views, start=1)],
    )
    console.print(build_rich_table(model, console=console))


@app.command("check")
def check_config(config: Optional[Path] = ConfigOption) -> None:
    """Validate a config file and its matcher/separator references."""
    path = resolve_config_path(config)
    groups = _load_groups(path)
    unknown = [
        group.display_name
        for group in groups.groups
        if isinstance(group.separator, str) and group.separator not in groups.separators.available()
    ]
    for name in unknown:
        _present("warning", f"Group {name!r} uses an unknown separator; pill will be used.")
    _present("success", f"{path}: {len(groups.groups)} groups registered")


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()

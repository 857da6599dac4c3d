from __future__ import annotations

from typing import Any, Mapping

from rich.markup import escape

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"

_PRESENTER_TEMPLATES: dict[str, str] = {
    "info": "[blue]ℹ[/blue] {message}",
    "warning": "[yellow]⚠ {message}[/yellow]",
    "error": "[red]✖ {message}[/red]",
    "success": "[green]✔ {message}[/green]",
}

HIDDEN_STYLE = "dim"
VISIBLE_STYLE = "green"
MARKER_STYLE = "bold cyan"


def presenter_message(level: str, message: str) -> str:
    template = _PRESENTER_TEMPLATES.get(level, "{message}")
    return template.format(message=message)


def visibility_text(hidden: bool) -> str:
    if hidden:
        return f"[{HIDDEN_STYLE}]hidden[/{HIDDEN_STYLE}]"
    return f"[{VISIBLE_STYLE}]visible[/{VISIBLE_STYLE}]"


def marker_text(kind: str) -> str:
    return f"[{MARKER_STYLE}]{kind}[/{MARKER_STYLE}]"


def context_lines(context: Mapping[str, Any]) -> list[str]:
    """Indented ``key: value`` lines describing an error context."""
    return [f"  [dim]{key}:[/dim] {escape(str(value))}" for key, value in context.items()]

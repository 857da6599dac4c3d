"""Typer CLI for tabline-groups."""

from tg_ui.cli.main import app, main

__all__ = ["app", "main"]

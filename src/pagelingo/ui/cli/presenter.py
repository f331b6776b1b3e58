"""Rendering helpers for localized page listings."""

from __future__ import annotations

from collections.abc import Sequence
import json

from rich import box
from rich.table import Table
import typer

from pagelingo.core.models import PageDescriptor

from .state import CLIState


def _cell(value: object) -> str:
    if value is None or value == "":
        return "-"
    return str(value)


def build_pages_table(pages: Sequence[PageDescriptor], *, title: str = "Pages") -> Table:
    """Return a table listing each page and its routing metadata."""
    table = Table(title=title, box=box.SQUARE, show_edge=True, header_style="bold cyan")
    table.add_column("Path", style="magenta")
    table.add_column("Match path")
    table.add_column("Language", style="green")
    table.add_column("Routed")
    table.add_column("Original path")

    if not pages:
        table.add_row("-", "-", "-", "-", "No pages")
        return table

    for page in pages:
        localization = page.localization
        if localization is None:
            table.add_row(page.path, _cell(page.match_path), "-", "-", "-")
            continue
        table.add_row(
            page.path,
            _cell(page.match_path),
            localization.language,
            "yes" if localization.routed else "no",
            _cell(localization.original_path),
        )
    return table


def pages_to_json(pages: Sequence[PageDescriptor]) -> str:
    return json.dumps([page.to_dict() for page in pages], indent=2, ensure_ascii=False)


def present_pages(state: CLIState, pages: Sequence[PageDescriptor], *, as_json: bool) -> None:
    if as_json:
        typer.echo(pages_to_json(pages))
        return
    state.console.print(build_pages_table(pages))


__all__ = ["build_pages_table", "pages_to_json", "present_pages"]

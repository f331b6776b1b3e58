"""Describe how a single path is localized."""

from __future__ import annotations

from typing import Annotated

import click
from rich.table import Table
import typer

from pagelingo.core.config import load_configuration
from pagelingo.core.exceptions import ConfigurationError
from pagelingo.core.localizer import PageLocalizer
from pagelingo.core.models import LocalizationOutcome, PageDescriptor
from pagelingo.core.options import resolve_page_options

from .._options import ConfigArgument, DebugOption, VerboseOption
from ..presenter import build_pages_table
from ..state import emit_error, emit_warning, set_cli_state


def explain(
    config: ConfigArgument,
    path: Annotated[str, typer.Argument(metavar="PATH", help="Page path to inspect.")],
    match_path: Annotated[
        str | None,
        typer.Option("--match-path", help="Match path already attached to the page."),
    ] = None,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Show the options, languages, and pages produced for PATH."""
    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)

    try:
        settings = load_configuration(config)
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    options = resolve_page_options(path, settings.pages)
    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="bold")
    summary.add_column()
    summary.add_row("Path", path)
    summary.add_row("Page options", options.match_path if options else "-")
    summary.add_row("Languages", ", ".join(settings.languages))
    summary.add_row("Default language", settings.default_language)
    state.console.print(summary)

    result = PageLocalizer(settings).localize(PageDescriptor(path=path, match_path=match_path))
    if result.outcome is LocalizationOutcome.SKIPPED:
        emit_warning(f"Page left unlocalized: {result.reason}")
        raise typer.Exit(code=0)

    state.console.print(build_pages_table(result.create, title="Emitted pages"))


__all__ = ["explain"]

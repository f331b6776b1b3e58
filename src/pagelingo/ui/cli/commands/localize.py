"""Run the localizer over a page manifest."""

from __future__ import annotations

import click
import typer

from pagelingo.core.config import load_configuration, load_pages
from pagelingo.core.exceptions import ConfigurationError
from pagelingo.core.localizer import PageLocalizer
from pagelingo.core.registry import PageRegistry

from .._options import (
    ConfigArgument,
    DebugOption,
    FormatOption,
    OutputFormat,
    PagesArgument,
    VerboseOption,
)
from ..diagnostics import CliEmitter
from ..presenter import present_pages
from ..state import emit_error, emit_warning, set_cli_state


def localize(
    config: ConfigArgument,
    pages: PagesArgument,
    output_format: FormatOption = OutputFormat.TABLE,
    verbose: VerboseOption = 0,
    debug: DebugOption = False,
) -> None:
    """Expand PAGES into canonical and per-language pages using CONFIG."""
    ctx = click.get_current_context(silent=True)
    typer_ctx = ctx if isinstance(ctx, typer.Context) else None
    state = set_cli_state(ctx=typer_ctx, verbosity=verbose, debug=debug)

    try:
        settings = load_configuration(config)
        sources = load_pages(pages)
    except ConfigurationError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc

    localizer = PageLocalizer(settings, emitter=CliEmitter(state=state))
    registry = PageRegistry(on_create=localizer)
    results = registry.build(sources)

    skipped = state.consume_events("page_skipped")
    if skipped and state.verbosity <= 0:
        emit_warning(f"{len(skipped)} page(s) left unlocalized.")

    present_pages(state, results, as_json=output_format is OutputFormat.JSON)


__all__ = ["localize"]

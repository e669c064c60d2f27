"""CLI for the ``kakeibo`` package.

Exposes a callable command handler (``cmd_summarize``) and a Typer-based
console interface. Environment variables are loaded from a local ``.env``
using ``python-dotenv`` before delegating to command logic. Classification
lives in ``kakeibo.api``; this module only drives a
:class:`~kakeibo.session.KakeiboSession` and renders its final state.
"""

from __future__ import annotations

import contextlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .logging_setup import configure_logging
from .models import build_report
from .render import render_categories, render_rules
from .session import KakeiboSession, Status


class OutputFormat(StrEnum):
    TABLE = "table"
    JSON = "json"


def cmd_summarize(
    csv_path: str | Path,
    *,
    output_format: OutputFormat = OutputFormat.TABLE,
    show_items: bool = True,
    content_type: str | None = None,
    console: Console | None = None,
) -> int:
    """Classify one statement CSV and print the per-category totals.

    Errors are written to stderr as ``"Error: <message>"`` and the function
    returns ``1``. On success, returns ``0``.
    """

    out = console or Console()
    session = KakeiboSession()

    spinner = out.status("計算中...") if out.is_terminal else contextlib.nullcontext()
    with spinner:
        state = session.select_file(csv_path, content_type=content_type)

    if state.status is not Status.SUCCESS or state.categories is None:
        print(f"Error: {state.error}", file=sys.stderr)
        return 1

    if output_format == OutputFormat.JSON:
        report = build_report(state.categories, source=state.file)
        typer.echo(report.model_dump_json(indent=2))
        return 0

    title = state.file.name if state.file else str(csv_path)
    out.print(f"[bold]{escape(title)}[/bold]", highlight=False)
    render_categories(state.categories, out, show_items=show_items)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Categorize a Rakuten e-NAVI card statement CSV (Shift_JIS) into "
        "convenience stores, povo, subscriptions, Suica, small JCB payments and other."
    ),
)


@app.command("summarize")
def summarize_cmd(
    csv_path: Annotated[
        Path,
        typer.Argument(
            help="Path to the statement CSV downloaded from e-NAVI",
            dir_okay=False,
            file_okay=True,
            exists=False,  # the handler reports read failures itself
        ),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            envvar="KAKEIBO_OUTPUT_FORMAT",
            case_sensitive=False,
            help="Output as rich tables or a JSON report.",
        ),
    ] = OutputFormat.TABLE,
    show_items: Annotated[
        bool,
        typer.Option("--items/--no-items", help="List every transaction per category."),
    ] = True,
    content_type: Annotated[
        str | None,
        typer.Option(help="Declared MIME type of the file (guessed from the name if omitted)."),
    ] = None,
) -> None:
    """Classify a statement CSV and print totals per category."""

    code = cmd_summarize(
        csv_path,
        output_format=output_format,
        show_items=show_items,
        content_type=content_type,
    )
    if code:
        raise typer.Exit(code)


@app.command("rules")
def rules_cmd() -> None:
    """Explain how each category is decided."""

    render_rules(Console())


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and set up logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


if __name__ == "__main__":  # pragma: no cover
    app()

"""
CLI for Guidebook - query the guideline knowledge base.

Usage:
    guidebook categories             # List categories and entry counts
    guidebook show unit-test-style   # Entries of one category
    guidebook search "early return"  # Keyword search over titles and bodies
    guidebook context code-review    # Guidance for a development task
"""

import json
import sys
from pathlib import Path
from typing import List

import click
import yaml
from pydantic import ValidationError

from ... import __version__
from ...config import get_settings
from ...core.guidelines import (
    DevelopmentContext,
    GuidelineStore,
    entry_to_dict,
    format_entries_markdown,
)
from ...core.guidelines.categories import CONTEXT_CATEGORIES
from ...domain.exceptions import GuidelinesError
from ...domain.models import GuidelineCategory, GuidelineEntry
from ...protocols import ProgressReporter
from ...services import GuidelinesProvider
from ...ui import (
    CIProgressReporter,
    NullProgressReporter,
    RichProgressReporter,
    render_categories,
    render_entries,
)

OUTPUT_FORMATS = ["rich", "markdown", "json", "yaml"]


def make_reporter(ci: bool, quiet: bool = False) -> ProgressReporter:
    """Silent when quiet, plain output in CI or when configured, Rich otherwise."""
    if quiet:
        return NullProgressReporter()
    if ci or get_settings().GUIDEBOOK_OUTPUT == "plain":
        return CIProgressReporter()
    return RichProgressReporter()


def load_store_or_exit(ctx: click.Context) -> GuidelineStore:
    """Build the store for this invocation, exiting with status 1 on load errors."""
    provider = GuidelinesProvider(settings=get_settings(), progress=ctx.obj["reporter"])
    try:
        return provider.load_store(ctx.obj["source"])
    except GuidelinesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def emit(entries: List[GuidelineEntry], output_format: str, heading: str | None = None) -> None:
    """Write query results to stdout in the requested format."""
    if output_format == "rich":
        render_entries(entries)
    elif output_format == "markdown":
        click.echo(format_entries_markdown(entries, heading=heading), nl=False)
    elif output_format == "json":
        click.echo(json.dumps([entry_to_dict(e) for e in entries], indent=2))
    else:
        click.echo(
            yaml.safe_dump(
                [entry_to_dict(e) for e in entries],
                sort_keys=False,
                allow_unicode=True,
            ),
            nl=False,
        )


format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="rich",
    show_default=True,
    help="Output format for the matching guidelines.",
)


@click.group()
@click.version_option(version=__version__, prog_name="guidebook")
@click.option(
    "--source",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Guidelines markdown file. Defaults to project or built-in guidelines.",
)
@click.option("--ci", is_flag=True, help="Plain status output without colors.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress status messages.")
@click.pass_context
def main(ctx: click.Context, source: Path | None, ci: bool, quiet: bool):
    """Guidebook - guideline knowledge base for AI coding assistants."""
    ctx.ensure_object(dict)
    try:
        get_settings()
    except ValidationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)
    ctx.obj["source"] = source
    ctx.obj["reporter"] = make_reporter(ci, quiet)


@main.command()
@click.pass_context
def categories(ctx: click.Context):
    """List every category and how many entries it holds."""
    store = load_store_or_exit(ctx)
    counts = {c: len(store.get_by_category(c)) for c in GuidelineCategory}
    render_categories(store.all_categories(), counts)


@main.command()
def contexts():
    """List development contexts and the categories they draw from."""
    for context, bound in CONTEXT_CATEGORIES.items():
        click.echo(f"{context.value}: {', '.join(c.value for c in bound)}")


@main.command()
@click.argument("category")
@format_option
@click.pass_context
def show(ctx: click.Context, category: str, output_format: str):
    """Show all guidelines of CATEGORY in document order."""
    store = load_store_or_exit(ctx)
    try:
        entries = store.get_by_category(category)
    except GuidelinesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    emit(entries, output_format, heading=category)


@main.command()
@click.argument("keyword", default="")
@format_option
@click.pass_context
def search(ctx: click.Context, keyword: str, output_format: str):
    """Find guidelines whose title or body contains KEYWORD (case-insensitive)."""
    store = load_store_or_exit(ctx)
    emit(store.search(keyword), output_format)


@main.command()
@click.argument("name", type=click.Choice([c.value for c in DevelopmentContext]))
@format_option
@click.pass_context
def context(ctx: click.Context, name: str, output_format: str):
    """Show the guidelines relevant to development context NAME."""
    store = load_store_or_exit(ctx)
    emit(store.for_context(name), output_format, heading=f"Guidelines for {name}")


@main.command()
@click.argument("entry_id")
@format_option
@click.pass_context
def get(ctx: click.Context, entry_id: str, output_format: str):
    """Show a single guideline by ENTRY_ID (e.g. code-quality/early-returns)."""
    store = load_store_or_exit(ctx)
    try:
        entry = store.get(entry_id)
    except GuidelinesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    emit([entry], output_format)


if __name__ == "__main__":
    main()

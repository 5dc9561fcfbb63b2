"""
Rich rendering of guideline entries for the terminal.
"""

from typing import Iterable, List

from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..domain.models import GuidelineCategory, GuidelineEntry
from .console import console, BRAND_BORDER


def render_entries(entries: List[GuidelineEntry]) -> None:
    """Print entries as panels, with a category rule whenever the category changes."""
    if not entries:
        console.print("[muted]No matching guidelines.[/muted]")
        return

    current_category = None
    for entry in entries:
        if entry.category != current_category:
            console.rule(f"[category]{entry.category.value}[/category]", style=BRAND_BORDER)
            current_category = entry.category
        console.print(_entry_panel(entry))

    console.print(f"[muted]{len(entries)} guideline(s)[/muted]")


def _entry_panel(entry: GuidelineEntry) -> Panel:
    body = ""
    for item in entry.body:
        if "\n" in item:
            body += f"\n{item}\n\n"
        else:
            body += f"- {item}\n"
    for example in entry.examples:
        first_label, second_label = example.labels
        body += f"\n**{first_label}:** {example.first}\n\n**{second_label}:** {example.second}\n"

    title = Text()
    title.append(entry.title, style="title")
    title.append(f"  {entry.id}", style="guideline")
    return Panel(Markdown(body), title=title, title_align="left", border_style=BRAND_BORDER)


def render_categories(present: Iterable[GuidelineCategory], counts: dict) -> None:
    """Print a table of every category with its entry count."""
    table = Table(border_style=BRAND_BORDER)
    table.add_column("Category", style="category")
    table.add_column("Entries", justify="right")
    table.add_column("In source", justify="center")

    present = set(present)
    for category in GuidelineCategory:
        table.add_row(
            category.value,
            str(counts.get(category, 0)),
            "yes" if category in present else "[muted]no[/muted]",
        )
    console.print(table)

"""
Rendering of guideline entries.

Markdown blocks are meant for injection into an assistant prompt; dicts feed
the JSON and YAML output of the CLI.
"""

from typing import Dict, List, Optional

from ...domain.models import GuidelineEntry


def entry_to_dict(entry: GuidelineEntry) -> Dict:
    """Plain, JSON/YAML friendly representation of an entry."""
    return {
        "id": entry.id,
        "category": entry.category.value,
        "title": entry.title,
        "body": list(entry.body),
        "examples": [
            {
                "kind": example.kind,
                example.labels[0].lower(): example.first,
                example.labels[1].lower(): example.second,
            }
            for example in entry.examples
        ],
    }


def format_entries_markdown(
    entries: List[GuidelineEntry],
    heading: Optional[str] = None,
) -> str:
    """
    Render entries as a markdown block suitable for prompt injection.

    Entries are grouped under their category in the order they are given.
    """
    content = ""
    if heading:
        content += f"## {heading}\n\n"

    current_category = None
    for entry in entries:
        if entry.category != current_category:
            if current_category is not None:
                content += "\n"
            content += f"### {entry.category.value}\n\n"
            current_category = entry.category

        content += f"- [{entry.id}] **{entry.title}**\n"
        for item in entry.body:
            if "\n" in item:
                # Code blocks keep their own line structure
                indented = "\n".join(f"    {line}" for line in item.splitlines())
                content += f"{indented}\n"
            else:
                content += f"  - {item}\n"
        for example in entry.examples:
            first_label, second_label = example.labels
            content += f"  - {first_label}: {_inline(example.first)}\n"
            content += f"    {second_label}: {_inline(example.second)}\n"

    return content


def _inline(text: str) -> str:
    if "\n" not in text:
        return text
    return "\n" + "\n".join(f"      {line}" for line in text.splitlines())

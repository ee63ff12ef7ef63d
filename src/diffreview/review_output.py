"""Format display units as an HTML page, JSON, or plain text."""

import html
import json
from typing import List, Sequence

from diffreview.display_unit import DisplayUnit


EMPTY_MESSAGE = "No diff content"

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Diff review</title>
<style>
{style_defs}
</style>
</head>
<body>
{sections}
</body>
</html>
"""


def format_html(units: Sequence[DisplayUnit], style_defs: str = "", css_class: str = "highlight") -> str:
    """
    Build a standalone HTML page with one section per display unit.

    Args:
        units: Display units in diff order
        style_defs: CSS rules for the highlighted markup
        css_class: Class applied to each <pre> block

    Returns:
        HTML document text
    """
    if not units:
        sections = f'<p class="diff-empty">{EMPTY_MESSAGE}</p>'

    else:
        sections = "\n".join(
            f'<section class="diff-file" id="diff-file-{unit.index}">\n'
            f'<h2>{html.escape(unit.title)}</h2>\n'
            f'<pre class="{html.escape(css_class)}">{unit.body.markup}</pre>\n'
            f'</section>'
            for unit in units
        )

    return _PAGE_TEMPLATE.format(style_defs=style_defs, sections=sections)


def format_json(units: Sequence[DisplayUnit]) -> str:
    """
    Serialize display units as a JSON array.

    Args:
        units: Display units in diff order

    Returns:
        JSON text
    """
    return json.dumps([
        {
            "index": unit.index,
            "title": unit.title,
            "language": unit.language,
            "highlighted": unit.body.highlighted,
            "lineCount": unit.line_count,
            "body": unit.body.markup
        }
        for unit in units
    ], indent=2)


def format_text(units: Sequence[DisplayUnit]) -> str:
    """
    Show display units as plain text, each under its title.

    Args:
        units: Display units in diff order

    Returns:
        Text output
    """
    if not units:
        return EMPTY_MESSAGE + "\n"

    blocks: List[str] = []
    for unit in units:
        underline = "=" * len(unit.title)
        blocks.append(f"{unit.title}\n{underline}\n{unit.text}\n")

    return "\n".join(blocks)

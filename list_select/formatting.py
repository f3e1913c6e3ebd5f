from __future__ import annotations

import json
from typing import Any, Iterable, List

from rich.text import Text

from .controller import RowView
from .items import Item, Labeled


def format_row(view: RowView) -> Text:
    """Default row renderer: checkbox marker plus the display text."""
    marker = "[x]" if view.selected else "[ ]"
    line = Text(f"{marker} ")
    line.append(view.display_text)
    if view.disabled:
        line.stylize("dim strike")
    elif view.selected:
        line.stylize("green", 0, len(marker))
    if view.focused:
        line.stylize("reverse")
    return line


def item_value(item: Item) -> Any:
    """The value handed back to callers: ``value`` for labeled items, else the text."""
    if isinstance(item, Labeled):
        return item.value if item.value is not None else item.name
    return item.text


def format_result(items: Iterable[Item], as_json: bool = False) -> str:
    """Render chosen items for stdout, one per line or as a JSON array."""
    chosen: List[Item] = list(items)
    if as_json:
        return json.dumps([item_value(item) for item in chosen], ensure_ascii=False)
    return "\n".join(item.display_text for item in chosen)

"""Blacklist filtering, display formatting and marquee text assembly."""

from typing import Iterable

from .config import NO_DATA_MESSAGE, SEPARATOR
from .sources.base import HotItem


def filter_items(items: Iterable[HotItem], blacklist: Iterable[str]) -> list[HotItem]:
    """Drop items whose title contains any blacklisted word (case-insensitive).

    Order is kept. Blank blacklist entries are ignored.
    """
    words = [w.casefold() for w in blacklist if w and w.strip()]
    if not words:
        return list(items)
    return [
        item for item in items
        if not any(w in item.title.casefold() for w in words)
    ]


def render_item(item: HotItem, label: str) -> str:
    """``[label] title (popularity)``, label being the configured source name."""
    return f"[{label}] {item.title} ({item.formatted_popularity})"


def placeholder_line(name: str) -> str:
    return f"[{name}数据加载失败]"


def assemble_text(lines: Iterable[str]) -> str:
    """Join display lines with the separator, plus one trailing separator."""
    lines = list(lines)
    if not lines:
        return NO_DATA_MESSAGE
    return SEPARATOR.join(lines) + SEPARATOR

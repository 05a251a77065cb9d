"""Per-site hot-list adapters and the registry that maps names to them."""

from .base import FetchError, HotItem, HotSource, format_popularity, parse_lenient
from .registry import SourceRegistry, default_registry

__all__ = [
    "FetchError",
    "HotItem",
    "HotSource",
    "SourceRegistry",
    "default_registry",
    "format_popularity",
    "parse_lenient",
]

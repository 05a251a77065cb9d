"""HotItem dataclass, popularity helpers, and the HotSource ABC."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass

import requests

from ..config import REQUEST_TIMEOUT, USER_AGENT, SourceConfig
from ..log import get_logger
from .http import get_session


class FetchError(Exception):
    """A source could not be fetched or its payload had the wrong shape."""


def parse_lenient(value) -> int:
    """Parse a popularity value, defaulting to 0.

    Accepts ints, floats and numeric strings with comma grouping
    ("1,234,567"). Anything else, and any negative number, is 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        n = value
    else:
        text = str(value).replace(",", "").strip()
        try:
            n = int(text)
        except ValueError:
            try:
                n = float(text)
            except ValueError:
                return 0
    try:
        n = int(n)
    except (OverflowError, ValueError):  # inf / nan
        return 0
    return max(n, 0)


def format_popularity(n: int) -> str:
    """Render a popularity score: 万 above 1,000,000, 千 above 10,000."""
    if n > 1_000_000:
        return f"{n / 10000:.1f}万"
    if n > 10_000:
        return f"{n / 1000:.1f}千"
    return str(n)


@dataclass(frozen=True)
class HotItem:
    """One normalized trending entry."""
    rank: int
    title: str
    popularity: int = 0
    source: str = ""  # canonical label, e.g. "微博"

    @property
    def formatted_popularity(self) -> str:
        return format_popularity(self.popularity)


def dig(payload, *path):
    """Walk dict keys / list indexes, raising FetchError on a missing step."""
    node = payload
    for step in path:
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError):
            raise FetchError(f"missing {'.'.join(str(p) for p in path)}") from None
    return node


class HotSource(ABC):
    """Fetches one schema and maps it to HotItems.

    Subclasses set ``label`` and ``title_field`` and implement
    ``extract``; quirks go in ``skip_leading``, ``build_url`` and
    ``decode``.
    """

    label: str = "unknown"
    title_field: str = "title"
    popularity_field: str = ""
    skip_leading: int = 0  # pinned entries ahead of the real ranking

    def build_url(self, source: SourceConfig) -> str:
        return source.url

    def decode(self, body: str):
        try:
            return json.loads(body)
        except ValueError as e:
            raise FetchError(f"malformed JSON: {e}") from e

    @abstractmethod
    def extract(self, payload) -> list:
        """Return the list of raw entries from the decoded payload."""
        ...

    def popularity_of(self, entry: dict) -> int:
        return parse_lenient(entry.get(self.popularity_field))

    def fetch(self, source: SourceConfig, session=None) -> list[HotItem]:
        """GET, decode and normalize one source. Raises FetchError."""
        if session is None:
            session = get_session()

        url = self.build_url(source)
        try:
            r = session.get(url, headers={"User-Agent": USER_AGENT}, timeout=REQUEST_TIMEOUT)
            r.raise_for_status()
        except requests.RequestException as e:
            raise FetchError(f"{source.name}: {e}") from e

        entries = self.extract(self.decode(r.text))
        if not isinstance(entries, list):
            raise FetchError(f"{source.name}: expected a list, got {type(entries).__name__}")

        items = self.normalize(entries[self.skip_leading:])[:source.show_count]
        get_logger().debug("%s: %d items from %s", source.name, len(items), url)
        return items

    def normalize(self, entries: list) -> list[HotItem]:
        """Drop untitled entries and rank the rest 1..n in response order."""
        items = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise FetchError(f"{self.label}: unexpected entry {entry!r:.60}")
            title = entry.get(self.title_field)
            if not isinstance(title, str) or not title.strip():
                continue
            items.append(HotItem(
                rank=len(items) + 1,
                title=title,
                popularity=self.popularity_of(entry),
                source=self.label,
            ))
        return items

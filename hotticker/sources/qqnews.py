"""Tencent News hot ranking source (idlist[0].newslist[])."""

from .base import HotSource, dig, parse_lenient


class QQNewsSource(HotSource):
    label = "腾讯新闻"
    title_field = "title"
    # newslist[0] is a pinned banner, not part of the ranking
    skip_leading = 1

    def extract(self, payload) -> list:
        return dig(payload, "idlist", 0, "newslist")

    def popularity_of(self, entry: dict) -> int:
        hot_event = entry.get("hotEvent")
        if not isinstance(hot_event, dict):
            return 0
        return parse_lenient(hot_event.get("hotScore"))

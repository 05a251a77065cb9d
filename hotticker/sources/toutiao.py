"""Toutiao hot-board source (data[] with string HotValue)."""

from .base import HotSource, dig


class ToutiaoSource(HotSource):
    label = "今日头条"
    title_field = "Title"
    popularity_field = "HotValue"

    def extract(self, payload) -> list:
        return dig(payload, "data")

"""Weibo hot-search source (data.realtime[])."""

from .base import HotSource, dig


class WeiboSource(HotSource):
    label = "微博"
    title_field = "word"
    popularity_field = "num"

    def extract(self, payload) -> list:
        return dig(payload, "data", "realtime")

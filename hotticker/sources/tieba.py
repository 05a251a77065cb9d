"""Baidu Tieba hot-topic source (data.bang_topic.topic_list[])."""

from .base import HotSource, dig


class TiebaSource(HotSource):
    label = "贴吧"
    title_field = "topic_name"
    popularity_field = "discuss_num"

    def extract(self, payload) -> list:
        return dig(payload, "data", "bang_topic", "topic_list")

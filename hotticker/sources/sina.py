"""Sina news daily ranking source.

The configured URL only carries the category (``top_cat``). The real
request goes to top.sina.com.cn with today's date and a few extra rows,
and the body is a JS assignment rather than plain JSON.
"""

from datetime import date
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse

from ..config import SourceConfig
from .base import FetchError, HotSource, dig

RANKING_URL = "https://top.sina.com.cn/ws/GetTopDataList.php"
JS_PREFIX = "var data = "
EXTRA_ROWS = 5


class SinaSource(HotSource):
    label = "新浪新闻"
    title_field = "title"
    popularity_field = "top_num"  # comma grouped, e.g. "12,345"

    def __init__(self, today: Optional[date] = None):
        self._today = today

    def build_url(self, source: SourceConfig) -> str:
        query = parse_qs(urlparse(source.url).query)
        category = query.get("top_cat", [""])[0]
        if not category:
            raise FetchError(f"{source.name}: no top_cat in {source.url}")
        day = self._today or date.today()
        params = {
            "top_type": "day",
            "top_cat": category,
            "top_time": f"{day:%Y%m%d}",
            "top_show_num": source.show_count + EXTRA_ROWS,
        }
        return f"{RANKING_URL}?{urlencode(params)}"

    def decode(self, body: str):
        text = body.strip()
        if text.startswith(JS_PREFIX):
            text = text[len(JS_PREFIX):]
        return super().decode(text.rstrip(";").strip())

    def extract(self, payload) -> list:
        return dig(payload, "data")

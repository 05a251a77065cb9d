"""Configured source name -> adapter, built once and read-only afterwards."""

from types import MappingProxyType
from typing import Mapping, Optional

from .base import HotSource
from .qqnews import QQNewsSource
from .sina import SinaSource
from .tieba import TiebaSource
from .toutiao import ToutiaoSource
from .weibo import WeiboSource


class SourceRegistry:
    """Immutable lookup from a configured source name to its adapter."""

    def __init__(self, adapters: Mapping[str, HotSource]):
        self._adapters = MappingProxyType(dict(adapters))

    def resolve(self, name: str) -> Optional[HotSource]:
        """Return the adapter for ``name``, or None if nothing handles it."""
        return self._adapters.get(name)

    @property
    def names(self) -> list[str]:
        return list(self._adapters)

    def __contains__(self, name) -> bool:
        return name in self._adapters

    def __len__(self) -> int:
        return len(self._adapters)


def build_default_registry() -> SourceRegistry:
    sina = SinaSource()
    return SourceRegistry({
        "微博热搜": WeiboSource(),
        "贴吧热议": TiebaSource(),
        "腾讯新闻": QQNewsSource(),
        # one adapter serves every Sina category
        "新浪国内": sina,
        "新浪国际": sina,
        "今日头条": ToutiaoSource(),
    })


default_registry = build_default_registry()

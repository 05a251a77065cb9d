"""Tests for hotticker/ticker.py: blacklist filter, rendering, assembly."""

from hotticker.config import NO_DATA_MESSAGE
from hotticker.sources.base import HotItem
from hotticker.ticker import assemble_text, filter_items, placeholder_line, render_item


def _items(*titles):
    return [HotItem(rank=i, title=t, popularity=100, source="s") for i, t in enumerate(titles, 1)]


class TestFilterItems:
    def test_drops_blacklisted(self):
        result = filter_items(_items("big ads deal", "weather"), {"ads"})
        assert [i.title for i in result] == ["weather"]

    def test_case_insensitive(self):
        result = filter_items(_items("Big ADS Deal", "Papi酱直播"), ["ads", "PAPI酱"])
        assert result == []

    def test_substring_match_cjk(self):
        result = filter_items(_items("某明星离婚", "地铁新线开通"), ["明星"])
        assert [i.title for i in result] == ["地铁新线开通"]

    def test_preserves_order(self):
        items = _items("c", "a", "spam b", "d")
        result = filter_items(items, ["spam"])
        assert [i.title for i in result] == ["c", "a", "d"]
        assert [i.rank for i in result] == [1, 2, 4]

    def test_idempotent(self):
        items = _items("one", "ads two", "three", "ADS four")
        once = filter_items(items, ["ads"])
        assert filter_items(once, ["ads"]) == once

    def test_empty_blacklist_keeps_all(self):
        items = _items("a", "b")
        assert filter_items(items, []) == items

    def test_blank_entries_ignored(self):
        items = _items("a", "b")
        assert filter_items(items, ["", "  "]) == items


class TestRenderItem:
    def test_format(self):
        item = HotItem(rank=1, title="x", popularity=500_000, source="微博")
        assert render_item(item, "A") == "[A] x (500.0千)"

    def test_uses_configured_label_not_source(self):
        item = HotItem(rank=1, title="foo", popularity=2_000_000, source="微博")
        assert render_item(item, "微博热搜") == "[微博热搜] foo (200.0万)"

    def test_small_popularity(self):
        item = HotItem(rank=1, title="t", popularity=0)
        assert render_item(item, "S") == "[S] t (0)"


class TestAssembleText:
    def test_joins_with_trailing_separator(self):
        assert assemble_text(["a", "b"]) == "a    b    "

    def test_single_line(self):
        assert assemble_text(["a"]) == "a    "

    def test_empty_is_fallback(self):
        assert assemble_text([]) == NO_DATA_MESSAGE
        assert assemble_text(iter([])) == NO_DATA_MESSAGE

    def test_placeholder_line(self):
        assert placeholder_line("B") == "[B数据加载失败]"

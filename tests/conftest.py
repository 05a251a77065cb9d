"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest
import requests

from hotticker.config import PipelineConfig, SourceConfig


def make_response(text: str = "", status_code: int = 200) -> MagicMock:
    """A requests.Response stand-in carrying ``text``."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def fake_session():
    """A session whose .get returns whatever the test assigns."""
    session = MagicMock()
    session.get.return_value = make_response("{}")
    return session


@pytest.fixture
def make_source():
    def _make(name="微博热搜", url="https://example.com/hot", show_count=10, enabled=True):
        return SourceConfig(name=name, url=url, show_count=show_count, enabled=enabled)
    return _make


@pytest.fixture
def make_config():
    def _make(*sources, blacklist=(), interval=10):
        return PipelineConfig(
            sources=tuple(sources),
            refresh_interval_minutes=interval,
            keyword_blacklist=tuple(blacklist),
        )
    return _make


@pytest.fixture
def weibo_payload():
    return {
        "ok": 1,
        "data": {
            "realtime": [
                {"word": "台风登陆", "num": 2_345_678, "note": "台风登陆"},
                {"word": "", "num": 999},
                {"word": "高考成绩公布", "num": 56_789},
                {"word": "新品发布会", "num": "n/a"},
            ]
        },
    }


@pytest.fixture
def tieba_payload():
    return {
        "errno": 0,
        "data": {
            "bang_topic": {
                "topic_list": [
                    {"topic_name": "期末考试", "discuss_num": 123_456},
                    {"topic_name": "新赛季开打", "discuss_num": 9_000},
                ]
            }
        },
    }


@pytest.fixture
def qqnews_payload():
    return {
        "ret": 0,
        "idlist": [
            {
                "newslist": [
                    {"title": "腾讯新闻热点榜", "hotEvent": {"hotScore": 0}},
                    {"title": "航天员出舱", "hotEvent": {"hotScore": 4_120_000}},
                    {"title": "地铁新线开通"},
                    {"title": "暴雨预警", "hotEvent": {"hotScore": 8_800}},
                ]
            }
        ],
    }


@pytest.fixture
def sina_body():
    return (
        'var data = {"data":[{"title":"国务院常务会议","top_num":"1,234,567","url":"https://news.sina.com.cn/a"},'
        '{"title":"铁路暑运","top_num":"23,456"}],"top_time":"20240506"};'
    )


@pytest.fixture
def toutiao_payload():
    return {
        "status": "success",
        "data": [
            {"Title": "新能源车销量", "HotValue": "15234567"},
            {"Title": "高温天气持续", "HotValue": "bad"},
            {"Title": None, "HotValue": "100"},
        ],
    }

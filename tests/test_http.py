"""Tests for hotticker/sources/http.py: shared pooled session."""

from unittest.mock import patch

import pytest

from hotticker.config import USER_AGENT
from hotticker.sources import http


@pytest.fixture(autouse=True)
def fresh_session():
    http.close_session()
    yield
    http.close_session()


class TestGetSession:
    def test_reused(self):
        assert http.get_session() is http.get_session()

    def test_browser_user_agent(self):
        assert http.get_session().headers["User-Agent"] == USER_AGENT

    def test_no_transport_retries(self):
        adapter = http.get_session().get_adapter("https://weibo.com/")
        assert adapter.max_retries.total == 0

    def test_close_resets(self):
        first = http.get_session()
        with patch.object(first, "close") as mock_close:
            http.close_session()
            mock_close.assert_called_once()
        assert http.get_session() is not first

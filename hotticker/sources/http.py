"""Shared pooled HTTP session for all source adapters."""

import threading
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from ..config import USER_AGENT

_SESSION: Optional[requests.Session] = None
_LOCK = threading.Lock()


def get_session() -> requests.Session:
    """Return the process-wide session, creating it on first use.

    No urllib3 retries: a failed source waits for the next refresh cycle.
    """
    global _SESSION
    if _SESSION is not None:
        return _SESSION
    with _LOCK:
        if _SESSION is None:
            session = requests.Session()
            session.headers.update({"User-Agent": USER_AGENT})
            adapter = HTTPAdapter(max_retries=0, pool_connections=10, pool_maxsize=10)
            session.mount("https://", adapter)
            session.mount("http://", adapter)
            _SESSION = session
    return _SESSION


def close_session():
    """Drop the shared session (used on shutdown)."""
    global _SESSION
    with _LOCK:
        if _SESSION is not None:
            _SESSION.close()
            _SESSION = None

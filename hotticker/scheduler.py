"""Refresh scheduler: one cycle at startup, then one per interval, never overlapping."""

import threading
from typing import Callable, Optional

from .config import REFRESH_FAILED_MESSAGE, PipelineConfig, load_config
from .engine import TickerEngine
from .log import get_logger

IDLE = "idle"
RUNNING = "running"


class RefreshScheduler:
    """Idle/Running state machine driving TickerEngine on a timer.

    A tick that lands while a cycle is still running is dropped. The
    interval is re-read from each cycle's config snapshot.
    """

    def __init__(self, engine: TickerEngine = None,
                 load_config: Callable[[], PipelineConfig] = load_config,
                 publish: Optional[Callable[[str], None]] = None):
        self.engine = engine or TickerEngine()
        self.load_config = load_config
        self.publish = publish
        self.latest_text = ""
        self.interval_minutes: Optional[int] = None
        self._state = IDLE
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._timer: Optional[threading.Thread] = None
        self._worker: Optional[threading.Thread] = None

    @property
    def state(self) -> str:
        return self._state

    def _begin(self) -> bool:
        with self._lock:
            if self._state == RUNNING:
                return False
            self._state = RUNNING
            return True

    def _cycle(self):
        logger = get_logger()
        try:
            try:
                config = self.load_config()
                self.interval_minutes = config.refresh_interval_minutes
                text = self.engine.run(config)
            except Exception as e:
                logger.exception("Refresh failed: %s", e)
                text = REFRESH_FAILED_MESSAGE
            self.latest_text = text
            logger.debug("Published %d chars", len(text))
            if self.publish is not None:
                try:
                    self.publish(text)
                except Exception as e:
                    logger.exception("Publish failed: %s", e)
        finally:
            with self._lock:
                self._state = IDLE

    def run_cycle(self) -> bool:
        """Run one cycle in the calling thread. False if one was already running."""
        if not self._begin():
            get_logger().info("Refresh still running, skipping")
            return False
        self._cycle()
        return True

    def tick(self) -> bool:
        """Timer expiry: start a cycle on a worker thread if idle."""
        if not self._begin():
            get_logger().info("Refresh still running, skipping tick")
            return False
        self._worker = threading.Thread(target=self._cycle, name="refresh", daemon=True)
        self._worker.start()
        return True

    def _loop(self):
        self.run_cycle()
        get_logger().info("Refreshing every %d min", self._interval_seconds() // 60)
        while not self._stop.wait(self._interval_seconds()):
            self.tick()

    def _interval_seconds(self) -> float:
        minutes = self.interval_minutes or PipelineConfig().refresh_interval_minutes
        return minutes * 60

    def start(self):
        """Refresh now, then every interval, on a daemon timer thread."""
        if self._timer is not None and self._timer.is_alive():
            return
        self._stop.clear()
        self._timer = threading.Thread(target=self._loop, name="refresh-timer", daemon=True)
        self._timer.start()

    def stop(self, timeout: Optional[float] = None):
        self._stop.set()
        if self._timer is not None:
            self._timer.join(timeout)
        self.join(timeout)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until stop() is called. True once stopped."""
        return self._stop.wait(timeout)

    def join(self, timeout: Optional[float] = None):
        """Wait for the last tick-started cycle to finish."""
        if self._worker is not None:
            self._worker.join(timeout)

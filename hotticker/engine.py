"""TickerEngine: fetch all enabled sources in parallel, then filter, format and join."""

import concurrent.futures

from .config import LOAD_FAILED_MESSAGE, REQUEST_TIMEOUT, PipelineConfig, SourceConfig
from .log import get_logger
from .sources.registry import SourceRegistry, default_registry
from .ticker import assemble_text, filter_items, placeholder_line, render_item

# Slack on top of the per-request timeout before a source counts as hung
JOIN_GRACE = 5


class TickerEngine:
    """Runs one refresh cycle and returns the marquee text.

    Every enabled source is fetched on its own worker. A source that
    raises or overruns the join deadline turns into its placeholder line;
    the other sources are unaffected. Output order is config order.
    """

    def __init__(self, registry: SourceRegistry = None, session=None,
                 join_timeout: float = REQUEST_TIMEOUT + JOIN_GRACE):
        self.registry = registry or default_registry
        self.session = session
        self.join_timeout = join_timeout

    def run(self, config: PipelineConfig) -> str:
        """Never raises: an unexpected failure becomes LOAD_FAILED_MESSAGE."""
        try:
            return assemble_text(self.collect(config))
        except Exception as e:
            get_logger().exception("Cycle failed: %s", e)
            return LOAD_FAILED_MESSAGE

    def collect(self, config: PipelineConfig) -> list[str]:
        """Display lines for all enabled sources, in configured order."""
        logger = get_logger()
        sources = config.enabled_sources
        if not sources:
            logger.info("No enabled sources")
            return []

        results: list[list[str]] = [[] for _ in sources]
        pool = concurrent.futures.ThreadPoolExecutor(
            max_workers=len(sources), thread_name_prefix="fetch"
        )
        try:
            futures = {
                pool.submit(self.process_source, src, config.keyword_blacklist): i
                for i, src in enumerate(sources)
            }
            done, pending = concurrent.futures.wait(futures, timeout=self.join_timeout)
            for future in done:
                src = sources[futures[future]]
                try:
                    lines = future.result()
                    results[futures[future]] = lines
                    logger.debug("%s: %d lines", src.name, len(lines))
                except Exception as e:
                    logger.warning("%s: failed: %s", src.name, e)
                    results[futures[future]] = [placeholder_line(src.name)]
            for future in pending:
                src = sources[futures[future]]
                logger.warning("%s: no response after %ss", src.name, self.join_timeout)
                results[futures[future]] = [placeholder_line(src.name)]
        finally:
            # don't block the cycle on a hung request; it dies at its own timeout
            pool.shutdown(wait=False, cancel_futures=True)

        return [line for lines in results for line in lines]

    def process_source(self, source: SourceConfig, blacklist) -> list[str]:
        """Fetch one source and render its surviving items. May raise."""
        adapter = self.registry.resolve(source.name)
        if adapter is None:
            get_logger().debug("%s: no adapter registered, skipping", source.name)
            return []
        items = adapter.fetch(source, session=self.session)
        return [render_item(item, source.name) for item in filter_items(items, blacklist)]

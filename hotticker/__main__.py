"""CLI entry point: python -m hotticker."""

import argparse
import sys

from .config import CONFIG_FILE, load_config
from .log import get_logger, set_verbose


def print_text(text: str):
    """Console stand-in for the marquee renderer."""
    print(text, flush=True)


def cmd_once(args):
    from .engine import TickerEngine

    text = TickerEngine().run(load_config())
    print_text(text)


def cmd_run(args):
    from .scheduler import RefreshScheduler
    from .sources.http import close_session

    scheduler = RefreshScheduler(publish=print_text)
    scheduler.start()
    get_logger().info("Refreshing on a timer (Ctrl-C to stop)")
    try:
        while not scheduler.wait(3600):
            pass
    except KeyboardInterrupt:
        get_logger().info("Stopping...")
    finally:
        scheduler.stop(timeout=5)
        close_session()


def cmd_sources(args):
    from .sources import default_registry

    config = load_config()
    print(f"\n  Sources ({CONFIG_FILE}):\n")
    for i, src in enumerate(config.sources, 1):
        marker = "+" if src.enabled else " "
        handled = "" if src.name in default_registry else "  (no adapter)"
        print(f"  {i:2d}. [{marker}] {src.name}  show={src.show_count}{handled}")
    print(f"\n  Refresh: {config.refresh_interval_minutes} min, "
          f"{len(config.keyword_blacklist)} blacklisted keywords")


def main():
    parser = argparse.ArgumentParser(
        description="Desktop hot-topic ticker: aggregates trending lists into one scrolling line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    sub.add_parser("run", help="Refresh on a timer and print each update")
    sub.add_parser("once", help="Run a single refresh and print the text")
    sub.add_parser("sources", help="List configured sources")

    args = parser.parse_args()

    if args.verbose:
        set_verbose(True)

    if not args.cmd:
        parser.print_help()
        return

    if args.cmd == "run":
        cmd_run(args)
    elif args.cmd == "once":
        cmd_once(args)
    elif args.cmd == "sources":
        cmd_sources(args)


if __name__ == "__main__":
    sys.exit(main())

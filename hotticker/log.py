"""Console + daily file logging for the ticker."""

import logging
import sys
from datetime import datetime

from .config import LOGS_DIR

_logger = None


def get_logger() -> logging.Logger:
    """Get or create the ticker logger with file + console handlers."""
    global _logger
    if _logger is not None:
        return _logger

    _logger = logging.getLogger("hotticker")
    _logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on re-import
    if _logger.handlers:
        return _logger

    # Console handler: INFO by default, DEBUG with --verbose.
    # stderr keeps stdout free for the published ticker text.
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter("  %(message)s"))
    _logger.addHandler(console)

    # File handler: always DEBUG, one file per day
    try:
        LOGS_DIR.mkdir(parents=True, exist_ok=True)
        log_file = LOGS_DIR / f"hotticker_{datetime.now():%Y%m%d}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as e:
        _logger.warning("File logging disabled: %s", e)
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s %(threadName)s %(message)s", datefmt="%H:%M:%S")
        )
        _logger.addHandler(file_handler)

    return _logger


def set_verbose(verbose: bool = True):
    """Switch console handler to DEBUG level."""
    logger = get_logger()
    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG if verbose else logging.INFO)

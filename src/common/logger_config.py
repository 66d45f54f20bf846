# src/common/logger_config.py
"""Console logging for the storefront session."""

import logging
from typing import Optional

from rich.logging import RichHandler

from src.common.config.settings import settings

# Third-party loggers that only matter at WARNING and above
NOISY_LOGGERS = ("mysql.connector", "requests", "urllib3")


def setup_logging(level: Optional[str] = None) -> RichHandler:
    """
    Routes every log record through a single RichHandler on the root logger.

    The level comes from LOG_LEVEL unless one is passed; unknown names fall back
    to INFO. Calling it again replaces the handler instead of stacking another.
    """
    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    rich_handler = RichHandler(
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,  # product names may contain [brackets]
        rich_tracebacks=True,
        tracebacks_suppress=[logging],
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = [rich_handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return rich_handler

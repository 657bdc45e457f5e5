"""Logging setup for the blog SEO scorer.

Level and log file come from ``Config`` (``LOG_LEVEL`` / ``LOG_FILE``)
unless the caller passes them explicitly, as the CLI does for
``--log-level`` and ``--log-file``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from blog_seo.config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Third-party loggers kept at ERROR
QUIET_LOGGERS = ('bs4',)


def setup_logging(
    config: Optional[Config] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = LOG_FORMAT,
) -> int:
    """Configure the root logger.

    Log records go to stderr, plus ``log_file`` when one is set, so JSON
    written to stdout is never mixed with log lines.

    Args:
        config: Runtime configuration supplying default level and file
            (read from the environment if None)
        level: Level name overriding ``config.log_level``
        log_file: Path overriding ``config.log_file``
        format_string: Record format

    Returns:
        The numeric level that was applied
    """
    if config is None:
        config = Config.from_env()

    level_name = (level or config.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]

    log_file = log_file or config.log_file
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        handlers=handlers,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)

    return numeric_level


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (usually ``get_logger(__name__)``)."""
    return logging.getLogger(name)

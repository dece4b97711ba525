"""structlog setup shared by the CLI and pipeline"""

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Filter below level and write rendered events to stderr, keeping stdout for results."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

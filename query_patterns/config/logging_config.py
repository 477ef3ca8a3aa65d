"""Logging setup for command line entry points.

The library itself never configures logging on import; only the build CLI
calls configure_logging().
"""

import logging

from .settings import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for query_patterns tooling."""
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("query_patterns").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("sentence_transformers").setLevel(logging.WARNING)
    logging.getLogger("transformers").setLevel(logging.WARNING)
    logging.getLogger("filelock").setLevel(logging.WARNING)

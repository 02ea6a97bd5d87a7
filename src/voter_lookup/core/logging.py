"""Loguru logging configuration for the lookup service.

Store read failures and degraded searches are logged as plain text on
stderr.  Each completed search also emits a one-line JSON summary (mode,
status, result and failure counts) bound with ``json_output=True``, which
goes to a separate serialized sink so it can be shipped without parsing.
When ``log_dir`` is set, every record, summaries included, is also written
in the plain format to a rotating ``voter-lookup.log``.
"""

import sys
from pathlib import Path

from loguru import logger

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def _is_summary(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None) -> None:
    """Configure Loguru sinks.

    Args:
        log_level: Minimum log level to emit.
        log_dir: Optional directory for ``voter-lookup.log``, rotated every
            24 hours and kept for 7 days.
    """
    level = log_level.upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_LOG_FORMAT,
        serialize=False,
        filter=lambda record: not _is_summary(record),
    )
    logger.add(
        sys.stderr,
        level=level,
        serialize=True,
        filter=_is_summary,
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / "voter-lookup.log",
            level=level,
            format=_LOG_FORMAT,
            rotation="24h",
            retention="7 days",
        )

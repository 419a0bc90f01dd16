"""Package logger with a per-process run id in every record."""
from __future__ import annotations

import logging
import sys
import uuid

from eventdesk.config import settings

_RUN_ID = uuid.uuid4().hex[:8]

logger = logging.getLogger("eventdesk")


def get_run_id() -> str:
    """Return the id stamped on every log line of this process."""
    return _RUN_ID


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def setup_logging(level: str | None = None) -> None:
    """(Re)attach the stderr handler to the package logger.

    Any handler installed by an earlier call is replaced, so the new one
    always writes to the current ``sys.stderr``.
    """
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    for old in [h for h in logger.handlers if getattr(h, "_eventdesk", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(run_id)s] %(name)s %(levelname)s %(message)s")
    )
    handler.addFilter(_RunIdFilter())
    handler._eventdesk = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

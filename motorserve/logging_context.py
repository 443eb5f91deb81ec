"""Submission ID logging context for tracing one booking attempt across modules.

Each accepted submit runs inside ``submission_scope``, which binds a
``SUB-xxxxxx`` reference for the duration of the dispatch and restores the
previous value afterwards. The console handler installed by
``configure_logging`` prints that reference on every line, so a single
booking can be followed through validation, dispatch and the WhatsApp
handoff:

    2024-05-01 10:00:00 [SUB-1A2B3C] [motorserve.booking.pipeline] INFO: Dispatching booking

Records logged outside a submission show ``-``.
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

NO_SUBMISSION = "-"

LOG_FORMAT = "%(asctime)s [%(submission_id)s] [%(name)s] %(levelname)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_submission_id: ContextVar[str] = ContextVar("submission_id", default=NO_SUBMISSION)


def new_submission_id() -> str:
    """Generate a short, human-readable submission reference."""
    return f"SUB-{uuid.uuid4().hex[:6].upper()}"


def get_submission_id() -> str:
    return _submission_id.get()


@contextmanager
def submission_scope(submission_id: str) -> Iterator[str]:
    """Bind ``submission_id`` to log records until the block exits."""
    token = _submission_id.set(submission_id)
    try:
        yield submission_id
    finally:
        _submission_id.reset(token)


class SubmissionIdFilter(logging.Filter):
    """Stamps the active submission reference onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "submission_id"):
            record.submission_id = _submission_id.get()  # type: ignore[attr-defined]
        return True


def configure_logging(level: int) -> None:
    """Install the root console handler with the submission-aware format.

    The filter sits on the handler, so records from any library (httpx
    included) carry ``submission_id`` before the formatter needs it. Like
    ``logging.basicConfig`` this is a no-op when root already has handlers.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler.addFilter(SubmissionIdFilter())
    logging.basicConfig(level=level, handlers=[handler])


def get_submission_logger(name: str) -> logging.Logger:
    """Return a logger that stamps ``submission_id`` at the source.

    Needed for handlers that ``configure_logging`` did not install, such
    as test capture handlers.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SubmissionIdFilter) for f in logger.filters):
        logger.addFilter(SubmissionIdFilter())
    return logger

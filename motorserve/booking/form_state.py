"""
Mutable form state for one booking session.

Holds the draft booking, the sending flag and the last status message.
No validation happens here; the submission pipeline owns that.

Usage:
    state = FormState()
    state.set_field("customer_name", "Jane Doe")
    with state.sending_scope():
        ...  # dispatch; sending is cleared on every exit path
"""

import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Iterator, Optional

from motorserve.schemas.booking_schema import BookingDraft, SubmissionStatus

logger = logging.getLogger(__name__)


class UnknownFieldError(KeyError):
    """Raised when a field name is not a BookingDraft attribute."""


class SubmissionInProgressError(RuntimeError):
    """Raised when the sending scope is entered while already sending."""


class FormState:
    """Draft booking plus transient UI state for a single form session."""

    FIELD_NAMES: tuple[str, ...] = tuple(BookingDraft.field_names())

    def __init__(self) -> None:
        self._draft = BookingDraft()
        self._sending: bool = False
        self._status: Optional[SubmissionStatus] = None

    @property
    def draft(self) -> BookingDraft:
        return self._draft

    @property
    def sending(self) -> bool:
        return self._sending

    @property
    def status(self) -> Optional[SubmissionStatus]:
        return self._status

    def snapshot(self) -> BookingDraft:
        """Return an independent copy of the current draft."""
        return replace(self._draft)

    def set_field(self, name: str, value: str) -> None:
        """Replace exactly one draft attribute, leaving the others unchanged."""
        if name not in self.FIELD_NAMES:
            raise UnknownFieldError(name)
        setattr(self._draft, name, value)

    def set_status(self, status: Optional[SubmissionStatus]) -> None:
        self._status = status

    def clear_status(self) -> None:
        self._status = None

    def reset_draft(self) -> None:
        """Restore the draft to its defaults."""
        self._draft = BookingDraft()
        logger.debug("Booking draft reset to defaults")

    @contextmanager
    def sending_scope(self) -> Iterator[None]:
        """
        Hold the sending flag for the duration of a dispatch attempt.

        Entering clears the previous status so no stale message is shown
        while the attempt is in flight. The flag is released on every exit
        path, including exceptions.

        Raises:
            SubmissionInProgressError: If a dispatch is already in flight.
        """
        if self._sending:
            raise SubmissionInProgressError("A booking is already being sent")
        self._sending = True
        self.clear_status()
        try:
            yield
        finally:
            self._sending = False

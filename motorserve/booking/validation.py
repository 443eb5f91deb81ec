"""
Ordered validation rules for a booking draft.

Rules run in a fixed order (name, phone, date/time) and only the first
failure is reported. Email and notes are optional and never fail.

Usage:
    try:
        ensure_valid(draft)
    except BookingValidationError as exc:
        form_state.set_status(SubmissionStatus.error(exc.message))
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from motorserve.messages.status_messages import (
    DATETIME_REQUIRED,
    NAME_REQUIRED,
    PHONE_REQUIRED,
)
from motorserve.schemas.booking_schema import BookingDraft

logger = logging.getLogger(__name__)


class BookingValidationError(ValueError):
    """Raised when a draft fails a user-correctable validation rule."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.message = message


def _not_blank(value: str) -> bool:
    return bool(value.strip())


@dataclass(frozen=True)
class ValidationRule:
    """A single required-field check and the message shown when it fails."""

    field_name: str
    message: str
    check: Callable[[str], bool] = _not_blank


VALIDATION_RULES: list[ValidationRule] = [
    ValidationRule("customer_name", NAME_REQUIRED),
    ValidationRule("customer_phone", PHONE_REQUIRED),
    ValidationRule("datetime", DATETIME_REQUIRED),
]


def find_first_failure(draft: BookingDraft) -> Optional[ValidationRule]:
    """Return the first rule the draft fails, or None when it is valid."""
    for rule in VALIDATION_RULES:
        if not rule.check(getattr(draft, rule.field_name)):
            logger.debug("Validation failed on '%s'", rule.field_name)
            return rule
    return None


def ensure_valid(draft: BookingDraft) -> None:
    """Raise BookingValidationError for the first failing rule."""
    rule = find_first_failure(draft)
    if rule is not None:
        raise BookingValidationError(rule.field_name, rule.message)

"""Tests for ordered booking validation rules."""

import pytest

from motorserve.booking.validation import (
    VALIDATION_RULES,
    BookingValidationError,
    ensure_valid,
    find_first_failure,
)
from motorserve.messages.status_messages import (
    DATETIME_REQUIRED,
    NAME_REQUIRED,
    PHONE_REQUIRED,
)
from motorserve.schemas.booking_schema import BookingDraft


def _draft(**overrides) -> BookingDraft:
    values = {
        "customer_name": "Jane Doe",
        "customer_phone": "0712345678",
        "datetime": "2024-05-01T10:00",
    }
    values.update(overrides)
    return BookingDraft(**values)


class TestRuleOrder:
    def test_rules_run_name_phone_datetime(self):
        assert [r.field_name for r in VALIDATION_RULES] == [
            "customer_name", "customer_phone", "datetime",
        ]

    def test_all_missing_reports_name(self):
        rule = find_first_failure(BookingDraft())
        assert rule.message == NAME_REQUIRED

    def test_phone_and_datetime_missing_reports_phone(self):
        rule = find_first_failure(_draft(customer_phone="", datetime=""))
        assert rule.message == PHONE_REQUIRED

    def test_datetime_missing(self):
        rule = find_first_failure(_draft(datetime="   "))
        assert rule.message == DATETIME_REQUIRED


class TestOptionalFields:
    def test_valid_draft_passes(self):
        assert find_first_failure(_draft()) is None

    def test_empty_email_and_notes_never_fail(self):
        assert find_first_failure(_draft(customer_email="", notes="")) is None

    def test_whitespace_counts_as_empty(self):
        rule = find_first_failure(_draft(customer_name=" \t"))
        assert rule.field_name == "customer_name"


class TestEnsureValid:
    def test_raises_with_field_and_message(self):
        with pytest.raises(BookingValidationError) as exc_info:
            ensure_valid(_draft(customer_phone=""))
        assert exc_info.value.field_name == "customer_phone"
        assert exc_info.value.message == PHONE_REQUIRED
        assert str(exc_info.value) == PHONE_REQUIRED

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            ensure_valid(BookingDraft())

    def test_valid_draft_does_not_raise(self):
        ensure_valid(_draft())

"""Tests for FormState field updates, status and the sending scope."""

from dataclasses import asdict

import pytest

from motorserve.booking.form_state import (
    FormState,
    SubmissionInProgressError,
    UnknownFieldError,
)
from motorserve.messages.status_messages import BOOKING_SENT
from motorserve.schemas.booking_schema import BookingDraft, SubmissionStatus


class TestDefaults:
    def test_initial_state(self, form_state):
        assert form_state.draft == BookingDraft()
        assert form_state.sending is False
        assert form_state.status is None

    def test_default_draft_values(self, default_draft):
        assert asdict(default_draft) == {
            "customer_name": "",
            "customer_phone": "",
            "customer_email": "",
            "vehicle_type": "Car",
            "service_type": "Repair",
            "datetime": "",
            "notes": "",
        }


class TestSetField:
    def test_replaces_exactly_one_attribute(self, form_state):
        before = asdict(form_state.draft)
        form_state.set_field("customer_phone", "0712345678")
        after = asdict(form_state.draft)

        assert after["customer_phone"] == "0712345678"
        changed = [k for k in after if after[k] != before[k]]
        assert changed == ["customer_phone"]

    def test_value_stored_verbatim(self, form_state):
        form_state.set_field("customer_name", "  jane  ")
        assert form_state.draft.customer_name == "  jane  "

    def test_idempotent(self):
        once, twice = FormState(), FormState()
        once.set_field("notes", "Brakes squeal")
        twice.set_field("notes", "Brakes squeal")
        twice.set_field("notes", "Brakes squeal")
        assert once.draft == twice.draft

    def test_no_validation_on_select_fields(self, form_state):
        form_state.set_field("vehicle_type", "Tractor")
        assert form_state.draft.vehicle_type == "Tractor"

    def test_unknown_field_rejected(self, form_state):
        with pytest.raises(UnknownFieldError):
            form_state.set_field("customer_address", "42 Oak Ave")

    def test_field_names_in_form_order(self):
        assert FormState.FIELD_NAMES == (
            "customer_name", "customer_phone", "customer_email",
            "vehicle_type", "service_type", "datetime", "notes",
        )


class TestSnapshotAndReset:
    def test_snapshot_is_independent(self, form_state):
        form_state.set_field("customer_name", "Jane Doe")
        snap = form_state.snapshot()
        form_state.set_field("customer_name", "John")
        assert snap.customer_name == "Jane Doe"

    def test_reset_restores_defaults(self, form_state):
        form_state.set_field("vehicle_type", "Generator")
        form_state.set_field("customer_name", "Jane Doe")
        form_state.reset_draft()
        assert form_state.draft == BookingDraft()

    def test_clear_status(self, form_state):
        form_state.set_status(SubmissionStatus.success(BOOKING_SENT))
        form_state.clear_status()
        assert form_state.status is None


class TestSendingScope:
    def test_sets_flag_and_clears_status(self, form_state):
        form_state.set_status(SubmissionStatus.success(BOOKING_SENT))
        with form_state.sending_scope():
            assert form_state.sending is True
            assert form_state.status is None
        assert form_state.sending is False

    def test_releases_on_exception(self, form_state):
        with pytest.raises(ValueError):
            with form_state.sending_scope():
                raise ValueError("boom")
        assert form_state.sending is False

    def test_reentry_rejected(self, form_state):
        with form_state.sending_scope():
            with pytest.raises(SubmissionInProgressError):
                with form_state.sending_scope():
                    pass
            assert form_state.sending is True
        assert form_state.sending is False

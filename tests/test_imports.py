"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_booking_schema(self):
        from motorserve.schemas.booking_schema import (
            BookingDraft, ServiceType, StatusKind, SubmissionStatus, VehicleType,
        )
        assert VehicleType.CAR == "Car"
        assert ServiceType.PARTS_REPLACEMENT == "Parts Replacement"
        assert StatusKind.ERROR == "error"
        assert BookingDraft().vehicle_type == "Car"
        assert SubmissionStatus.error("x").is_error

    def test_import_email_schema(self):
        from motorserve.schemas.email_schema import EmailSendRequest
        request = EmailSendRequest(service_id="s", template_id="t", user_id="u")
        assert request.template_params == {}


class TestBookingImports:
    def test_booking_package_reexports(self):
        from motorserve.booking import (
            FormState, SubmissionPipeline, SubmissionStateMachine, ensure_valid,
        )
        assert FormState().sending is False
        assert callable(ensure_valid)
        assert SubmissionPipeline is not None
        assert SubmissionStateMachine().is_idle()


class TestClientImports:
    def test_clients_package_reexports(self):
        from motorserve.clients import (
            DispatchError, EmailJSClient, OfflineEmailClient, build_whatsapp_link,
        )
        assert issubclass(DispatchError, Exception)
        assert callable(build_whatsapp_link)
        assert EmailJSClient is not None
        assert OfflineEmailClient().sent == []


class TestEntryPoints:
    def test_import_console_form(self):
        import console_form
        assert callable(console_form.main)

    def test_import_main(self):
        import main
        assert callable(main._run_offline_mode)

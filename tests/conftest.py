"""Shared test fixtures and helpers."""

import asyncio
from typing import Optional

import pytest

from motorserve.booking.form_state import FormState
from motorserve.booking.pipeline import SubmissionPipeline
from motorserve.config import AppConfig, EmailConfig, WhatsAppConfig, WorkshopConfig
from motorserve.schemas.booking_schema import BookingDraft

WA_NUMBER = "254705639260"


def make_config(
    service_id: str = "service_test",
    template_id: str = "template_test",
    public_key: str = "public_test",
    number: str = WA_NUMBER,
    require_email_config: bool = False,
    **email_overrides,
) -> AppConfig:
    """Helper to create an AppConfig independent of the environment."""
    return AppConfig(
        email=EmailConfig(
            service_id=service_id,
            template_id=template_id,
            public_key=public_key,
            **email_overrides,
        ),
        whatsapp=WhatsAppConfig(number=number),
        workshop=WorkshopConfig(name="MotorServe Workshop Solutions"),
        require_email_config=require_email_config,
        log_level="INFO",
    )


def fill_form(state: FormState, **values: str) -> None:
    """Set several draft fields through the public field-update operation."""
    for name, value in values.items():
        state.set_field(name, value)


JANE = {
    "customer_name": "Jane Doe",
    "customer_phone": "0712345678",
    "customer_email": "",
    "vehicle_type": "Motorcycle",
    "service_type": "Diagnostics",
    "datetime": "2024-05-01T10:00",
    "notes": "",
}


class FakeDispatcher:
    """Records provider calls; optionally fails or waits on a gate."""

    def __init__(
        self,
        error: Optional[BaseException] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.calls: list[dict] = []
        self.error = error
        self.gate = gate

    async def send(
        self,
        service_id: str,
        template_id: str,
        template_params: dict[str, str],
        public_key: str,
    ) -> None:
        self.calls.append({
            "service_id": service_id,
            "template_id": template_id,
            "template_params": template_params,
            "public_key": public_key,
        })
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error


class LinkRecorder:
    """Stand-in for the browser: remembers every link it was asked to open."""

    def __init__(self) -> None:
        self.opened: list[str] = []

    def __call__(self, url: str) -> None:
        self.opened.append(url)


@pytest.fixture
def config() -> AppConfig:
    return make_config()


@pytest.fixture
def form_state() -> FormState:
    return FormState()


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture
def opener() -> LinkRecorder:
    return LinkRecorder()


@pytest.fixture
def pipeline(config, form_state, dispatcher, opener) -> SubmissionPipeline:
    return SubmissionPipeline(config, form_state, dispatcher, open_external_link=opener)


@pytest.fixture
def default_draft() -> BookingDraft:
    return BookingDraft()

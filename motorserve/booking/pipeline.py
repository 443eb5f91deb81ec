"""
Booking submission pipeline - validate, dispatch, notify, reset.

Runs the whole submit sequence once per user-initiated submit and never
concurrently with itself. The email dispatch is the only suspension
point; the WhatsApp handoff is fire-and-forget.

Usage:
    pipeline = SubmissionPipeline(settings, FormState(), EmailJSClient(settings.email))
    await pipeline.submit()
"""

from typing import Optional

from motorserve.booking.form_state import FormState
from motorserve.booking.state_machine import (
    SubmissionStateMachine,
    SubmissionTrigger,
)
from motorserve.booking.validation import BookingValidationError, ensure_valid
from motorserve.clients.emailjs_client import DispatchError, EmailDispatcher
from motorserve.clients.whatsapp import LinkOpener, build_whatsapp_link, open_in_browser
from motorserve.config import AppConfig
from motorserve.logging_context import (
    get_submission_logger,
    new_submission_id,
    submission_scope,
)
from motorserve.messages.message_templates import build_booking_summary
from motorserve.messages.status_messages import BOOKING_FAILED, BOOKING_SENT
from motorserve.schemas.booking_schema import BookingDraft, SubmissionStatus

logger = get_submission_logger(__name__)


class SubmissionPipeline:
    """Orchestrates one booking submission against a FormState."""

    def __init__(
        self,
        config: AppConfig,
        form_state: FormState,
        dispatcher: EmailDispatcher,
        open_external_link: LinkOpener = open_in_browser,
    ) -> None:
        self._config = config
        self._form = form_state
        self._dispatcher = dispatcher
        self._open_external_link = open_external_link
        self._sm = SubmissionStateMachine()
        self.last_whatsapp_link: Optional[str] = None

    @property
    def form_state(self) -> FormState:
        return self._form

    @property
    def state_machine(self) -> SubmissionStateMachine:
        return self._sm

    @property
    def last_outcome(self) -> Optional[SubmissionTrigger]:
        """How the most recent finished attempt ended, None while running."""
        return self._sm.last_trigger if self._sm.is_idle() else None

    async def submit(self) -> Optional[SubmissionStatus]:
        """
        Run the submit sequence once.

        Returns:
            The resulting status, or None when a submission is already in
            flight and this call was ignored.
        """
        if self._form.sending or not self._sm.is_idle():
            logger.debug("Submit ignored: a booking is still in flight")
            return None

        self._sm.transition(SubmissionTrigger.SUBMIT)
        try:
            return await self._run()
        finally:
            if not self._sm.is_idle():
                self._sm.transition(SubmissionTrigger.ABORTED)

    async def _run(self) -> Optional[SubmissionStatus]:
        try:
            ensure_valid(self._form.draft)
        except BookingValidationError as e:
            logger.info("Booking rejected: %s", e.field_name)
            self._form.set_status(SubmissionStatus.error(e.message))
            self._sm.transition(SubmissionTrigger.REJECTED)
            return self._form.status

        self._sm.transition(SubmissionTrigger.ACCEPTED)
        draft = self._form.snapshot()

        with submission_scope(new_submission_id()), self._form.sending_scope():
            if not await self._dispatch(draft):
                self._form.set_status(SubmissionStatus.error(BOOKING_FAILED))
                self._sm.transition(SubmissionTrigger.DISPATCH_FAILED)
                return self._form.status

            self._form.set_status(SubmissionStatus.success(BOOKING_SENT))
            self._notify_workshop(draft)
            self._form.reset_draft()
            self._sm.transition(SubmissionTrigger.DISPATCH_SUCCEEDED)

        return self._form.status

    async def _dispatch(self, draft: BookingDraft) -> bool:
        """Send the draft to the email provider. Returns True on success."""
        email = self._config.email
        logger.info("Dispatching booking")
        try:
            await self._dispatcher.send(
                email.service_id,
                email.template_id,
                draft.to_params(),
                email.public_key,
            )
        except DispatchError as e:
            logger.error("EmailJS send error: %s (status=%s)", e, e.status_code)
            return False
        except Exception:
            logger.exception("Unexpected error sending booking")
            return False
        return True

    def _notify_workshop(self, draft: BookingDraft) -> None:
        """Open a pre-filled WhatsApp chat with the booking summary."""
        whatsapp = self._config.whatsapp
        try:
            link = build_whatsapp_link(whatsapp.number, build_booking_summary(draft), whatsapp.base_url)
            self.last_whatsapp_link = link
            self._open_external_link(link)
        except Exception:
            logger.warning("Could not hand the booking off to WhatsApp", exc_info=True)

from motorserve.booking.form_state import FormState, SubmissionInProgressError, UnknownFieldError
from motorserve.booking.pipeline import SubmissionPipeline
from motorserve.booking.state_machine import (
    InvalidTransitionError,
    SubmissionState,
    SubmissionStateMachine,
    SubmissionTrigger,
)
from motorserve.booking.validation import BookingValidationError, ensure_valid

__all__ = [
    "FormState",
    "UnknownFieldError",
    "SubmissionInProgressError",
    "SubmissionPipeline",
    "SubmissionStateMachine",
    "SubmissionState",
    "SubmissionTrigger",
    "InvalidTransitionError",
    "BookingValidationError",
    "ensure_valid",
]

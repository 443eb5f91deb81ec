"""
Finite state machine for a single booking submission.

Every submit follows Idle -> Validating -> (Idle | Sending -> Idle), and
every terminal transition returns to Idle so the form can be submitted
again. The trigger that brought the machine back to Idle records how the
attempt ended.

Usage:
    sm = SubmissionStateMachine()
    sm.transition(SubmissionTrigger.SUBMIT)
    assert sm.current_state == SubmissionState.VALIDATING
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    """All possible states of one submission attempt."""
    IDLE = "idle"
    VALIDATING = "validating"
    SENDING = "sending"


class SubmissionTrigger(str, Enum):
    """Events that cause state transitions."""
    SUBMIT = "submit"
    REJECTED = "rejected"
    ACCEPTED = "accepted"
    DISPATCH_SUCCEEDED = "dispatch_succeeded"
    DISPATCH_FAILED = "dispatch_failed"
    ABORTED = "aborted"


@dataclass
class Transition:
    """A single valid state transition."""
    from_state: SubmissionState
    to_state: SubmissionState
    trigger: SubmissionTrigger


@dataclass
class StateEntry:
    """Recorded history entry for a state visit."""
    state: SubmissionState
    entered_at: datetime
    trigger: Optional[SubmissionTrigger] = None


class InvalidTransitionError(Exception):
    """Raised when a transition is not valid from the current state."""


class SubmissionStateMachine:
    """Deterministic state machine controlling the submit sequence."""

    TRANSITIONS: list[Transition] = [
        Transition(SubmissionState.IDLE, SubmissionState.VALIDATING,
                   SubmissionTrigger.SUBMIT),

        # --- Validation ---
        Transition(SubmissionState.VALIDATING, SubmissionState.IDLE,
                   SubmissionTrigger.REJECTED),
        Transition(SubmissionState.VALIDATING, SubmissionState.SENDING,
                   SubmissionTrigger.ACCEPTED),

        # --- Dispatch result ---
        Transition(SubmissionState.SENDING, SubmissionState.IDLE,
                   SubmissionTrigger.DISPATCH_SUCCEEDED),
        Transition(SubmissionState.SENDING, SubmissionState.IDLE,
                   SubmissionTrigger.DISPATCH_FAILED),

        # --- Unexpected errors ---
        Transition(SubmissionState.VALIDATING, SubmissionState.IDLE,
                   SubmissionTrigger.ABORTED),
        Transition(SubmissionState.SENDING, SubmissionState.IDLE,
                   SubmissionTrigger.ABORTED),
    ]

    def __init__(self) -> None:
        self._current_state = SubmissionState.IDLE
        self._history: list[StateEntry] = [
            StateEntry(state=SubmissionState.IDLE, entered_at=datetime.now(timezone.utc))
        ]

    @property
    def current_state(self) -> SubmissionState:
        return self._current_state

    @property
    def last_trigger(self) -> Optional[SubmissionTrigger]:
        return self._history[-1].trigger

    def transition(self, trigger: SubmissionTrigger) -> SubmissionState:
        """
        Execute a state transition.

        Args:
            trigger: The event triggering the transition.

        Returns:
            The new submission state.

        Raises:
            InvalidTransitionError: If no valid transition exists.
        """
        for t in self.TRANSITIONS:
            if t.from_state == self._current_state and t.trigger == trigger:
                old_state = self._current_state
                self._current_state = t.to_state
                self._history.append(StateEntry(
                    state=self._current_state,
                    entered_at=datetime.now(timezone.utc),
                    trigger=trigger,
                ))
                logger.debug(
                    "Submission transition: %s -> %s (trigger: %s)",
                    old_state.value, self._current_state.value, trigger.value,
                )
                return self._current_state

        valid = [t.value for t in self.get_valid_triggers()]
        raise InvalidTransitionError(
            f"No valid transition from '{self._current_state.value}' "
            f"with trigger '{trigger.value}'. Valid triggers: {valid}"
        )

    def get_valid_triggers(self) -> list[SubmissionTrigger]:
        """Return all triggers valid from the current state."""
        return [t.trigger for t in self.TRANSITIONS if t.from_state == self._current_state]

    def get_history(self) -> list[StateEntry]:
        """Return the full state transition history."""
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """Return ordered list of state names visited."""
        return [entry.state.value for entry in self._history]

    def is_idle(self) -> bool:
        return self._current_state == SubmissionState.IDLE

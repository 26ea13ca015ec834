"""Playback state machine.

Playback Lifecycle:
    IDLE → RUNNING   (play)
    RUNNING → IDLE   (all runs finished, stop, reset)

reset() may also be issued while IDLE; it is recorded as a forced
IDLE → IDLE transition.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Set


class PlaybackState(str, Enum):
    """Whether a playback session is in progress."""
    IDLE = "idle"
    RUNNING = "running"


VALID_TRANSITIONS: Dict[PlaybackState, Set[PlaybackState]] = {
    PlaybackState.IDLE: {PlaybackState.RUNNING},
    PlaybackState.RUNNING: {PlaybackState.IDLE},
}


@dataclass
class StateTransition:
    """Record of a state transition."""
    from_state: PlaybackState
    to_state: PlaybackState
    reason: str
    time: float = field(default_factory=time.monotonic)


class InvalidPlaybackTransition(Exception):
    """Raised when an invalid playback transition is attempted."""
    pass


class PlaybackStateMachine:
    """Tracks Idle/Running with validated transitions.

    Usage:
        fsm = PlaybackStateMachine()
        fsm.transition_to(PlaybackState.RUNNING, reason="play")
        fsm.transition_to(PlaybackState.IDLE, reason="all runs finished")
    """

    def __init__(self, initial_state: PlaybackState = PlaybackState.IDLE):
        self._state = initial_state
        self._history: list[StateTransition] = []

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def history(self) -> list[StateTransition]:
        """History of state transitions."""
        return self._history.copy()

    @property
    def is_running(self) -> bool:
        return self._state == PlaybackState.RUNNING

    def can_transition_to(self, target: PlaybackState) -> bool:
        return target in VALID_TRANSITIONS.get(self._state, set())

    def transition_to(
        self,
        target: PlaybackState,
        reason: str = "",
        validate: bool = True,
    ) -> None:
        """Move to a new state.

        Args:
            target: Target state
            reason: Why the transition is happening
            validate: If True, raise on invalid transition

        Raises:
            InvalidPlaybackTransition: If transition is not valid and validate=True
        """
        if validate and not self.can_transition_to(target):
            raise InvalidPlaybackTransition(
                f"Cannot transition from {self._state.value} to {target.value}. "
                f"Valid targets: {[s.value for s in VALID_TRANSITIONS.get(self._state, set())]}"
            )

        self._history.append(
            StateTransition(from_state=self._state, to_state=target, reason=reason)
        )
        self._state = target

    def force_idle(self, reason: str = "") -> None:
        """Go to IDLE from any state."""
        self.transition_to(PlaybackState.IDLE, reason=reason, validate=False)

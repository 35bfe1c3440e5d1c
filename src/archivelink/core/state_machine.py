"""Simple session state machine for the archive command."""

from __future__ import annotations

from enum import Enum, auto
import logging


class SessionState(Enum):
    IDLE = auto()
    ARCHIVING = auto()
    INSERTING = auto()
    ERROR = auto()


class SessionEvent(Enum):
    START = auto()
    ARCHIVE_DONE = auto()
    INSERT_DONE = auto()
    ERROR = auto()
    RESET = auto()


_TRANSITIONS = {
    SessionState.IDLE: {
        SessionEvent.START: SessionState.ARCHIVING,
        SessionEvent.ERROR: SessionState.ERROR,
    },
    SessionState.ARCHIVING: {
        SessionEvent.ARCHIVE_DONE: SessionState.INSERTING,
        SessionEvent.ERROR: SessionState.ERROR,
    },
    SessionState.INSERTING: {
        SessionEvent.INSERT_DONE: SessionState.IDLE,
        SessionEvent.ERROR: SessionState.ERROR,
    },
    SessionState.ERROR: {
        SessionEvent.RESET: SessionState.IDLE,
    },
}


class SessionStateMachine:
    def __init__(self):
        self.state = SessionState.IDLE

    @property
    def busy(self) -> bool:
        return self.state in (SessionState.ARCHIVING, SessionState.INSERTING)

    def transition(self, event: SessionEvent) -> SessionState:
        next_state = _TRANSITIONS.get(self.state, {}).get(event, self.state)
        if next_state == self.state and event not in _TRANSITIONS.get(self.state, {}):
            logging.getLogger(__name__).warning(
                "Invalid state transition: %s --%s--> %s", self.state, event, next_state
            )
        self.state = next_state
        return self.state

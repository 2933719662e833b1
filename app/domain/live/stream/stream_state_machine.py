"""Stream state machine for the live broadcast lifecycle."""

from app.schemas import StreamState


class StreamStateMachine:
    """State machine for managing stream state transitions.

    State flow with triggers:
    - (no stream) -> LIVE: start() creates the document, only when no other
      stream is LIVE
    - LIVE -> STOPPED: stop() by an admin
    - STOPPED is terminal; a new broadcast is a new document

    Seen from the channel as a whole this is Idle -> Live -> Idle: the
    channel is Live while exactly one document is LIVE.
    """

    TRANSITIONS: dict[StreamState, set[StreamState]] = {
        StreamState.LIVE: {StreamState.STOPPED},
        StreamState.STOPPED: set(),
    }

    TERMINAL_STATES: set[StreamState] = {StreamState.STOPPED}

    @classmethod
    def can_transition(cls, current: StreamState, new: StreamState) -> bool:
        """Check if state transition is valid."""
        return new in cls.TRANSITIONS.get(current, set())

    @classmethod
    def is_terminal(cls, state: StreamState) -> bool:
        return state in cls.TERMINAL_STATES

    @classmethod
    def can_start(cls, active_stream_exists: bool) -> bool:
        """Guard for Idle -> Live: fails closed while another stream is live."""
        return not active_stream_exists

    @classmethod
    def get_valid_transitions(cls, state: StreamState) -> set[StreamState]:
        return cls.TRANSITIONS.get(state, set())

"""Tests for StreamStateMachine state transitions."""

from app.domain.live.stream.stream_state_machine import StreamStateMachine
from app.schemas import StreamState


class TestCanTransition:
    """Tests for StreamStateMachine.can_transition method."""

    def test_live_to_stopped_valid(self):
        """Test LIVE -> STOPPED is a valid transition."""
        assert StreamStateMachine.can_transition(StreamState.LIVE, StreamState.STOPPED) is True

    def test_stopped_to_live_invalid(self):
        """Test a stopped stream cannot be restarted."""
        assert StreamStateMachine.can_transition(StreamState.STOPPED, StreamState.LIVE) is False

    def test_stopped_to_stopped_invalid(self):
        """Test stopping twice is rejected."""
        assert StreamStateMachine.can_transition(StreamState.STOPPED, StreamState.STOPPED) is False

    def test_live_to_live_invalid(self):
        assert StreamStateMachine.can_transition(StreamState.LIVE, StreamState.LIVE) is False


class TestTerminalStates:
    def test_stopped_is_terminal(self):
        assert StreamStateMachine.is_terminal(StreamState.STOPPED) is True

    def test_live_is_not_terminal(self):
        assert StreamStateMachine.is_terminal(StreamState.LIVE) is False

    def test_valid_transitions_from_live(self):
        assert StreamStateMachine.get_valid_transitions(StreamState.LIVE) == {StreamState.STOPPED}

    def test_no_transitions_from_stopped(self):
        assert StreamStateMachine.get_valid_transitions(StreamState.STOPPED) == set()


class TestCanStart:
    def test_can_start_when_nothing_is_live(self):
        assert StreamStateMachine.can_start(active_stream_exists=False) is True

    def test_cannot_start_while_another_is_live(self):
        assert StreamStateMachine.can_start(active_stream_exists=True) is False

"""Enums used by the live stream schemas."""

from enum import Enum


class StreamState(str, Enum):
    """Live stream lifecycle states.

    LIVE → STOPPED

    - LIVE: Broadcast in progress. Set by start(); at most one stream is LIVE.
    - STOPPED: Broadcast ended. Set by stop(). Terminal for that stream; the
      controller is "idle" again and a new stream may be started.
    """

    LIVE = "live"
    STOPPED = "stopped"

    def __str__(self) -> str:
        return self.value


class StreamTag(str, Enum):
    EVENT = "event"
    REGULAR = "regular"
    SPECIAL = "special"

    def __str__(self) -> str:
        return self.value


class RecordingStatus(str, Enum):
    """Progress of the recording upload that follows a stop.

    PENDING → UPLOADING → UPLOADED
                  ↓
          FAILED | MISSING
    """

    PENDING = "pending"
    UPLOADING = "uploading"
    UPLOADED = "uploaded"
    FAILED = "failed"
    MISSING = "missing"

    def __str__(self) -> str:
        return self.value


__all__ = ["RecordingStatus", "StreamState", "StreamTag"]

"""Viewer network-quality gate for the live stream page.

Browsers expose `navigator.connection.{effectiveType, downlink}`; servers see
the same estimates through the `ECT` and `Downlink` Client Hints headers.
Either source feeds `classify_network`, a pure classification re-evaluated on
every request.

Unknown networks are allowed (fail-open): a viewer whose browser reports
nothing is not blocked.
"""

from enum import Enum
from typing import Mapping

from pydantic import BaseModel

BLOCKED_TYPES = ("slow-2g", "2g", "3g")
LOW_BANDWIDTH_MBPS = 5.0

ECT_HEADER = "ect"
DOWNLINK_HEADER = "downlink"


class NetworkTier(str, Enum):
    BLOCKING = "blocking"
    WARNING = "warning"
    INFORMATIONAL = "informational"

    def __str__(self) -> str:
        return self.value


class NetworkVerdict(BaseModel):
    type: str
    is_allowed: bool
    message: str
    tier: NetworkTier
    speed_mbps: float | None = None


def _normalize_type(effective_type: str | None) -> str:
    value = (effective_type or "").strip().lower()
    return value or "unknown"


def classify_network(effective_type: str | None, downlink: float | None = None) -> NetworkVerdict:
    """Classify a connection into blocking, warning or informational."""
    net_type = _normalize_type(effective_type)

    if net_type == "unknown":
        return NetworkVerdict(
            type="unknown",
            is_allowed=True,
            message="Network detection not supported. Proceeding...",
            tier=NetworkTier.INFORMATIONAL,
            speed_mbps=downlink,
        )

    if net_type in BLOCKED_TYPES:
        return NetworkVerdict(
            type=net_type,
            is_allowed=False,
            message=(
                f"Your connection ({net_type.upper()}) is too slow for live streaming. "
                "Please use 4G, 5G, or Wi-Fi."
            ),
            tier=NetworkTier.BLOCKING,
            speed_mbps=downlink,
        )

    if net_type == "4g" and downlink is not None and downlink < LOW_BANDWIDTH_MBPS:
        return NetworkVerdict(
            type=net_type,
            is_allowed=True,
            message="Your connection speed is on the lower end. You may experience buffering.",
            tier=NetworkTier.WARNING,
            speed_mbps=downlink,
        )

    return NetworkVerdict(
        type=net_type,
        is_allowed=True,
        message="Your connection is suitable for streaming.",
        tier=NetworkTier.INFORMATIONAL,
        speed_mbps=downlink,
    )


def get_connection_recommendation(effective_type: str | None) -> str:
    net_type = _normalize_type(effective_type)
    if net_type == "unknown":
        return "For best experience, use 4G, 5G, or Wi-Fi connection."
    if net_type in ("slow-2g", "2g"):
        return "2G is not supported. Please switch to 4G, 5G, or Wi-Fi."
    if net_type == "3g":
        return "3G is too slow. Please switch to 4G, 5G, or Wi-Fi."
    if net_type == "4g":
        return "4G connection detected. Streaming should work well."
    return "Good connection detected."


def _parse_downlink(value: str | None) -> float | None:
    if value is None or not str(value).strip():
        return None
    try:
        downlink = float(value)
    except ValueError:
        return None
    return downlink if downlink >= 0 else None


def read_connection_hints(
    headers: Mapping[str, str],
    effective_type: str | None = None,
    downlink: str | float | None = None,
) -> tuple[str | None, float | None]:
    """Resolve (effective_type, downlink) from explicit values or Client Hints.

    Explicit values win over headers. Unparseable downlink is treated as absent.
    """
    lowered = {k.lower(): v for k, v in headers.items()}
    ect = effective_type or lowered.get(ECT_HEADER)
    raw_downlink = downlink if downlink is not None else lowered.get(DOWNLINK_HEADER)
    if isinstance(raw_downlink, (int, float)):
        parsed = float(raw_downlink) if raw_downlink >= 0 else None
    else:
        parsed = _parse_downlink(raw_downlink)
    return ect, parsed

from datetime import datetime, timezone
from typing import Any

utc_now = lambda: datetime.now(timezone.utc)  # noqa: E731


def as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes read back from MongoDB as UTC."""
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def isoformat_utc(dt: datetime | None) -> str | None:
    return as_utc(dt).isoformat() if dt is not None else None


def parse_mongo_datetime(v: Any) -> Any:
    """Accept `{"$date": "..."}` values from mongoimport'ed seed data."""
    if isinstance(v, dict) and "$date" in v:
        return datetime.fromisoformat(v["$date"].replace("Z", "+00:00"))
    return v

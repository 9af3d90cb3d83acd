from datetime import datetime, timezone


def now_iso() -> str:
    """Current UTC time as an ISO string with millisecond precision, e.g. 2024-01-01T09:30:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

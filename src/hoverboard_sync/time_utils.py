import re

from hoverboard_sync.errors import MalformedDataError

TIMESTAMP_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}T(\d{2}):(\d{2})(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}(?::?\d{2})?)?$"
)


def normalize_time(timestamp: str) -> str:
    """Reduce an ISO-8601 timestamp like '2018-10-13T09:00:00' to '09:00'."""
    match = TIMESTAMP_RE.match(timestamp.strip()) if timestamp else None
    if not match:
        raise MalformedDataError(f"Unparseable session timestamp: {timestamp!r}")
    return f"{match.group(1)}:{match.group(2)}"

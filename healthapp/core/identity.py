from datetime import datetime, timezone
from uuid import uuid4


def new_id() -> str:
    """Generate a collision-resistant record id."""
    return uuid4().hex


def now() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

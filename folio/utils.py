import datetime
from typing import Optional


def parse_date(value: str | None) -> Optional[datetime.datetime]:
    """Parse an ISO-like date string into a naive UTC datetime, or None."""
    if not value:
        return None
    try:
        parsed = datetime.datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed


def format_long_date(value: str | None) -> str:
    """Render a date like 'Monday, 1 January 2024'; unparseable input is returned as-is."""
    parsed = parse_date(value)
    if parsed is None:
        return value or ""
    return f"{parsed:%A}, {parsed.day} {parsed:%B %Y}"

"""Parsing of date bounds given on the command line."""

import re
from datetime import date, datetime, timedelta


def parse_date_value(value: str, now: datetime | None = None) -> date | None:
    """Parse a date value (ISO date or relative like '7d', '1h')."""
    now = now or datetime.now()

    # Relative time patterns
    relative_match = re.match(r'^(\d+)([dhwm])$', value.lower())
    if relative_match:
        amount = int(relative_match.group(1))
        unit = relative_match.group(2)

        if unit == 'h':
            return (now - timedelta(hours=amount)).date()
        elif unit == 'd':
            return (now - timedelta(days=amount)).date()
        elif unit == 'w':
            return (now - timedelta(weeks=amount)).date()
        elif unit == 'm':
            return (now - timedelta(days=amount * 30)).date()

    # ISO date format
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    # Common date formats; a missing year is the current one
    for text, fmt in [
        (value, "%Y/%m/%d"),
        (f"{now.year}-{value}", "%Y-%m-%d"),
        (f"{now.year}/{value}", "%Y/%m/%d"),
    ]:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None

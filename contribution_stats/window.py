"""Date window and timestamp helpers for the contribution report."""

from datetime import datetime, timezone
from typing import Optional

from .errors import ConfigurationError
from .models import ReportMonth

GITHUB_TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


def compute_window_start(now: datetime, months: int) -> datetime:
    """Compute the earliest instant included in the report.

    The window starts on the first day of the month that lies ``months - 1``
    calendar months before the month containing ``now``, at local midnight.
    ``months=1`` therefore means "this month only".

    Args:
        now: Current time. A naive value is interpreted as local time.
        months: Number of calendar months to look back (>= 1)

    Returns:
        Timezone-aware datetime of the window boundary
    """
    if months < 1:
        raise ConfigurationError(f"Number of months must be at least 1, got {months}")

    month_index = now.year * 12 + (now.month - 1) - (months - 1)
    year, month = divmod(month_index, 12)
    start = datetime(year, month + 1, 1)

    if now.tzinfo is None:
        return start.astimezone()
    return start.replace(tzinfo=now.tzinfo)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a GitHub API timestamp into an aware UTC datetime."""
    if value is None:
        return None
    return datetime.strptime(value, GITHUB_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def is_before(timestamp: datetime, limit: datetime) -> bool:
    return timestamp < limit


def month_of(timestamp: datetime) -> ReportMonth:
    # GitHub reports UTC, bucket on the calendar month as reported
    return ReportMonth(timestamp.year, timestamp.month)

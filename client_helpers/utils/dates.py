"""Date range and date formatting helpers for report filters."""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, time, timedelta

from client_helpers.schemas.options import DateRange

logger = logging.getLogger(__name__)

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
API_DATE_FORMAT = "%Y-%m-%d"

DAILY = 1
WEEKLY = 7
MONTHLY = 30


def subtract_months(moment: datetime, months: int) -> datetime:
    """Move ``moment`` back by calendar months, clamping the day.

    March 31 minus one month is the last day of February.
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def get_date_range(filter_days: int, now: datetime | None = None) -> DateRange:
    """Compute the start/end of a report window.

    Args:
        filter_days: 1 (daily), 7 (weekly) or 30 (monthly); any other value
            falls back to the last 24 hours.
        now: Reference moment; defaults to the current local time.

    Returns:
        DateRange with both ends formatted as ``YYYY-MM-DD HH:MM:SS``.

    The daily window starts at today's midnight and ends one second before
    the end of tomorrow (tomorrow 23:59:58), as existing dashboards expect.
    """
    now = now or datetime.now()

    if filter_days == DAILY:
        start = datetime.combine(now.date(), time.min)
        end_of_tomorrow = datetime.combine(now.date() + timedelta(days=1), time(23, 59, 59))
        end = end_of_tomorrow - timedelta(seconds=1)
    elif filter_days == WEEKLY:
        start, end = now - timedelta(days=7), now
    elif filter_days == MONTHLY:
        start, end = subtract_months(now, 1), now
    else:
        start, end = now - timedelta(days=1), now

    return DateRange(
        start_date=start.strftime(DATETIME_FORMAT),
        end_date=end.strftime(DATETIME_FORMAT),
    )


def format_date_for_api(value: str) -> str:
    """Reformat an ISO date or datetime string as ``YYYY-MM-DD``.

    Returns ``""`` when the value cannot be parsed.
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        logger.debug("date.unparseable", extra={"reason": "not_iso_8601"})
        return ""
    return parsed.strftime(API_DATE_FORMAT)

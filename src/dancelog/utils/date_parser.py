"""Date and month parsing utilities."""

import re
from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

MONTH_KEY_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", "2024/1/15", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "last friday"

    Args:
        date_str: Date string in various formats
        today: Reference date for relative phrases (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    if date_str.startswith("last ") and date_str[5:] in WEEKDAYS:
        target_day = WEEKDAYS.index(date_str[5:])
        days_ago = (today.weekday() - target_day) % 7
        if days_ago == 0:
            days_ago = 7
        return today - timedelta(days=days_ago)

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_month_key(month_str: str, today: Optional[date] = None) -> str:
    """Parse a month string into a ``YYYY-MM`` month key.

    Accepts "2024-05", "this month", "last month", "next month" and other
    month-level formats dateutil understands (e.g. "May 2024", "2024/5").

    Raises:
        ValueError: If the month string cannot be parsed
    """
    month_str = month_str.strip().lower()
    today = today or date.today()
    first_of_month = today.replace(day=1)

    relative_months = {
        "this month": first_of_month,
        "last month": first_of_month - relativedelta(months=1),
        "next month": first_of_month + relativedelta(months=1),
    }
    if month_str in relative_months:
        return relative_months[month_str].strftime("%Y-%m")

    match = MONTH_KEY_PATTERN.match(month_str)
    if match:
        if not 1 <= int(match.group(2)) <= 12:
            raise ValueError(f"Invalid month '{month_str}': month must be between 01 and 12")
        return month_str

    try:
        dt = date_parser.parse(month_str, default=datetime(first_of_month.year, first_of_month.month, 1))
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse month '{month_str}': {e}")
    return dt.strftime("%Y-%m")


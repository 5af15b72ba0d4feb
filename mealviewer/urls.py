"""URL construction for MealViewer menu requests."""

import datetime
from typing import Optional

from mealviewer.exceptions import ErrorCode, MealViewerError
from mealviewer.models.menu import CalendarDate


def format_date(value: CalendarDate) -> str:
    """Format a date value or "YYYY-MM-DD" string as MM-DD-YYYY."""
    if isinstance(value, str):
        parts = value.split("-")
        if len(parts) != 3:
            raise MealViewerError(
                f"Invalid date format: {value}. Expected YYYY-MM-DD",
                ErrorCode.INVALID_DATE,
            )
        year, month, day = parts
        return f"{month.zfill(2)}-{day.zfill(2)}-{year}"

    if isinstance(value, datetime.datetime):
        value = value.date()
    return f"{value.month:02d}-{value.day:02d}-{value.year}"


def build_url(
    school_id: str,
    start_date: CalendarDate,
    end_date: Optional[CalendarDate] = None,
) -> str:
    """Build the menu path for a school and date range.

    The end date defaults to the start date when omitted or empty. The school
    id is inserted verbatim.
    """
    start = format_date(start_date)
    end = format_date(end_date) if end_date else start
    return f"/school/{school_id}/{start}/{end}/"

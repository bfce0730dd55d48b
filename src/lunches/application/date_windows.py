"""Default date windows used when a caller gives no explicit range."""

from __future__ import annotations

from datetime import date, timedelta

from lunches.domain.model.value_objects import DateRange


def default_order_window(today: date) -> DateRange:
    """Monday of last week through Friday of next week, relative to *today*."""
    this_monday = today - timedelta(days=today.weekday())
    return DateRange(
        start=this_monday - timedelta(weeks=1),
        end=this_monday + timedelta(weeks=1, days=4),
    )

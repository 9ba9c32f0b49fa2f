"""
Date-range helpers shared by the journal and the dashboard.
"""

from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple


def day_bounds(
    start_date: Optional[date], end_date: Optional[date]
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """Whole-day bounds: [start 00:00, end+1 00:00)."""
    lower = datetime.combine(start_date, time.min) if start_date else None
    upper = datetime.combine(end_date + timedelta(days=1), time.min) if end_date else None
    return lower, upper

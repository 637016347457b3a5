"""
Time and date utilities for the trailing trade window.

Key concepts:
  - Cutoff: the start of the trailing window. It is the calendar day of
    "now" (time of day dropped) minus ``window_days`` days.
  - Trades are compared at day granularity; a trade counts only when its
    date falls strictly after the cutoff day.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

DEFAULT_WINDOW_DAYS = 7


def start_of_day(moment: datetime) -> datetime:
    """Truncate ``moment`` to midnight of its own calendar day (tz preserved)."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def compute_cutoff(
    now: Optional[datetime] = None,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> date:
    """Return the cutoff day for a trailing window ending at ``now``.

    Args:
        now: Reference moment. Defaults to the current local time.
        window_days: Window length in days (default 7).

    Returns:
        ``start_of_day(now) - window_days`` as a ``date``.

    Raises:
        ValueError: If ``window_days < 1``.
    """
    if window_days < 1:
        raise ValueError(f"window_days must be >= 1, got {window_days}.")
    if now is None:
        now = datetime.now()
    return (start_of_day(now) - timedelta(days=window_days)).date()


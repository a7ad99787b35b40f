"""
Streak tracking.

A streak day is earned only when every non-bonus exercise of the floor is
completed. The calendar keeps ISO date keys for the trailing 90 days.
"""

import calendar
import logging
from datetime import date, timedelta
from typing import Optional

from daily_floor.models import CalendarDay, DailyFloor, StreakData, StreakDisplay
from daily_floor.utils.dates import days_before, iter_days_back, local_today, shift_month

logger = logging.getLogger(__name__)

CALENDAR_RETENTION_DAYS = 90
MAX_STREAK_WALK = 365


def calculate_streak(streak_data: StreakData, today: Optional[date] = None) -> StreakData:
    """
    Recompute current/longest streak from the completion calendar.

    Args:
        streak_data: Current streak state
        today: Reference date (defaults to local today)

    Returns:
        Updated streak state; the input is not modified
    """
    today = today or local_today()
    yesterday = days_before(today, 1)
    completed_today = streak_data.is_completed(today)
    completed_yesterday = streak_data.is_completed(yesterday)

    if not completed_today and not completed_yesterday:
        last = streak_data.last_completed_date
        if last is not None and last < yesterday:
            logger.info("Streak broken (last completed %s), resetting current", last)
            return streak_data.model_copy(update={"current": 0})
        return streak_data

    anchor = today if completed_today else yesterday
    count = 0
    for day in iter_days_back(anchor, MAX_STREAK_WALK):
        if not streak_data.is_completed(day):
            break
        count += 1

    update = {"current": count, "longest": max(streak_data.longest, count)}
    if completed_today:
        update["last_completed_date"] = today
    return streak_data.model_copy(update=update)


def prune_calendar(
    completion_calendar: dict[str, bool], today: date, days: int = CALENDAR_RETENTION_DAYS
) -> dict[str, bool]:
    """Drop calendar entries dated before ``today - days``."""
    cutoff = days_before(today, days).isoformat()
    return {key: value for key, value in completion_calendar.items() if key >= cutoff}


def mark_floor_complete_and_update_streak(
    floor: DailyFloor, current_streak: StreakData, today: Optional[date] = None
) -> StreakData:
    """
    Record a completed floor in the calendar and recompute the streak.

    Floors that are not fully completed leave the streak unchanged.
    """
    if not floor.completed:
        return current_streak

    today = today or local_today()
    completion_calendar = dict(current_streak.completion_calendar)
    completion_calendar[floor.date.isoformat()] = True

    updated = current_streak.model_copy(
        update={
            "completion_calendar": prune_calendar(completion_calendar, today),
            "last_completed_date": floor.date,
        }
    )
    return calculate_streak(updated, today)


def get_streak_display(streak_data: StreakData, today: Optional[date] = None) -> StreakDisplay:
    """Derive presentation fields without changing state."""
    today = today or local_today()
    completed_today = streak_data.is_completed(today)
    completed_yesterday = streak_data.is_completed(days_before(today, 1))
    return StreakDisplay(
        current=streak_data.current,
        longest=streak_data.longest,
        completed_today=completed_today,
        is_active=completed_today or (completed_yesterday and streak_data.current > 0),
    )


def get_calendar_days(
    streak_data: StreakData, days: int = 7, today: Optional[date] = None
) -> list[CalendarDay]:
    """The last ``days`` days, oldest first, ending today."""
    today = today or local_today()
    return [
        CalendarDay(
            date=day,
            completed=streak_data.is_completed(day),
            is_today=day == today,
        )
        for day in (today - timedelta(days=offset) for offset in range(days - 1, -1, -1))
    ]


def get_monthly_grid(
    streak_data: StreakData, month_offset: int = 0, today: Optional[date] = None
) -> list[list[CalendarDay]]:
    """
    Month view as Sunday-first weeks of seven days.

    Args:
        streak_data: Streak state holding the calendar
        month_offset: Months back from the current month (0 = this month)
        today: Reference date (defaults to local today)

    Returns:
        Weeks of day cells; days outside the month have ``in_month`` False
    """
    today = today or local_today()
    year, month = shift_month(today.year, today.month, month_offset)
    weeks = calendar.Calendar(firstweekday=calendar.SUNDAY).monthdatescalendar(year, month)
    return [
        [
            CalendarDay(
                date=day,
                completed=streak_data.is_completed(day),
                is_today=day == today,
                in_month=day.month == month,
            )
            for day in week
        ]
        for week in weeks
    ]

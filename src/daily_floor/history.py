"""Trailing-window retention rules for the caller-owned floor and feedback history."""

from datetime import date
from typing import Optional, Sequence

from daily_floor.models import DailyFloor, Feedback
from daily_floor.utils.dates import days_before

FLOOR_RETENTION_DAYS = 90
FEEDBACK_RETENTION_DAYS = 30


def find_floor(floors: Sequence[DailyFloor], day: date) -> Optional[DailyFloor]:
    """Return the floor for ``day``, if one exists."""
    for floor in floors:
        if floor.date == day:
            return floor
    return None


def upsert_floor(
    floors: Sequence[DailyFloor], floor: DailyFloor, today: date
) -> list[DailyFloor]:
    """
    Replace the floor for the same date or append it, then apply retention.

    Args:
        floors: Existing floors
        floor: The floor to store
        today: Reference date for the 90-day window

    Returns:
        A new list of floors
    """
    updated = list(floors)
    for index, existing in enumerate(updated):
        if existing.date == floor.date:
            updated[index] = floor
            break
    else:
        updated.append(floor)

    cutoff = days_before(today, FLOOR_RETENTION_DAYS)
    return [f for f in updated if f.date >= cutoff]


def upsert_feedback(
    feedback: Sequence[Feedback], entry: Feedback, today: date
) -> list[Feedback]:
    """Keep one feedback entry per date (latest wins) within the 30-day window."""
    updated = list(feedback)
    for index, existing in enumerate(updated):
        if existing.date == entry.date:
            updated[index] = entry
            break
    else:
        updated.append(entry)

    cutoff = days_before(today, FEEDBACK_RETENTION_DAYS)
    return [f for f in updated if f.date >= cutoff]


def recent_floors(
    floors: Sequence[DailyFloor], today: date, days: int = 7
) -> list[DailyFloor]:
    """Floors from the last ``days`` days, most recent first."""
    cutoff = days_before(today, days)
    recent = [f for f in floors if f.date >= cutoff]
    recent.sort(key=lambda f: f.date, reverse=True)
    return recent


def recent_feedback(
    feedback: Sequence[Feedback], today: date, days: int = 7
) -> list[Feedback]:
    """Feedback from the last ``days`` days, most recent first."""
    cutoff = days_before(today, days)
    recent = [f for f in feedback if f.date >= cutoff]
    recent.sort(key=lambda f: f.date, reverse=True)
    return recent

"""Tests for streak tracking and calendar views."""

from datetime import date, timedelta

from daily_floor.streak import (
    calculate_streak,
    get_calendar_days,
    get_monthly_grid,
    get_streak_display,
    mark_floor_complete_and_update_streak,
)


def _days(today, *offsets):
    return [today - timedelta(days=n) for n in offsets]


def _completed_floor(make_floor, make_exercise, day):
    return make_floor(
        [make_exercise(completed=True), make_exercise("plank", "Plank", time=30, completed=True)],
        day=day,
        completed=True,
    )


def test_completing_today_extends_yesterdays_streak(make_streak, make_floor, make_exercise, today):
    streak = make_streak(_days(today, 1, 2, 3, 4, 5), current=5, longest=5)
    updated = mark_floor_complete_and_update_streak(
        _completed_floor(make_floor, make_exercise, today), streak, today
    )
    assert updated.current == 6
    assert updated.longest == 6
    assert updated.last_completed_date == today
    assert updated.completion_calendar[today.isoformat()] is True
    assert streak.current == 5


def test_longest_is_kept_when_larger(make_streak, make_floor, make_exercise, today):
    streak = make_streak(_days(today, 1, 2, 3, 4, 5), current=5, longest=12)
    updated = mark_floor_complete_and_update_streak(
        _completed_floor(make_floor, make_exercise, today), streak, today
    )
    assert updated.current == 6
    assert updated.longest == 12


def test_incomplete_floor_leaves_streak_alone(make_streak, make_floor, today):
    streak = make_streak(_days(today, 1), current=1, longest=1)
    assert mark_floor_complete_and_update_streak(make_floor(), streak, today) is streak


def test_streak_breaks_after_missed_days(make_streak, today):
    last = today - timedelta(days=3)
    streak = make_streak([last], current=1, longest=4, last_completed_date=last)
    updated = calculate_streak(streak, today)
    assert updated.current == 0
    assert updated.longest == 4


def test_yesterday_keeps_streak_alive(make_streak, today):
    yesterday = today - timedelta(days=1)
    streak = make_streak(_days(today, 1, 2), current=0, longest=1, last_completed_date=yesterday)
    updated = calculate_streak(streak, today)
    assert updated.current == 2
    assert updated.longest == 2
    assert updated.last_completed_date == yesterday


def test_no_history_is_unchanged(make_streak, today):
    streak = make_streak()
    assert calculate_streak(streak, today) is streak


def test_walk_is_capped(make_streak, today):
    streak = make_streak(_days(today, *range(400)))
    assert calculate_streak(streak, today).current == 365


def test_calendar_is_pruned_to_ninety_days(make_streak, make_floor, make_exercise, today):
    streak = make_streak(_days(today, 90, 91, 200))
    updated = mark_floor_complete_and_update_streak(
        _completed_floor(make_floor, make_exercise, today), streak, today
    )
    assert set(updated.completion_calendar) == {
        date(2024, 3, 14).isoformat(),
        today.isoformat(),
    }
    assert updated.current == 1


def test_longest_never_decreases(make_streak, make_floor, make_exercise):
    streak = make_streak()
    start = date(2024, 1, 1)
    pattern = [0, 1, 2, 5, 6, 7, 8, 12, 20, 21]
    previous_longest = 0
    for offset in pattern:
        day = start + timedelta(days=offset)
        streak = mark_floor_complete_and_update_streak(
            _completed_floor(make_floor, make_exercise, day), streak, day
        )
        assert streak.longest >= previous_longest
        previous_longest = streak.longest
    assert streak.longest == 4
    assert streak.current == 2


def test_streak_display(make_streak, today):
    done_today = get_streak_display(make_streak([today], current=1, longest=3), today)
    assert done_today.completed_today
    assert done_today.is_active
    assert done_today.longest == 3

    yesterday_only = make_streak(_days(today, 1), current=1, longest=1)
    display = get_streak_display(yesterday_only, today)
    assert not display.completed_today
    assert display.is_active

    stale = make_streak(_days(today, 1), current=0, longest=1)
    assert not get_streak_display(stale, today).is_active


def test_calendar_days(make_streak, today):
    days = get_calendar_days(make_streak(_days(today, 0, 2)), 7, today)
    assert [d.date for d in days] == [today - timedelta(days=n) for n in range(6, -1, -1)]
    assert days[-1].is_today
    assert not any(d.is_today for d in days[:-1])
    assert [d.completed for d in days] == [False, False, False, False, True, False, True]


def test_monthly_grid_current_month(make_streak, today):
    grid = get_monthly_grid(make_streak([date(2024, 6, 1)]), 0, today)
    assert len(grid) == 6
    assert all(len(week) == 7 for week in grid)
    assert grid[0][0].date == date(2024, 5, 26)
    assert not grid[0][0].in_month
    assert grid[0][6].date == date(2024, 6, 1)
    assert grid[0][6].in_month
    assert grid[0][6].completed
    assert grid[0][0].date.weekday() == 6  # Sunday
    flagged = [d for week in grid for d in week if d.is_today]
    assert [d.date for d in flagged] == [today]


def test_monthly_grid_offsets(make_streak):
    grid = get_monthly_grid(make_streak(), 1, date(2024, 1, 15))
    in_month = [d.date for week in grid for d in week if d.in_month]
    assert in_month[0] == date(2023, 12, 1)
    assert in_month[-1] == date(2023, 12, 31)
    assert not any(d.is_today for week in grid for d in week)

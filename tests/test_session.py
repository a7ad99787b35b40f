"""Tests for the app-state workflow."""

import random
from datetime import datetime, timedelta, timezone

from daily_floor.config import Settings
from daily_floor.models import AppState, UserProfile
from daily_floor.session import (
    create_default_profile,
    ensure_today_floor,
    resolve_now,
    submit_feedback,
    toggle_exercise,
)


def test_default_profile(now):
    profile = create_default_profile(now)
    assert profile.level == 5
    assert profile.time_preference == 5
    assert profile.equipment == "none"
    assert profile.constraints == []
    assert profile.created_at == now


def test_first_use_creates_profile_and_floor(now, rng):
    state, floor = ensure_today_floor(AppState(), rng=rng, now=now)
    assert state.user_profile is not None
    assert state.onboarding_complete
    assert state.floors == [floor]
    assert floor.date == now.date()


def test_existing_floor_is_reused(now, rng):
    state, floor = ensure_today_floor(AppState(), rng=rng, now=now)
    again, same = ensure_today_floor(state, rng=random.Random(99), now=now)
    assert again is state
    assert same is floor


def test_toggle_updates_streak_on_completion(now, rng):
    state, floor = ensure_today_floor(AppState(), rng=rng, now=now)
    required = [ex.exercise_id for ex in floor.exercises if not ex.is_bonus]

    state = toggle_exercise(state, floor.date, required[0], now=now)
    assert state.streak.current == 0
    state = toggle_exercise(state, floor.date, required[1], now=now)

    assert state.floors[0].completed
    assert state.streak.current == 1
    assert state.streak.last_completed_date == now.date()


def test_toggle_unknown_targets_are_noops(now, rng):
    state, floor = ensure_today_floor(AppState(), rng=rng, now=now)
    assert toggle_exercise(state, floor.date, "burpees", now=now) is state
    assert toggle_exercise(state, floor.date - timedelta(days=1), "plank", now=now) is state


def test_submit_feedback_adjusts_today(now, make_floor):
    state = AppState(
        user_profile=UserProfile(id="u1"),
        floors=[make_floor(day=now.date())],
    )
    state, changes = submit_feedback(state, "easier", energy="high", now=now)
    assert len(state.feedback) == 1
    assert state.feedback[0].difficulty == "easier"
    assert changes
    assert state.floors[0].exercises[0].target_reps == 13  # 10 * 1.265


def test_submit_feedback_uses_prior_entries_only(now, make_floor, make_exercise, make_feedback):
    yesterday = now.date() - timedelta(days=1)
    state = AppState(floors=[make_floor([make_exercise(reps=20)], day=now.date())])
    _, single = submit_feedback(state, "harder", now=now)
    assert single == ["Push-Ups: -3 reps"]  # 0.85, not a deload

    state = state.model_copy(update={"feedback": [make_feedback("harder", day=yesterday)]})
    _, repeated = submit_feedback(state, "harder", now=now)
    assert repeated == ["Push-Ups: -6 reps"]  # 0.70 deload


def test_submit_feedback_without_floor(now):
    state, changes = submit_feedback(AppState(), "same", now=now)
    assert changes == []
    assert len(state.feedback) == 1


def test_resolve_now_uses_configured_timezone():
    resolved = resolve_now(None, Settings(timezone="UTC"))
    assert resolved.utcoffset() == timedelta(0)
    fixed = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert resolve_now(fixed, None) is fixed


def test_seeded_settings_make_generation_reproducible(now):
    settings = Settings(seed=3)
    _, first = ensure_today_floor(AppState(), now=now, settings=settings)
    _, second = ensure_today_floor(AppState(), now=now, settings=settings)
    assert [ex.exercise_id for ex in first.exercises] == [
        ex.exercise_id for ex in second.exercises
    ]

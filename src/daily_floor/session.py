"""
Pure app-state workflow.

Each function is one read-modify-write step: the caller loads an
``AppState``, passes it in, and persists the returned state.
"""

import logging
import random
from datetime import date, datetime
from typing import Optional

from daily_floor.adjustment import adjust_floor
from daily_floor.completion import toggle_exercise_complete
from daily_floor.config import Settings, get_settings
from daily_floor.generator import DEFAULT_LEVEL, generate_daily_floor
from daily_floor.history import (
    find_floor,
    recent_feedback,
    recent_floors,
    upsert_feedback,
    upsert_floor,
)
from daily_floor.models import (
    AppState,
    DailyFloor,
    DifficultyFeedback,
    EnergyLevel,
    EquipmentLevel,
    Feedback,
    FloorGenerationOptions,
    SorenessLevel,
    TimePreference,
    UserProfile,
)
from daily_floor.streak import mark_floor_complete_and_update_streak
from daily_floor.utils.dates import local_now
from daily_floor.utils.formatting import generate_id

logger = logging.getLogger(__name__)

GENERATION_FLOOR_DAYS = 7
GENERATION_FEEDBACK_DAYS = 3
ADJUSTMENT_FEEDBACK_DAYS = 3


def resolve_now(now: Optional[datetime], settings: Optional[Settings]) -> datetime:
    """Explicit time wins; otherwise the current time in the configured timezone."""
    if now is not None:
        return now
    settings = settings or get_settings()
    return local_now(settings.get_tzinfo())


def create_default_profile(now: Optional[datetime] = None) -> UserProfile:
    """A mid-level profile with no equipment and no constraints."""
    now = now or local_now()
    return UserProfile(
        id=generate_id(),
        level=DEFAULT_LEVEL,
        time_preference=5,
        equipment=EquipmentLevel.NONE,
        constraints=[],
        created_at=now,
        updated_at=now,
    )


def ensure_today_floor(
    state: AppState,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    include_bonus: bool = True,
    settings: Optional[Settings] = None,
) -> tuple[AppState, DailyFloor]:
    """
    Return today's floor, generating and storing it if it does not exist yet.

    A default profile is created on first use. Without explicit ``rng``/``now``
    the configured seed and timezone are used.
    """
    if rng is None or now is None:
        settings = settings or get_settings()
        rng = rng or settings.get_rng()
    now = resolve_now(now, settings)
    today = now.date()

    existing = find_floor(state.floors, today)
    if existing is not None:
        return state, existing

    profile = state.user_profile
    update: dict = {}
    if profile is None:
        profile = create_default_profile(now)
        update.update({"user_profile": profile, "onboarding_complete": True})
        logger.info("Created default profile %s", profile.id)

    floor = generate_daily_floor(
        profile,
        recent_floors(state.floors, today, GENERATION_FLOOR_DAYS),
        recent_feedback(state.feedback, today, GENERATION_FEEDBACK_DAYS),
        FloorGenerationOptions(target_date=today, include_bonus=include_bonus),
        rng=rng,
        now=now,
    )
    update["floors"] = upsert_floor(state.floors, floor, today)
    return state.model_copy(update=update), floor


def toggle_exercise(
    state: AppState,
    floor_date: date,
    exercise_id: str,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> AppState:
    """
    Toggle an exercise on the floor for ``floor_date`` and update the streak.

    The streak only moves on the transition into fully completed. Missing
    floors or unknown exercise ids leave the state unchanged.
    """
    now = resolve_now(now, settings)
    floor = find_floor(state.floors, floor_date)
    if floor is None:
        return state

    updated = toggle_exercise_complete(floor, exercise_id, now=now)
    if updated is floor:
        return state

    update: dict = {"floors": upsert_floor(state.floors, updated, now.date())}
    if updated.completed and not floor.completed:
        update["streak"] = mark_floor_complete_and_update_streak(
            updated, state.streak, now.date()
        )
    return state.model_copy(update=update)


def submit_feedback(
    state: AppState,
    difficulty: DifficultyFeedback | str,
    soreness: Optional[SorenessLevel | str] = None,
    energy: Optional[EnergyLevel | str] = None,
    time_available: Optional[TimePreference] = None,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> tuple[AppState, list[str]]:
    """
    Record today's feedback and adjust today's floor with it.

    Returns:
        The new state and the adjustment change log (empty if there is no
        floor for today)
    """
    now = resolve_now(now, settings)
    today = now.date()
    entry = Feedback(
        id=generate_id(),
        date=today,
        difficulty=difficulty,
        soreness=soreness,
        energy=energy,
        time_available=time_available,
        created_at=now,
    )
    feedback = upsert_feedback(state.feedback, entry, today)
    update: dict = {"feedback": feedback}

    floor = find_floor(state.floors, today)
    changes: list[str] = []
    if floor is not None:
        prior = recent_feedback(state.feedback, today, ADJUSTMENT_FEEDBACK_DAYS)
        result = adjust_floor(floor, entry, prior, state.user_profile, now=now)
        update["floors"] = upsert_floor(state.floors, result.floor, today)
        changes = result.changes

    return state.model_copy(update=update), changes

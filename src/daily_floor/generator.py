"""
Daily floor generator.

Rules:
1. Always include 1 primary movement and 1 support movement
2. Optional 3rd bonus movement, alternating primary/support by day of month
3. Avoid loading the same muscle groups on consecutive days
4. Respect the user's constraints, falling back to the full pool if needed
5. Scale targets by user level and recent feedback
6. Display duration is clamped to 3-6 minutes
"""

import logging
import random
from datetime import date, datetime
from typing import Optional, Sequence

from daily_floor.catalog import (
    as_values,
    get_exercise_by_id,
    get_primary_exercises,
    get_safe_exercises,
    get_support_exercises,
)
from daily_floor.errors import FloorGenerationError
from daily_floor.models import (
    DailyFloor,
    DifficultyFeedback,
    Exercise,
    Feedback,
    FloorExercise,
    FloorGenerationOptions,
    UserProfile,
)
from daily_floor.utils.dates import days_before, local_now
from daily_floor.utils.formatting import format_target, generate_id, round_half_up

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = 5
RECOVERY_DAYS = 1
SECONDS_PER_REP = 3
FALLBACK_EXERCISE_SECONDS = 30
MIN_DISPLAY_MINUTES = 3
MAX_DISPLAY_MINUTES = 6

EASIER_MODIFIER = 0.85
HARDER_MODIFIER = 1.15
DELOAD_MODIFIER = 0.7
DELOAD_HARD_COUNT = 2


def get_recently_worked_muscles(
    recent_floors: Sequence[DailyFloor], today: date, days_back: int = RECOVERY_DAYS
) -> set[str]:
    """Muscle groups from completed exercises of completed floors in the last ``days_back`` days."""
    cutoff = days_before(today, days_back)
    muscles: set[str] = set()
    for floor in recent_floors:
        if floor.date < cutoff or not floor.completed:
            continue
        for floor_ex in floor.exercises:
            if not floor_ex.completed:
                continue
            exercise = get_exercise_by_id(floor_ex.exercise_id)
            if exercise:
                muscles.update(exercise.muscle_groups)
    return muscles


def scale_target(base: int, level: int) -> int:
    """Scale a base target by user level: level 1 = 60%, level 10 = 150%."""
    return round_half_up(base * (0.6 + (level - 1) * 0.1))


def get_difficulty_modifier(recent_feedback: Sequence[Feedback]) -> float:
    """
    Intensity modifier from recent feedback (index 0 = most recent).

    The latest entry nudges intensity; two or more "harder" reports anywhere
    in the window force a deload.
    """
    modifier = 1.0
    if recent_feedback:
        latest = recent_feedback[0].difficulty
        if latest == DifficultyFeedback.EASIER:
            modifier = EASIER_MODIFIER
        elif latest == DifficultyFeedback.HARDER:
            modifier = HARDER_MODIFIER

    hard_count = sum(1 for f in recent_feedback if f.difficulty == DifficultyFeedback.HARDER)
    if hard_count >= DELOAD_HARD_COUNT:
        modifier = DELOAD_MODIFIER
    return modifier


def pick_weighted_random(
    candidates: Sequence[Exercise], recent_muscles: set[str], rng: random.Random
) -> Exercise:
    """
    Pick an exercise, preferring ones with less overlap with recently worked muscles.

    Each candidate weighs ``max(1, 5 - overlap)``.

    Raises:
        FloorGenerationError: If there are no candidates
    """
    if not candidates:
        raise FloorGenerationError("No exercises available")
    if len(candidates) == 1:
        return candidates[0]

    weights = [max(1, 5 - ex.works_any(recent_muscles)) for ex in candidates]
    roll = rng.random() * sum(weights)
    for exercise, weight in zip(candidates, weights):
        roll -= weight
        if roll <= 0:
            return exercise
    return candidates[-1]


def build_floor_exercise(
    exercise: Exercise, level: int, modifier: float, is_bonus: bool = False
) -> FloorExercise:
    """Create an incomplete floor entry with a level- and feedback-scaled target."""
    target_reps = None
    target_time = None
    if exercise.base_reps is not None:
        target_reps = round_half_up(scale_target(exercise.base_reps, level) * modifier)
    else:
        target_time = round_half_up(scale_target(exercise.base_time, level) * modifier)
    return FloorExercise(
        exercise_id=exercise.id,
        exercise_name=exercise.name,
        target_reps=target_reps,
        target_time=target_time,
        is_bonus=is_bonus,
        completed=False,
    )


def estimate_exercise_seconds(floor_ex: FloorExercise) -> int:
    """Rough duration of one floor exercise in seconds."""
    if floor_ex.target_time:
        return floor_ex.target_time
    if floor_ex.target_reps:
        return floor_ex.target_reps * SECONDS_PER_REP
    return FALLBACK_EXERCISE_SECONDS


def estimate_duration_minutes(exercises: Sequence[FloorExercise]) -> int:
    """Total estimated minutes, clamped to the 3-6 minute display range."""
    total_seconds = sum(estimate_exercise_seconds(ex) for ex in exercises)
    minutes = round_half_up(total_seconds / 60)
    return max(MIN_DISPLAY_MINUTES, min(MAX_DISPLAY_MINUTES, minutes))


def generate_daily_floor(
    user_profile: Optional[UserProfile],
    recent_floors: Sequence[DailyFloor],
    recent_feedback: Sequence[Feedback],
    options: Optional[FloorGenerationOptions] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> DailyFloor:
    """
    Generate a daily floor workout.

    Args:
        user_profile: The user's profile, or None for mid-level defaults
        recent_floors: Recent floors, used to rest recently worked muscles
        recent_feedback: Recent feedback, most recent first
        options: Target date and whether to add a bonus exercise
        rng: Random source for exercise selection
        now: Generation time; also defines "today" for recovery checks

    Returns:
        A new floor with 2 or 3 incomplete exercises

    Raises:
        FloorGenerationError: If the primary or support pool is empty
    """
    options = options or FloorGenerationOptions()
    rng = rng or random.Random()
    now = now or local_now()
    today = now.date()
    floor_date = options.target_date or today

    level = user_profile.level if user_profile else DEFAULT_LEVEL
    constraints = as_values(user_profile.constraints) if user_profile else set()

    safe = get_safe_exercises(constraints)
    safe_primary = [ex for ex in safe if ex.is_primary]
    safe_support = [ex for ex in safe if ex.is_support]
    if not safe_primary or not safe_support:
        logger.warning(
            "Constraints %s too restrictive, falling back to full exercise list",
            sorted(constraints),
        )
    primary_pool = safe_primary or get_primary_exercises()
    support_pool = safe_support or get_support_exercises()

    recent_muscles = get_recently_worked_muscles(recent_floors, today)
    modifier = get_difficulty_modifier(recent_feedback)

    used_ids: set[str] = set()
    exercises: list[FloorExercise] = []

    primary = pick_weighted_random(primary_pool, recent_muscles, rng)
    used_ids.add(primary.id)
    exercises.append(build_floor_exercise(primary, level, modifier))

    available_support = [ex for ex in support_pool if ex.id not in used_ids]
    support = pick_weighted_random(available_support, recent_muscles, rng)
    used_ids.add(support.id)
    exercises.append(build_floor_exercise(support, level, modifier))

    if options.include_bonus:
        # Even days get another primary, odd days another support
        source = primary_pool if floor_date.day % 2 == 0 else support_pool
        bonus_pool = [ex for ex in source if ex.id not in used_ids]
        if bonus_pool:
            bonus = pick_weighted_random(bonus_pool, recent_muscles, rng)
            exercises.append(build_floor_exercise(bonus, level, modifier, is_bonus=True))

    floor = DailyFloor(
        id=generate_id(),
        date=floor_date,
        exercises=exercises,
        completed=False,
        estimated_duration=estimate_duration_minutes(exercises),
        generated_at=now,
    )
    logger.debug(
        "Generated floor for %s (level %d, modifier %.2f): %s",
        floor_date,
        level,
        modifier,
        ", ".join(
            f"{ex.exercise_name} {format_target(ex.target_reps, ex.target_time)}"
            for ex in exercises
        ),
    )
    return floor

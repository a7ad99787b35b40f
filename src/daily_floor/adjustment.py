"""
Floor adjustment from user feedback.

Safety constraints:
- Never increase intensity more than 30% in one adjustment
- Never decrease intensity more than 40% in one adjustment
- "Too hard" again within the last three reports forces a deload
- Soreness plus "too hard" swaps exercises for gentler alternatives
"""

import logging
from datetime import datetime
from typing import Iterable, Literal, Optional, Sequence

from daily_floor.catalog import EXERCISES, as_values, get_exercise_by_id
from daily_floor.completion import with_exercises
from daily_floor.models import (
    AdjustmentResult,
    DailyFloor,
    DifficultyFeedback,
    EnergyLevel,
    Feedback,
    FloorExercise,
    SorenessLevel,
    UserProfile,
)
from daily_floor.utils.formatting import format_delta, round_half_up

logger = logging.getLogger(__name__)

MAX_INCREASE_PERCENT = 0.30
MAX_DECREASE_PERCENT = 0.40

EASIER_MULTIPLIER = 1.15
HARDER_MULTIPLIER = 0.85
DELOAD_MULTIPLIER = 0.70
PATTERN_WINDOW = 3
LOW_ENERGY_FACTOR = 0.9
HIGH_ENERGY_FACTOR = 1.1
SWAP_INTENSITY = 0.85
QUICK_ADJUST_STEP = 0.15

MIN_REPS = 3
MIN_SECONDS = 10

NO_CHANGES = "No changes needed"


def get_adjustment_multiplier(feedback: Feedback, recent_feedback: Sequence[Feedback]) -> float:
    """
    Calculate the intensity multiplier for a feedback entry.

    Args:
        feedback: The new feedback
        recent_feedback: Prior feedback, most recent first

    Returns:
        A multiplier within [0.60, 1.30]
    """
    multiplier = 1.0
    if feedback.difficulty == DifficultyFeedback.EASIER:
        multiplier = EASIER_MULTIPLIER
    elif feedback.difficulty == DifficultyFeedback.HARDER:
        multiplier = HARDER_MULTIPLIER

    recent_hard = sum(
        1 for f in recent_feedback[:PATTERN_WINDOW] if f.difficulty == DifficultyFeedback.HARDER
    )
    if feedback.difficulty == DifficultyFeedback.HARDER and recent_hard >= 1:
        multiplier = DELOAD_MULTIPLIER

    if feedback.energy == EnergyLevel.LOW:
        multiplier *= LOW_ENERGY_FACTOR
    elif feedback.energy == EnergyLevel.HIGH:
        multiplier *= HIGH_ENERGY_FACTOR

    multiplier = min(1 + MAX_INCREASE_PERCENT, multiplier)
    multiplier = max(1 - MAX_DECREASE_PERCENT, multiplier)
    return multiplier


def find_alternative_exercise(
    current: FloorExercise, constraints: Iterable[str]
) -> Optional[FloorExercise]:
    """
    Find a gentler exercise of the same movement type that shifts muscle emphasis.

    Candidates are no harder than the original, safe for ``constraints``, and
    share fewer muscle groups than the original works. The lowest difficulty
    wins, ties going to catalog order. The result carries the alternative's
    unscaled base target and is not completed.
    """
    exercise = get_exercise_by_id(current.exercise_id)
    if exercise is None:
        return None

    avoid = as_values(constraints)
    original_muscles = set(exercise.muscle_groups)
    alternatives = [
        alt
        for alt in EXERCISES
        if alt.id != exercise.id
        and alt.movement_type == exercise.movement_type
        and alt.difficulty_level <= exercise.difficulty_level
        and alt.is_safe_for(avoid)
        and alt.works_any(original_muscles) < len(original_muscles)
    ]
    if not alternatives:
        return None

    chosen = min(alternatives, key=lambda alt: alt.difficulty_level)
    return FloorExercise(
        exercise_id=chosen.id,
        exercise_name=chosen.name,
        target_reps=chosen.base_reps,
        target_time=chosen.base_time,
        is_bonus=current.is_bonus,
        completed=False,
    )


def scale_exercise(exercise: FloorExercise, multiplier: float) -> FloorExercise:
    """Scale targets by ``multiplier``, with floors of 3 reps and 10 seconds."""
    target_reps = exercise.target_reps
    target_time = exercise.target_time
    if target_reps:
        target_reps = max(MIN_REPS, round_half_up(target_reps * multiplier))
    if target_time:
        target_time = max(MIN_SECONDS, round_half_up(target_time * multiplier))
    return exercise.model_copy(update={"target_reps": target_reps, "target_time": target_time})


def describe_changes(before: FloorExercise, after: FloorExercise) -> list[str]:
    """Change-log lines for the target deltas between two versions of an exercise."""
    changes = []
    if after.target_reps != before.target_reps:
        changes.append(
            format_delta(before.exercise_name, before.target_reps, after.target_reps, "reps")
        )
    if after.target_time != before.target_time:
        changes.append(
            format_delta(before.exercise_name, before.target_time, after.target_time, "s")
        )
    return changes


def adjust_floor(
    current_floor: DailyFloor,
    feedback: Feedback,
    recent_feedback: Sequence[Feedback],
    user_profile: Optional[UserProfile],
    now: Optional[datetime] = None,
) -> AdjustmentResult:
    """
    Rescale or substitute the floor's exercises based on feedback.

    Args:
        current_floor: Today's floor
        feedback: The new feedback
        recent_feedback: Prior feedback, most recent first
        user_profile: Supplies constraints for substitutions; may be None
        now: Timestamp used if the adjusted floor becomes complete

    Returns:
        The adjusted floor and a human-readable change log
    """
    constraints = user_profile.constraints if user_profile else []
    multiplier = get_adjustment_multiplier(feedback, recent_feedback)
    needs_swap = (
        feedback.soreness == SorenessLevel.SORE
        and feedback.difficulty == DifficultyFeedback.HARDER
    )

    changes: list[str] = []
    adjusted: list[FloorExercise] = []
    for exercise in current_floor.exercises:
        if needs_swap and not exercise.is_bonus:
            alternative = find_alternative_exercise(exercise, constraints)
            if alternative is not None:
                changes.append(f"Swapped {exercise.exercise_name} → {alternative.exercise_name}")
                adjusted.append(scale_exercise(alternative, SWAP_INTENSITY))
                continue

        scaled = scale_exercise(exercise, multiplier)
        changes.extend(describe_changes(exercise, scaled))
        adjusted.append(scaled)

    logger.info(
        "Adjusted floor %s with multiplier %.2f (%d change(s))",
        current_floor.date,
        multiplier,
        len(changes),
    )
    if not changes:
        changes.append(NO_CHANGES)

    return AdjustmentResult(floor=with_exercises(current_floor, adjusted, now), changes=changes)


def quick_adjust(
    floor: DailyFloor,
    direction: Literal["easier", "harder"],
    now: Optional[datetime] = None,
) -> AdjustmentResult:
    """
    One-tap rescale by 15% without feedback semantics or substitution.

    Args:
        floor: The floor to rescale
        direction: "easier" scales down, "harder" scales up
        now: Timestamp used if the floor's completion state is re-stamped

    Returns:
        The rescaled floor and its change log (empty if nothing moved)
    """
    if direction == DifficultyFeedback.EASIER:
        multiplier = 1 - QUICK_ADJUST_STEP
    elif direction == DifficultyFeedback.HARDER:
        multiplier = 1 + QUICK_ADJUST_STEP
    else:
        raise ValueError(f"Invalid direction: {direction}. Expected 'easier' or 'harder'")

    changes: list[str] = []
    adjusted: list[FloorExercise] = []
    for exercise in floor.exercises:
        scaled = scale_exercise(exercise, multiplier)
        changes.extend(describe_changes(exercise, scaled))
        adjusted.append(scaled)

    return AdjustmentResult(floor=with_exercises(floor, adjusted, now), changes=changes)

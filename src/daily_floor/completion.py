"""Exercise completion toggling and the floor-level completed flag."""

from datetime import datetime
from typing import Optional, Sequence

from daily_floor.models import DailyFloor, FloorExercise
from daily_floor.utils.dates import local_now


def is_floor_complete(exercises: Sequence[FloorExercise]) -> bool:
    """A floor is complete when every non-bonus exercise is completed."""
    return all(ex.completed for ex in exercises if not ex.is_bonus)


def with_exercises(
    floor: DailyFloor, exercises: list[FloorExercise], now: Optional[datetime] = None
) -> DailyFloor:
    """
    Return a copy of ``floor`` holding ``exercises``, with completion recomputed.

    ``completed_at`` is stamped only on the transition into completed and is
    cleared when the floor is no longer complete.
    """
    completed = is_floor_complete(exercises)
    if not completed:
        completed_at = None
    elif floor.completed and floor.completed_at is not None:
        completed_at = floor.completed_at
    else:
        completed_at = now or local_now()
    return floor.model_copy(
        update={"exercises": exercises, "completed": completed, "completed_at": completed_at}
    )


def mark_exercise_complete(
    floor: DailyFloor,
    exercise_id: str,
    actual_reps: Optional[int] = None,
    actual_time: Optional[int] = None,
    now: Optional[datetime] = None,
) -> DailyFloor:
    """Mark one exercise complete, optionally recording actual performance."""
    exercises = [
        ex.model_copy(
            update={"completed": True, "actual_reps": actual_reps, "actual_time": actual_time}
        )
        if ex.exercise_id == exercise_id
        else ex
        for ex in floor.exercises
    ]
    return with_exercises(floor, exercises, now)


def toggle_exercise_complete(
    floor: DailyFloor,
    exercise_id: str,
    actual_reps: Optional[int] = None,
    actual_time: Optional[int] = None,
    now: Optional[datetime] = None,
) -> DailyFloor:
    """
    Flip one exercise's completed flag.

    Unknown ids are a no-op and return ``floor`` unchanged. Uncompleting clears
    any recorded actual values.
    """
    exercise = floor.get_exercise(exercise_id)
    if exercise is None:
        return floor

    if not exercise.completed:
        return mark_exercise_complete(floor, exercise_id, actual_reps, actual_time, now)

    exercises = [
        ex.model_copy(update={"completed": False, "actual_reps": None, "actual_time": None})
        if ex.exercise_id == exercise_id
        else ex
        for ex in floor.exercises
    ]
    return with_exercises(floor, exercises, now)

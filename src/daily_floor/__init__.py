"""Daily Floor: daily bodyweight workout generation, adjustment and streak tracking."""

from daily_floor.adjustment import adjust_floor, get_adjustment_multiplier, quick_adjust
from daily_floor.catalog import (
    EXERCISES,
    get_exercise_by_id,
    get_exercises_by_type,
    get_primary_exercises,
    get_safe_exercises,
    get_support_exercises,
)
from daily_floor.completion import (
    is_floor_complete,
    mark_exercise_complete,
    toggle_exercise_complete,
)
from daily_floor.errors import ConfigError, DailyFloorError, FloorGenerationError
from daily_floor.generator import generate_daily_floor
from daily_floor.streak import (
    calculate_streak,
    get_calendar_days,
    get_monthly_grid,
    get_streak_display,
    mark_floor_complete_and_update_streak,
)

__all__ = [
    # Catalog
    "EXERCISES",
    "get_exercise_by_id",
    "get_primary_exercises",
    "get_support_exercises",
    "get_exercises_by_type",
    "get_safe_exercises",
    # Generation and completion
    "generate_daily_floor",
    "is_floor_complete",
    "mark_exercise_complete",
    "toggle_exercise_complete",
    # Adjustment
    "adjust_floor",
    "get_adjustment_multiplier",
    "quick_adjust",
    # Streaks
    "calculate_streak",
    "mark_floor_complete_and_update_streak",
    "get_streak_display",
    "get_calendar_days",
    "get_monthly_grid",
    # Errors
    "DailyFloorError",
    "FloorGenerationError",
    "ConfigError",
]

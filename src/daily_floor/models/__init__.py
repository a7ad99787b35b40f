"""Pydantic models for the Daily Floor core."""

from daily_floor.models.exercise import (
    Constraint,
    Exercise,
    MovementType,
    MuscleGroup,
)
from daily_floor.models.floor import (
    AdjustmentResult,
    AppState,
    CalendarDay,
    DailyFloor,
    DifficultyFeedback,
    EnergyLevel,
    EquipmentLevel,
    Feedback,
    FloorExercise,
    FloorGenerationOptions,
    SorenessLevel,
    StreakData,
    StreakDisplay,
    TimePreference,
    UserProfile,
)

__all__ = [
    # Catalog models
    "MovementType",
    "MuscleGroup",
    "Constraint",
    "Exercise",
    # Workout and user models
    "TimePreference",
    "EquipmentLevel",
    "DifficultyFeedback",
    "EnergyLevel",
    "SorenessLevel",
    "UserProfile",
    "FloorExercise",
    "DailyFloor",
    "Feedback",
    "FloorGenerationOptions",
    "AdjustmentResult",
    # Streak models
    "StreakData",
    "StreakDisplay",
    "CalendarDay",
    "AppState",
]

"""Pydantic models for profiles, daily floors, feedback and streaks."""

from datetime import date, datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field

from daily_floor.models.exercise import Constraint

TimePreference = Literal[2, 5, 8]


class EquipmentLevel(str, Enum):
    """Available equipment levels."""

    NONE = "none"
    MINIMAL = "minimal"
    FULL = "full"


class DifficultyFeedback(str, Enum):
    """How the user perceived the last floor."""

    EASIER = "easier"
    SAME = "same"
    HARDER = "harder"


class EnergyLevel(str, Enum):
    """Self-reported energy."""

    LOW = "low"
    OK = "ok"
    HIGH = "high"


class SorenessLevel(str, Enum):
    """Self-reported soreness."""

    SORE = "sore"
    NORMAL = "normal"


class UserProfile(BaseModel):
    """User profile and preferences."""

    id: str
    level: int = Field(default=5, ge=1, le=10)
    time_preference: TimePreference = 5
    equipment: EquipmentLevel = EquipmentLevel.NONE
    constraints: list[Constraint] = Field(default_factory=list)

    # Metadata
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        """Pydantic configuration."""

        use_enum_values = True


class FloorExercise(BaseModel):
    """An exercise as it appears in a daily floor."""

    exercise_id: str
    exercise_name: str

    # Scaled target (exactly one is set)
    target_reps: Optional[int] = None
    target_time: Optional[int] = None  # seconds

    is_bonus: bool = False
    completed: bool = False

    # Actual performance
    actual_reps: Optional[int] = None
    actual_time: Optional[int] = None


class DailyFloor(BaseModel):
    """The workout generated for one calendar date."""

    id: str
    date: date
    exercises: list[FloorExercise] = Field(default_factory=list)

    completed: bool = False
    completed_at: Optional[datetime] = None

    estimated_duration: int  # minutes
    generated_at: datetime

    def get_exercise(self, exercise_id: str) -> Optional[FloorExercise]:
        """Return the floor exercise with the given id, if present."""
        for ex in self.exercises:
            if ex.exercise_id == exercise_id:
                return ex
        return None


class Feedback(BaseModel):
    """User feedback used for adjustment and difficulty trends."""

    id: str
    date: date
    difficulty: DifficultyFeedback
    soreness: Optional[SorenessLevel] = None
    energy: Optional[EnergyLevel] = None
    time_available: Optional[TimePreference] = None
    created_at: datetime

    class Config:
        """Pydantic configuration."""

        use_enum_values = True


class StreakData(BaseModel):
    """Streak counters and the completion calendar (ISO date -> completed)."""

    current: int = 0
    longest: int = 0
    grace_days_used: int = 0
    last_completed_date: Optional[date] = None
    completion_calendar: dict[str, bool] = Field(default_factory=dict)

    def is_completed(self, day: date) -> bool:
        """Return True if ``day`` is marked completed in the calendar."""
        return self.completion_calendar.get(day.isoformat()) is True


class StreakDisplay(BaseModel):
    """Derived streak fields for presentation."""

    current: int
    longest: int
    completed_today: bool
    is_active: bool


class CalendarDay(BaseModel):
    """A single day cell in a calendar view."""

    date: date
    completed: bool
    is_today: bool = False
    in_month: bool = True


class FloorGenerationOptions(BaseModel):
    """Options for generating a daily floor."""

    target_date: Optional[date] = None
    include_bonus: bool = True


class AdjustmentResult(BaseModel):
    """An adjusted floor and the human-readable list of changes made."""

    floor: DailyFloor
    changes: list[str] = Field(default_factory=list)


class AppState(BaseModel):
    """Complete single-user state handed between the caller and the core."""

    user_profile: Optional[UserProfile] = None
    streak: StreakData = Field(default_factory=StreakData)
    floors: list[DailyFloor] = Field(default_factory=list)
    feedback: list[Feedback] = Field(default_factory=list)
    onboarding_complete: bool = False
    last_synced_at: Optional[datetime] = None

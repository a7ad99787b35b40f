"""Pydantic models for the static exercise catalog."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class MovementType(str, Enum):
    """Movement pattern categories for exercise classification."""

    PUSH = "push"
    PULL = "pull"
    SQUAT = "squat"
    HINGE = "hinge"
    CORE = "core"
    MOBILITY = "mobility"


class MuscleGroup(str, Enum):
    """Muscle groups tracked for recovery rotation."""

    CHEST = "chest"
    SHOULDERS = "shoulders"
    TRICEPS = "triceps"
    BACK = "back"
    BICEPS = "biceps"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CORE = "core"
    HIP_FLEXORS = "hip-flexors"
    CALVES = "calves"


class Constraint(str, Enum):
    """Body areas a user may need to protect."""

    WRIST = "wrist"
    KNEE = "knee"
    SHOULDER = "shoulder"
    LOWER_BACK = "lower-back"
    NECK = "neck"


class Exercise(BaseModel):
    """A catalog exercise definition."""

    id: str
    name: str
    movement_type: MovementType
    muscle_groups: list[MuscleGroup]
    is_primary: bool  # Can be used as the main movement
    is_support: bool  # Can be used as the secondary movement

    # Targets (exactly one is set)
    base_reps: Optional[int] = None
    base_time: Optional[int] = None  # seconds

    # Guidance
    goal: str
    instructions: list[str] = Field(default_factory=list)
    common_mistake: str
    easier_variant: Optional[str] = None
    harder_variant: Optional[str] = None

    contraindications: list[Constraint] = Field(default_factory=list)
    difficulty_level: int = Field(ge=1, le=5)

    class Config:
        """Pydantic configuration."""

        frozen = True
        use_enum_values = True

    @model_validator(mode="after")
    def _check_single_target(self) -> "Exercise":
        if (self.base_reps is None) == (self.base_time is None):
            raise ValueError(
                f"Exercise {self.id!r} must define exactly one of base_reps or base_time"
            )
        return self

    def works_any(self, muscles: set[str]) -> int:
        """Count how many of this exercise's muscle groups appear in ``muscles``."""
        return sum(1 for m in self.muscle_groups if m in muscles)

    def is_safe_for(self, constraints: set[str] | list[str]) -> bool:
        """Return True if none of the contraindications match ``constraints``."""
        return not any(c in constraints for c in self.contraindications)

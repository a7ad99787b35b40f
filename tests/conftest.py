"""Shared fixtures for the Daily Floor tests."""

import random
from datetime import date, datetime

import pytest

from daily_floor.models import DailyFloor, Feedback, FloorExercise, StreakData

TODAY = date(2024, 6, 12)
NOW = datetime(2024, 6, 12, 9, 30)


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture(autouse=True)
def _env_isolation(monkeypatch):
    """Keep host DAILY_FLOOR_* settings out of the tests."""
    for name in ("DAILY_FLOOR_TIMEZONE", "DAILY_FLOOR_SEED", "DAILY_FLOOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


@pytest.fixture
def fixed_rng():
    """Factory for random sources that always roll the given value."""
    return FixedRandom


@pytest.fixture
def first_pick() -> random.Random:
    """Always selects the first weighted candidate."""
    return FixedRandom(0.0)


@pytest.fixture
def make_exercise():
    def _mk(exercise_id="push-ups-standard", name="Push-Ups", reps=10, time=None, **kwargs):
        return FloorExercise(
            exercise_id=exercise_id,
            exercise_name=name,
            target_reps=None if time is not None else reps,
            target_time=time,
            **kwargs,
        )

    return _mk


@pytest.fixture
def make_floor(make_exercise):
    def _mk(exercises=None, day=TODAY, **kwargs):
        if exercises is None:
            exercises = [
                make_exercise("push-ups-standard", "Push-Ups", reps=10),
                make_exercise("plank", "Plank", time=30),
                make_exercise("glute-bridges", "Glute Bridges", reps=12, is_bonus=True),
            ]
        fields = dict(
            id=f"floor-{day.isoformat()}",
            date=day,
            exercises=exercises,
            estimated_duration=3,
            generated_at=datetime.combine(day, datetime.min.time()),
        )
        fields.update(kwargs)
        return DailyFloor(**fields)

    return _mk


@pytest.fixture
def make_feedback():
    def _mk(difficulty="same", day=TODAY, **kwargs):
        return Feedback(
            id=f"fb-{day.isoformat()}-{difficulty}",
            date=day,
            difficulty=difficulty,
            created_at=datetime.combine(day, datetime.min.time()),
            **kwargs,
        )

    return _mk


@pytest.fixture
def make_streak():
    def _mk(completed_days=(), current=0, longest=0, last_completed_date=None):
        return StreakData(
            current=current,
            longest=longest,
            last_completed_date=last_completed_date,
            completion_calendar={d.isoformat(): True for d in completed_days},
        )

    return _mk

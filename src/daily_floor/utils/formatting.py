"""Formatting and rounding helpers for targets and change-log lines."""

import math
import uuid


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def format_delta(name: str, before: int | None, after: int | None, unit: str) -> str:
    """Describe a signed target change, e.g. 'Push-Ups: +2 reps' or 'Plank: -5s'."""
    diff = (after or 0) - (before or 0)
    sign = "+" if diff > 0 else ""
    suffix = "s" if unit == "s" else f" {unit}"
    return f"{name}: {sign}{diff}{suffix}"


def format_target(reps: int | None, seconds: int | None) -> str:
    """Convert a reps/time target into a short label (e.g., '12 reps', '0:45')."""
    if seconds is not None:
        if seconds < 60:
            return f"{seconds}s"
        return f"{seconds // 60}:{seconds % 60:02d}"
    if reps is not None:
        return f"{reps} reps"
    return "N/A"


def generate_id() -> str:
    """Generate a short unique identifier."""
    return str(uuid.uuid4())[:8]

"""Utility functions for the Daily Floor core."""

from daily_floor.utils.dates import (
    days_before,
    get_timezone,
    iter_days_back,
    local_now,
    local_today,
    parse_date,
    shift_month,
)
from daily_floor.utils.formatting import (
    format_delta,
    format_target,
    generate_id,
    round_half_up,
)

__all__ = [
    "get_timezone",
    "local_now",
    "local_today",
    "parse_date",
    "days_before",
    "iter_days_back",
    "shift_month",
    "round_half_up",
    "format_delta",
    "format_target",
    "generate_id",
]

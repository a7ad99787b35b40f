"""Exceptions raised by the Daily Floor core."""


class DailyFloorError(Exception):
    """Base class for Daily Floor errors."""


class FloorGenerationError(DailyFloorError):
    """A required exercise role had no candidates, so no floor can be built."""


class ConfigError(DailyFloorError):
    """An environment setting has an invalid value."""

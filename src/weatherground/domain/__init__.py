from .models import (
    DayNightIndicator,
    DayPart,
    DaypartSlot,
    Forecast,
    ForecastDay,
    InstantMetric,
    InstantObservation,
    Metric,
    MoonPhase,
    Observation,
    parse_local_time,
    parse_utc_time,
)

__all__ = [
    "DayNightIndicator",
    "DayPart",
    "DaypartSlot",
    "Forecast",
    "ForecastDay",
    "InstantMetric",
    "InstantObservation",
    "Metric",
    "MoonPhase",
    "Observation",
    "parse_local_time",
    "parse_utc_time",
]

from .client import WeatherGround
from .config import WeatherConfig
from .decoder import decode
from .domain import (
    DayNightIndicator,
    DayPart,
    Forecast,
    InstantMetric,
    InstantObservation,
    Metric,
    MoonPhase,
    Observation,
)
from .errors import (
    FormatError,
    InternalError,
    InvalidConfigurationError,
    NoDataError,
    TransportError,
    WeatherError,
)
from .request import (
    GeoLocation,
    IataLocation,
    IcaoLocation,
    Location,
    MeasureKind,
    PlaceIdLocation,
    PostalLocation,
    build_url,
)
from .transport import Transport, UrllibTransport

__all__ = [
    "DayNightIndicator",
    "DayPart",
    "Forecast",
    "FormatError",
    "GeoLocation",
    "IataLocation",
    "IcaoLocation",
    "InstantMetric",
    "InstantObservation",
    "InternalError",
    "InvalidConfigurationError",
    "Location",
    "MeasureKind",
    "Metric",
    "MoonPhase",
    "NoDataError",
    "Observation",
    "PlaceIdLocation",
    "PostalLocation",
    "Transport",
    "TransportError",
    "UrllibTransport",
    "WeatherConfig",
    "WeatherError",
    "WeatherGround",
    "build_url",
    "decode",
]

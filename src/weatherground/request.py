from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict

from .config import WeatherConfig
from .errors import InternalError, InvalidConfigurationError

API_SCHEME = "https"
API_HOST = "api.weather.com"
RESPONSE_FORMAT = "json"
METRIC_UNITS = "m"
REDACTED = "***"


class MeasureKind(Enum):
    CURRENT = "current"
    HOURLY = "hourly"
    DAILY = "daily"
    ALL = "all"
    FIVE_DAY_FORECAST = "five_day_forecast"

    @property
    def path(self) -> str:
        return MEASURE_PATHS[self]


MEASURE_PATHS = {
    MeasureKind.CURRENT: "/v2/pws/observations/current",
    MeasureKind.HOURLY: "/v2/pws/history/hourly",
    MeasureKind.DAILY: "/v2/pws/history/daily",
    MeasureKind.ALL: "/v2/pws/history/all",
    MeasureKind.FIVE_DAY_FORECAST: "/v3/wx/forecast/daily/5day",
}


class _LocationModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class GeoLocation(_LocationModel):
    lat: float
    lon: float


class IataLocation(_LocationModel):
    code: str


class IcaoLocation(_LocationModel):
    code: str


class PlaceIdLocation(_LocationModel):
    place_id: str


class PostalLocation(_LocationModel):
    postal_key: str


Location = Union[GeoLocation, IataLocation, IcaoLocation, PlaceIdLocation, PostalLocation]


def format_query_date(value: date) -> str:
    """Render the calendar date of ``value`` as ``yyyyMMdd``."""
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def format_coordinate(value: float) -> str:
    """Render a coordinate in fixed-point notation without trailing zeros."""
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def location_parameter(location: Location) -> tuple[str, str]:
    if isinstance(location, GeoLocation):
        return "geocode", f"{format_coordinate(location.lat)},{format_coordinate(location.lon)}"
    if isinstance(location, IataLocation):
        return "iataCode", location.code
    if isinstance(location, IcaoLocation):
        return "icaoCode", location.code
    if isinstance(location, PlaceIdLocation):
        return "placeid", location.place_id
    if isinstance(location, PostalLocation):
        return "postalKey", location.postal_key
    raise InternalError(f"Unsupported location type: {type(location).__name__}")


def build_url(
    kind: MeasureKind,
    config: WeatherConfig,
    *,
    on: date | None = None,
    location: Location | None = None,
    language: str | None = None,
) -> str:
    """Build the request URL for ``kind``.

    Without a location the query targets ``config.station``; with one, the
    station is left out and ``language`` becomes mandatory.
    """
    api_key = config.api_key
    station = config.station

    if location is None:
        if not api_key or not station:
            raise InvalidConfigurationError("API key and station are required")
    elif not api_key or not language:
        raise InvalidConfigurationError("API key and language are required for location queries")

    params: list[tuple[str, str]] = [
        ("format", RESPONSE_FORMAT),
        ("units", METRIC_UNITS),
        ("apiKey", api_key),
    ]
    if on is not None:
        params.append(("date", format_query_date(on)))
    if location is not None:
        params.append(location_parameter(location))
        params.append(("language", language))
    else:
        params.append(("stationId", station))

    try:
        query = urlencode(params, safe=",")
        url = urlunsplit((API_SCHEME, API_HOST, kind.path, query, ""))
        urlsplit(url)
    except (TypeError, ValueError) as exc:
        raise InternalError(f"Unable to construct URL for {kind.value}") from exc
    return url


def redact_url(url: str) -> str:
    """Return ``url`` with the ``apiKey`` value masked."""
    parts = urlsplit(url)
    params = [
        (name, REDACTED if name == "apiKey" else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(params, safe=",*")))


__all__ = [
    "API_HOST",
    "GeoLocation",
    "IataLocation",
    "IcaoLocation",
    "Location",
    "MeasureKind",
    "PlaceIdLocation",
    "PostalLocation",
    "build_url",
    "format_coordinate",
    "format_query_date",
    "location_parameter",
    "redact_url",
]

from __future__ import annotations


class WeatherError(RuntimeError):
    """Base class for every failure surfaced by the client."""

    kind = "weather"


class InternalError(WeatherError):
    """Raised when a request URL cannot be constructed from otherwise valid input."""

    kind = "internal"


class NoDataError(WeatherError):
    """Raised when the transport produced no payload."""

    kind = "no_data"


class FormatError(WeatherError):
    """Raised when a payload cannot be decoded into the expected shape."""

    kind = "format"


class InvalidConfigurationError(WeatherError):
    """Raised when the API key, station or language is missing for a request."""

    kind = "invalid_configuration"


class TransportError(RuntimeError):
    """Raised by a transport when a request cannot be completed."""


__all__ = [
    "FormatError",
    "InternalError",
    "InvalidConfigurationError",
    "NoDataError",
    "TransportError",
    "WeatherError",
]

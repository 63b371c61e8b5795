from __future__ import annotations

import logging
from datetime import date

from .config import WeatherConfig
from .decoder import decode_current, decode_daily, decode_forecast, decode_observations
from .domain.models import Forecast, InstantObservation, Observation
from .errors import NoDataError, TransportError, WeatherError
from .request import Location, MeasureKind, build_url, redact_url
from .transport import Transport, UrllibTransport

LOGGER = logging.getLogger(__name__)


class WeatherGround:
    """Client for the personal weather station and forecast endpoints.

    Every coroutine either returns the decoded value or raises exactly one
    :class:`~weatherground.errors.WeatherError` subclass. The configuration is
    read when the call starts, so it may be changed between calls.
    """

    def __init__(
        self,
        config: WeatherConfig | None = None,
        *,
        transport: Transport | None = None,
    ) -> None:
        self.config = config if config is not None else WeatherConfig()
        self._transport = transport if transport is not None else UrllibTransport()

    async def current(self) -> InstantObservation:
        url = build_url(MeasureKind.CURRENT, self.config)
        return decode_current(await self._fetch(url))

    async def hourly(self, on: date) -> list[Observation]:
        url = build_url(MeasureKind.HOURLY, self.config, on=on)
        return decode_observations(await self._fetch(url))

    async def daily(self, on: date) -> Observation:
        url = build_url(MeasureKind.DAILY, self.config, on=on)
        return decode_daily(await self._fetch(url))

    async def all(self, on: date) -> list[Observation]:
        url = build_url(MeasureKind.ALL, self.config, on=on)
        return decode_observations(await self._fetch(url))

    async def forecast(self, location: Location, language: str) -> Forecast:
        url = build_url(
            MeasureKind.FIVE_DAY_FORECAST,
            self.config,
            location=location,
            language=language,
        )
        return decode_forecast(await self._fetch(url))

    async def _fetch(self, url: str) -> bytes:
        LOGGER.debug("Requesting %s", redact_url(url))
        try:
            payload = await self._transport.fetch(url)
        except TransportError as exc:
            raise NoDataError("Weather API request failed") from exc
        except WeatherError:
            raise
        except Exception as exc:
            raise NoDataError("Weather API transport failed unexpectedly") from exc
        if not payload:
            raise NoDataError("Weather API returned an empty response")
        return payload

from __future__ import annotations

import copy
import json

import pytest

from weatherground import WeatherConfig, WeatherGround
from weatherground.errors import TransportError

INSTANT_OBSERVATION = {
    "stationID": "KMAHANOV10",
    "obsTimeUtc": "2019-12-06T07:26:35Z",
    "obsTimeLocal": "2019-12-06 08:26:35",
    "neighborhood": "1505Broadway",
    "softwareType": None,
    "country": "US",
    "solarRadiation": 0.0,
    "lon": -70.827,
    "realtimeFrequency": None,
    "epoch": 1575617195,
    "lat": 42.1,
    "uv": 0.0,
    "winddir": 270,
    "humidity": 71,
    "qcStatus": 1,
    "metric": {
        "temp": 3.2,
        "heatIndex": 3,
        "dewpt": -1.4,
        "windChill": 0.6,
        "windSpeed": 11.2,
        "windGust": 16.4,
        "pressure": 1012.5,
        "precipRate": 0.0,
        "precipTotal": 0.25,
        "elev": 8.0,
    },
}

OBSERVATION = {
    "stationID": "KMAHANOV10",
    "tz": "America/New_York",
    "obsTimeUtc": "2019-09-30T22:29:49Z",
    "obsTimeLocal": "2019-10-01 00:29:49",
    "epoch": 1569882589,
    "lat": 42.1,
    "lon": -70.827,
    "solarRadiationHigh": 312.4,
    "uvHigh": 3.0,
    "winddirAvg": 212,
    "humidityHigh": 93,
    "humidityLow": 54,
    "humidityAvg": 77.5,
    "qcStatus": 1,
    "metric": {
        "tempHigh": 19.3,
        "tempLow": 11.1,
        "tempAvg": 14.8,
        "windspeedHigh": 14.4,
        "windspeedLow": 0,
        "windspeedAvg": 4.2,
        "windgustHigh": 24.1,
        "windgustLow": 0,
        "windgustAvg": 8.3,
        "dewptHigh": 12.2,
        "dewptLow": 8.9,
        "dewptAvg": 10.6,
        "windchillHigh": 19.3,
        "windchillLow": 11.1,
        "windchillAvg": 14.7,
        "heatindexHigh": 19.3,
        "heatindexLow": 11.1,
        "heatindexAvg": 14.8,
        "pressureMax": 1019.98,
        "pressureMin": 1016.26,
        "pressureTrend": None,
        "precipRate": 0.0,
        "precipTotal": 0.0,
    },
}


def _daypart() -> dict:
    def slots(day_value, night_value, *, first=None):
        values = [day_value, night_value] * 3
        values[0] = first
        return values

    return {
        "cloudCover": slots(40, 75),
        "dayOrNight": slots("D", "N"),
        "daypartName": [None, "Tonight", "Tomorrow", "Tomorrow night", "Sunday", "Sunday night"],
        "iconCode": slots(30, 27),
        "iconCodeExtend": slots(3000, 2700),
        "narrative": slots("Partly cloudy.", "Mostly cloudy."),
        "precipChance": slots(10, 20),
        "precipType": slots("rain", "rain"),
        "qpf": slots(0.0, 0.3),
        "qpfSnow": slots(0.0, 0.0),
        "qualifierCode": slots(None, None),
        "qualifierPhrase": slots(None, None),
        "relativeHumidity": slots(60, 82),
        "snowRange": slots("", ""),
        "temperature": slots(12, 4),
        "temperatureHeatIndex": slots(12, 6),
        "temperatureWindChill": slots(10, 2),
        "thunderCategory": slots("No thunder", "No thunder"),
        "thunderIndex": slots(0, 0),
        "uvDescription": slots("Moderate", "Low"),
        "uvIndex": slots(4, 0),
        "windDirection": slots(250, 230),
        "windDirectionCardinal": slots("WSW", "SW"),
        "windPhrase": slots("Winds WSW at 10 to 15 km/h.", "Winds SW at 5 to 10 km/h."),
        "windSpeed": slots(13, 8),
        "wxPhraseLong": slots("Partly Cloudy", "Mostly Cloudy"),
        "wxPhraseShort": slots("P Cloudy", "M Cloudy"),
    }


FORECAST = {
    "calendarDayTemperatureMax": [13, 14, 11],
    "calendarDayTemperatureMin": [3, 4, 2],
    "dayOfWeek": ["Friday", "Saturday", "Sunday"],
    "expirationTimeUtc": [1575620000, 1575620000, 1575620000],
    "moonPhase": ["Waxing Gibbous", "Waxing Gibbous", "Full Moon"],
    "moonPhaseCode": ["WXG", "WXG", "F"],
    "moonPhaseDay": [10, 11, 12],
    "moonriseTimeLocal": ["2019-12-06T13:40:00-0500", None, "2019-12-08T14:47:00-0500"],
    "moonriseTimeUtc": [1575657600, None, 1575834420],
    "moonsetTimeLocal": ["2019-12-06T01:49:00-0500", "2019-12-07T02:52:00-0500", None],
    "moonsetTimeUtc": [1575614940, 1575705120, None],
    "narrative": ["Partly cloudy.", "Showers late.", "Cooler."],
    "qpf": [0.0, 2.5, 0.8],
    "qpfSnow": [0.0, 0.0, 0.0],
    "sunriseTimeLocal": ["2019-12-06T07:01:13-0500", "2019-12-07T07:02:13-0500", "2019-12-08T07:03:11-0500"],
    "sunriseTimeUtc": [1575633673, 1575720133, 1575806591],
    "sunsetTimeLocal": ["2019-12-06T16:12:09-0500", "2019-12-07T16:12:09-0500", "2019-12-08T16:12:12-0500"],
    "sunsetTimeUtc": [1575666729, 1575753129, 1575839532],
    "temperatureMax": [None, 14, 11],
    "temperatureMin": [3, 4, 2],
    "validTimeLocal": ["2019-12-06T07:00:00-0500", "2019-12-07T07:00:00-0500", "2019-12-08T07:00:00-0500"],
    "validTimeUtc": [1575633600, 1575720000, 1575806400],
    "daypart": [_daypart()],
}


def encode(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


class RecordingTransport:
    """Transport stub returning canned payloads and recording requested URLs."""

    def __init__(self, payload: bytes | None = None, *, error: Exception | None = None) -> None:
        self.payload = payload
        self.error = error
        self.urls: list[str] = []

    async def fetch(self, url: str) -> bytes | None:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.payload


@pytest.fixture
def instant_observation() -> dict:
    return copy.deepcopy(INSTANT_OBSERVATION)


@pytest.fixture
def observation() -> dict:
    return copy.deepcopy(OBSERVATION)


@pytest.fixture
def forecast_payload() -> dict:
    return copy.deepcopy(FORECAST)


@pytest.fixture
def config() -> WeatherConfig:
    return WeatherConfig(api_key="secret-key", station="KMAHANOV10")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(config: WeatherConfig, transport: RecordingTransport) -> WeatherGround:
    return WeatherGround(config, transport=transport)


@pytest.fixture
def failing_transport() -> RecordingTransport:
    return RecordingTransport(error=TransportError("HTTP 503"))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "WEATHERGROUND_API_KEY",
        "WEATHERGROUND_STATION",
        "WEATHERGROUND_LANGUAGE",
        "WEATHERGROUND_CONFIG_PATH",
    ):
        monkeypatch.delenv(name, raising=False)

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Iterator

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

LOCAL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _whole_number(value: Any) -> Any:
    # 71.0 becomes 71; 71.5 and "71" still fail strict int validation.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


WholeInt = Annotated[int, BeforeValidator(_whole_number)]


def parse_local_time(value: str | None) -> datetime | None:
    """Parse a ``yyyy-MM-dd HH:mm:ss`` station time, returning ``None`` when it does not match."""
    if not value:
        return None
    try:
        return datetime.strptime(value, LOCAL_TIME_FORMAT)
    except ValueError:
        return None


def parse_utc_time(value: str | None) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class WireModel(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        strict=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MoonPhase(str, Enum):
    NEW_MOON = "N"
    WAXING_CRESCENT = "WXC"
    FIRST_QUARTER = "FQ"
    WAXING_GIBBOUS = "WXG"
    FULL_MOON = "F"
    WANING_GIBBOUS = "WNG"
    LAST_QUARTER = "LQ"
    WANING_CRESCENT = "WNC"

    @property
    def description(self) -> str:
        return MOON_PHASE_DESCRIPTIONS[self]


MOON_PHASE_DESCRIPTIONS = {
    MoonPhase.NEW_MOON: "New Moon",
    MoonPhase.WAXING_CRESCENT: "Waxing Crescent",
    MoonPhase.FIRST_QUARTER: "First Quarter",
    MoonPhase.WAXING_GIBBOUS: "Waxing Gibbous",
    MoonPhase.FULL_MOON: "Full Moon",
    MoonPhase.WANING_GIBBOUS: "Waning Gibbous",
    MoonPhase.LAST_QUARTER: "Last Quarter",
    MoonPhase.WANING_CRESCENT: "Waning Crescent",
}


class DayNightIndicator(str, Enum):
    DAY = "D"
    NIGHT = "N"

    @property
    def description(self) -> str:
        return DAY_NIGHT_DESCRIPTIONS[self]


DAY_NIGHT_DESCRIPTIONS = {
    DayNightIndicator.DAY: "Day",
    DayNightIndicator.NIGHT: "Night",
}


class InstantMetric(WireModel):
    temp: float
    heat_index: WholeInt
    dewpt: float
    wind_chill: float
    wind_speed: float
    wind_gust: float
    pressure: float
    precip_rate: float
    precip_total: float
    elev: float


class InstantObservation(WireModel):
    """Latest reading of a personal weather station."""

    station_id: str = Field(alias="stationID")
    obs_time_utc: str
    obs_time_local: str
    neighborhood: str
    software_type: str | None = None
    country: str
    solar_radiation: float | None = None
    lon: float
    realtime_frequency: float | None = None
    epoch: WholeInt
    lat: float
    uv: float | None = None
    winddir: WholeInt
    humidity: WholeInt
    qc_status: WholeInt
    metric: InstantMetric

    @property
    def obs_date_local(self) -> datetime | None:
        return parse_local_time(self.obs_time_local)

    @property
    def obs_date_utc(self) -> datetime | None:
        return parse_utc_time(self.obs_time_utc)


class Metric(WireModel):
    temp_high: float
    temp_low: float
    temp_avg: float
    windspeed_high: float
    windspeed_low: float
    windspeed_avg: float
    windgust_high: float
    windgust_low: float
    windgust_avg: float
    dewpt_high: float
    dewpt_low: float
    dewpt_avg: float
    windchill_high: float
    windchill_low: float
    windchill_avg: float
    heatindex_high: float
    heatindex_low: float
    heatindex_avg: float
    pressure_max: float
    pressure_min: float
    pressure_trend: float | None = None
    precip_rate: float
    precip_total: float


class Observation(WireModel):
    """Aggregated reading covering an hour, a five-minute slot or a whole day."""

    station_id: str = Field(alias="stationID")
    tz: str
    obs_time_utc: str
    obs_time_local: str
    epoch: float
    lat: float
    lon: float
    solar_radiation_high: float | None = None
    uv_high: float | None = None
    winddir_avg: float
    humidity_high: float
    humidity_low: float
    humidity_avg: float
    qc_status: WholeInt
    metric: Metric

    @property
    def obs_date_local(self) -> datetime | None:
        return parse_local_time(self.obs_time_local)

    @property
    def obs_date_utc(self) -> datetime | None:
        return parse_utc_time(self.obs_time_utc)


class DayPart(WireModel):
    """Day and night forecast details, one slot per 12-hour segment.

    The upstream API nulls the slots of segments that have already passed,
    so the current day's day slot is ``None`` after the local cutoff.
    """

    cloud_cover: tuple[WholeInt | None, ...]
    day_or_night: tuple[DayNightIndicator | None, ...]
    daypart_name: tuple[str | None, ...]
    icon_code: tuple[WholeInt | None, ...]
    icon_code_extend: tuple[WholeInt | None, ...]
    narrative: tuple[str | None, ...]
    precip_chance: tuple[WholeInt | None, ...]
    precip_type: tuple[str | None, ...]
    qpf: tuple[float | None, ...]
    qpf_snow: tuple[float | None, ...]
    qualifier_code: tuple[str | None, ...]
    qualifier_phrase: tuple[str | None, ...]
    relative_humidity: tuple[WholeInt | None, ...]
    snow_range: tuple[str | None, ...]
    temperature: tuple[WholeInt | None, ...]
    temperature_heat_index: tuple[WholeInt | None, ...]
    temperature_wind_chill: tuple[WholeInt | None, ...]
    thunder_category: tuple[str | None, ...]
    thunder_index: tuple[WholeInt | None, ...]
    uv_description: tuple[str | None, ...]
    uv_index: tuple[WholeInt | None, ...]
    wind_direction: tuple[WholeInt | None, ...]
    wind_direction_cardinal: tuple[str | None, ...]
    wind_phrase: tuple[str | None, ...]
    wind_speed: tuple[WholeInt | None, ...]
    wx_phrase_long: tuple[str | None, ...]
    wx_phrase_short: tuple[str | None, ...]

    def slot(self, index: int) -> DaypartSlot:
        return DaypartSlot(
            index=index,
            day_or_night=_at(self.day_or_night, index),
            name=_at(self.daypart_name, index),
            narrative=_at(self.narrative, index),
            temperature=_at(self.temperature, index),
            precip_chance=_at(self.precip_chance, index),
            precip_type=_at(self.precip_type, index),
            qpf=_at(self.qpf, index),
            relative_humidity=_at(self.relative_humidity, index),
            cloud_cover=_at(self.cloud_cover, index),
            wind_speed=_at(self.wind_speed, index),
            wind_direction_cardinal=_at(self.wind_direction_cardinal, index),
            uv_index=_at(self.uv_index, index),
            icon_code=_at(self.icon_code, index),
            wx_phrase_long=_at(self.wx_phrase_long, index),
        )

    def __len__(self) -> int:
        return len(self.daypart_name)


class Forecast(WireModel):
    """Five-day forecast, one entry per forecast day in every sequence."""

    calendar_day_temperature_max: tuple[WholeInt | None, ...]
    calendar_day_temperature_min: tuple[WholeInt | None, ...]
    day_of_week: tuple[str, ...]
    expiration_time_utc: tuple[WholeInt, ...]
    moon_phase: tuple[str, ...]
    moon_phase_code: tuple[MoonPhase, ...]
    moon_phase_day: tuple[WholeInt, ...]
    moonrise_time_local: tuple[str | None, ...]
    moonrise_time_utc: tuple[WholeInt | None, ...]
    moonset_time_local: tuple[str | None, ...]
    moonset_time_utc: tuple[WholeInt | None, ...]
    narrative: tuple[str, ...]
    qpf: tuple[float, ...]
    qpf_snow: tuple[float, ...]
    sunrise_time_local: tuple[str | None, ...]
    sunrise_time_utc: tuple[WholeInt | None, ...]
    sunset_time_local: tuple[str | None, ...]
    sunset_time_utc: tuple[WholeInt | None, ...]
    temperature_max: tuple[WholeInt | None, ...]
    temperature_min: tuple[WholeInt | None, ...]
    valid_time_local: tuple[str, ...]
    valid_time_utc: tuple[WholeInt, ...]
    daypart: tuple[DayPart, ...]

    @property
    def days(self) -> list[ForecastDay]:
        parts = self.daypart[0] if self.daypart else None
        count = min(
            len(self.day_of_week),
            len(self.temperature_max),
            len(self.temperature_min),
            len(self.narrative),
            len(self.qpf),
            len(self.moon_phase_code),
        )
        days: list[ForecastDay] = []
        for index in range(count):
            day_slot = night_slot = None
            if parts is not None:
                if 2 * index < len(parts):
                    day_slot = parts.slot(2 * index)
                if 2 * index + 1 < len(parts):
                    night_slot = parts.slot(2 * index + 1)
            days.append(
                ForecastDay(
                    index=index,
                    day_of_week=self.day_of_week[index],
                    temperature_max=self.temperature_max[index],
                    temperature_min=self.temperature_min[index],
                    narrative=self.narrative[index],
                    qpf=self.qpf[index],
                    moon_phase=self.moon_phase_code[index],
                    day=day_slot,
                    night=night_slot,
                )
            )
        return days

    @property
    def dayparts(self) -> Iterator[DaypartSlot]:
        for parts in self.daypart:
            for index in range(len(parts)):
                yield parts.slot(index)


@dataclass(frozen=True, slots=True)
class DaypartSlot:
    index: int
    day_or_night: DayNightIndicator | None
    name: str | None
    narrative: str | None
    temperature: int | None
    precip_chance: int | None
    precip_type: str | None
    qpf: float | None
    relative_humidity: int | None
    cloud_cover: int | None
    wind_speed: int | None
    wind_direction_cardinal: str | None
    uv_index: int | None
    icon_code: int | None
    wx_phrase_long: str | None

    @property
    def is_available(self) -> bool:
        return self.name is not None


@dataclass(frozen=True, slots=True)
class ForecastDay:
    index: int
    day_of_week: str
    temperature_max: int | None
    temperature_min: int | None
    narrative: str
    qpf: float
    moon_phase: MoonPhase
    day: DaypartSlot | None = None
    night: DaypartSlot | None = None


def _at(values: tuple, index: int):
    if 0 <= index < len(values):
        return values[index]
    return None

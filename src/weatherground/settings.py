from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import WeatherConfig
from .request import (
    GeoLocation,
    IataLocation,
    IcaoLocation,
    Location,
    PlaceIdLocation,
    PostalLocation,
)

DEFAULT_LANGUAGE = "en-US"


class LocationSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["geo", "iata", "icao", "place_id", "postal"] = "geo"
    lat: float | None = Field(default=None, ge=-90, le=90)
    lon: float | None = Field(default=None, ge=-180, le=180)
    code: str | None = None
    place_id: str | None = None
    postal_key: str | None = None

    @field_validator("code", "place_id", "postal_key")
    @classmethod
    def validate_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError("location identifiers must not be empty")
        return text

    @model_validator(mode="after")
    def validate_location_fields(self) -> LocationSettings:
        if self.type == "geo":
            if self.lat is None or self.lon is None:
                raise ValueError("location.lat and location.lon are required when type is 'geo'")
            return self

        if self.type in ("iata", "icao"):
            if self.code is None:
                raise ValueError(f"location.code is required when type is '{self.type}'")
            return self

        if self.type == "place_id":
            if self.place_id is None:
                raise ValueError("location.place_id is required when type is 'place_id'")
            return self

        if self.type == "postal":
            if self.postal_key is None:
                raise ValueError("location.postal_key is required when type is 'postal'")
            return self

        raise ValueError(f"Unsupported location type: {self.type}")

    def to_location(self) -> Location:
        if self.type == "geo":
            return GeoLocation(lat=self.lat, lon=self.lon)
        if self.type == "iata":
            return IataLocation(code=self.code)
        if self.type == "icao":
            return IcaoLocation(code=self.code)
        if self.type == "place_id":
            return PlaceIdLocation(place_id=self.place_id)
        return PostalLocation(postal_key=self.postal_key)


class YamlSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    api_key: str = ""
    station: str = ""
    language: str = DEFAULT_LANGUAGE
    location: LocationSettings | None = None

    @field_validator("api_key", "station", "language")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERGROUND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = ""
    station: str = ""
    language: str = ""
    config_path: Path | None = None


class ClientSettings(BaseModel):
    api_key: str = ""
    station: str = ""
    language: str = DEFAULT_LANGUAGE
    location: LocationSettings | None = None
    config_path: Path | None = None

    def to_config(self) -> WeatherConfig:
        return WeatherConfig(api_key=self.api_key, station=self.station)

    @property
    def forecast_location(self) -> Location | None:
        if self.location is None:
            return None
        return self.location.to_location()


def _read_config_file(path: Path) -> YamlSettings:
    if not path.is_file():
        raise FileNotFoundError(f"weatherground config file not found: {path}")

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"weatherground config {path} is not valid YAML") from exc

    if document is None:
        return YamlSettings()
    if not isinstance(document, dict):
        raise ValueError(
            f"weatherground config {path} must map api_key, station, language and location"
        )
    return YamlSettings.model_validate(document)


def load_settings(config_path: Path | None = None) -> ClientSettings:
    """Combine the optional YAML file with ``WEATHERGROUND_*`` environment values.

    Non-empty environment values take precedence over the file.
    """
    env = EnvSettings()
    path = config_path or env.config_path
    yaml_settings = _read_config_file(path) if path is not None else YamlSettings()
    return ClientSettings(
        api_key=env.api_key.strip() or yaml_settings.api_key,
        station=env.station.strip() or yaml_settings.station,
        language=env.language.strip() or yaml_settings.language,
        location=yaml_settings.location,
        config_path=path,
    )

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class WeatherConfig(BaseModel):
    """Session configuration shared by every call made through one client."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    api_key: str = ""
    station: str = ""

    @field_validator("api_key", "station")
    @classmethod
    def strip_text(cls, value: str) -> str:
        return value.strip()

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .domain.models import Forecast, InstantObservation, Observation
from .errors import FormatError, NoDataError
from .request import MeasureKind

DomainValue = Union[InstantObservation, Observation, list[Observation], Forecast]


class _Envelope(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)


class _InstantEnvelope(_Envelope):
    observations: tuple[InstantObservation, ...]


class _ObservationEnvelope(_Envelope):
    observations: tuple[Observation, ...]


def _require_payload(payload: bytes | None) -> bytes:
    if not payload:
        raise NoDataError("No payload was returned")
    return payload


def _validate(model: type[BaseModel], payload: bytes | None, *, label: str):
    data = _require_payload(payload)
    try:
        return model.model_validate_json(data)
    except ValidationError as exc:
        raise FormatError(f"Unexpected {label} response shape") from exc


def decode_current(payload: bytes | None) -> InstantObservation:
    envelope = _validate(_InstantEnvelope, payload, label="current observation")
    if not envelope.observations:
        raise FormatError("Current observation response was empty")
    return envelope.observations[0]


def decode_observations(payload: bytes | None) -> list[Observation]:
    envelope = _validate(_ObservationEnvelope, payload, label="observation history")
    return list(envelope.observations)


def decode_daily(payload: bytes | None) -> Observation:
    envelope = _validate(_ObservationEnvelope, payload, label="daily summary")
    if not envelope.observations:
        raise FormatError("Daily summary response was empty")
    return envelope.observations[0]


def decode_forecast(payload: bytes | None) -> Forecast:
    return _validate(Forecast, payload, label="forecast")


def decode(kind: MeasureKind, payload: bytes | None) -> DomainValue:
    if kind is MeasureKind.CURRENT:
        return decode_current(payload)
    if kind is MeasureKind.HOURLY or kind is MeasureKind.ALL:
        return decode_observations(payload)
    if kind is MeasureKind.DAILY:
        return decode_daily(payload)
    if kind is MeasureKind.FIVE_DAY_FORECAST:
        return decode_forecast(payload)
    raise FormatError(f"Unsupported measure kind: {kind!r}")


__all__ = [
    "DomainValue",
    "decode",
    "decode_current",
    "decode_daily",
    "decode_forecast",
    "decode_observations",
]

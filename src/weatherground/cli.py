from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, TypeAdapter

from .client import WeatherGround
from .domain.models import Observation
from .errors import InvalidConfigurationError, WeatherError
from .request import (
    GeoLocation,
    IataLocation,
    IcaoLocation,
    Location,
    PlaceIdLocation,
    PostalLocation,
)
from .settings import ClientSettings, load_settings

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2

_OBSERVATIONS = TypeAdapter(list[Observation])


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from exc


def _parse_geocode(value: str) -> GeoLocation:
    lat_text, sep, lon_text = value.partition(",")
    if not sep:
        raise argparse.ArgumentTypeError(f"invalid geocode '{value}', expected LAT,LON")
    try:
        return GeoLocation(lat=float(lat_text), lon=float(lon_text))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid geocode '{value}', expected LAT,LON") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weatherground",
        description="Query personal weather station observations and forecasts",
    )
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--api-key", default=None, help="API key (overrides configuration)")
    parser.add_argument("--station", default=None, help="Station identifier (overrides configuration)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("current", help="Latest observation of the station")
    for name, help_text in (
        ("hourly", "Hourly history for a day"),
        ("daily", "Summary for a day"),
        ("all", "Five-minute history for a day"),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("--date", type=_parse_date, default=None, help="Day to query (YYYY-MM-DD)")

    forecast = commands.add_parser("forecast", help="Five-day forecast for a location")
    target = forecast.add_mutually_exclusive_group()
    target.add_argument("--geo", type=_parse_geocode, default=None, metavar="LAT,LON")
    target.add_argument("--iata", default=None, metavar="CODE")
    target.add_argument("--icao", default=None, metavar="CODE")
    target.add_argument("--place-id", default=None, metavar="ID")
    target.add_argument("--postal", default=None, metavar="ZIP:COUNTRY")
    forecast.add_argument("--language", default=None, help="Forecast language, e.g. en-US")
    return parser


def _location_from_args(args: argparse.Namespace, settings: ClientSettings) -> Location | None:
    if args.geo is not None:
        return args.geo
    if args.iata:
        return IataLocation(code=args.iata)
    if args.icao:
        return IcaoLocation(code=args.icao)
    if args.place_id:
        return PlaceIdLocation(place_id=args.place_id)
    if args.postal:
        return PostalLocation(postal_key=args.postal)
    return settings.forecast_location


def _render(value: BaseModel | list[Observation]) -> str:
    if isinstance(value, BaseModel):
        return value.model_dump_json(by_alias=True, indent=2)
    return _OBSERVATIONS.dump_json(value, by_alias=True, indent=2).decode("utf-8")


async def run_command(args: argparse.Namespace, settings: ClientSettings, client: WeatherGround):
    if args.command == "current":
        return await client.current()
    if args.command in ("hourly", "daily", "all"):
        day = args.date or date.today()
        return await getattr(client, args.command)(day)
    if args.command == "forecast":
        location = _location_from_args(args, settings)
        if location is None:
            raise InvalidConfigurationError("A forecast location is required")
        return await client.forecast(location, args.language or settings.language)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None, *, client: WeatherGround | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as exc:
        LOGGER.error("Failed to load configuration: %s", exc)
        return EXIT_CONFIGURATION

    if client is None:
        client = WeatherGround(settings.to_config())
    if args.api_key is not None:
        client.config.api_key = args.api_key
    if args.station is not None:
        client.config.station = args.station

    try:
        value = asyncio.run(run_command(args, settings, client))
    except InvalidConfigurationError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return EXIT_CONFIGURATION
    except WeatherError as exc:
        LOGGER.error("Weather request failed (%s): %s", exc.kind, exc)
        return EXIT_FAILURE

    sys.stdout.write(_render(value) + "\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

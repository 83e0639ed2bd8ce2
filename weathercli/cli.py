"""CLI entry point for the weather client."""

import argparse
import logging
import sys

import httpx

from weathercli.config.defaults import DEFAULT_CONFIG
from weathercli.config.loader import load_config, require_api_key
from weathercli.errors import UsageError, WeatherCliError
from weathercli.ingest.owm_client import DEFAULT_DAY_COUNT, WeatherClient
from weathercli.models.common import resolve_units
from weathercli.reporting.formatters import render_current, render_forecast

logger = logging.getLogger(__name__)

UNITS_HELP = (
    "Units to display weather data in: scientific S (Kelvin, m/s), "
    "metric M (Celsius, m/s) or imperial I (Fahrenheit, mph)"
)
COUNTRY_HELP = "Country code of the location, e.g. ca for Canada or fr for France"


class _Parser(argparse.ArgumentParser):
    """Raises UsageError instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(f"{self.prog}: {message}")


def _add_common_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("-c", "--country", default="", help=COUNTRY_HELP)
    p.add_argument("-u", "--units", default="M", help=UNITS_HELP)
    p.add_argument(
        "-d", "--detailed", action="store_true",
        help="Display a more detailed version of the weather data",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="weathercli",
        description="Current weather and daily forecasts from OpenWeatherMap",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Config YAML path")
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )

    sub = parser.add_subparsers(dest="command")

    # current city / current zip
    current_p = sub.add_parser("current", help="Get the current weather")
    current_sub = current_p.add_subparsers(dest="lookup")
    city_p = current_sub.add_parser("city", help="Current weather for a city")
    city_p.add_argument("location", metavar="city_name")
    zip_p = current_sub.add_parser("zip", help="Current weather for a zip code")
    zip_p.add_argument("location", metavar="zip_code")
    for p in (city_p, zip_p):
        _add_common_flags(p)

    # forecast city / forecast zip
    forecast_p = sub.add_parser("forecast", help="Get the daily weather forecast")
    forecast_sub = forecast_p.add_subparsers(dest="lookup")
    fcity_p = forecast_sub.add_parser("city", help="Daily forecast for a city")
    fcity_p.add_argument("location", metavar="city_name")
    fzip_p = forecast_sub.add_parser("zip", help="Daily forecast for a zip code")
    fzip_p.add_argument("location", metavar="zip_code")
    for p in (fcity_p, fzip_p):
        _add_common_flags(p)
        p.add_argument(
            "-n", "--count", type=int, default=DEFAULT_DAY_COUNT,
            help="Number of days of forecast, between 1 and 16",
        )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display the resolved config")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        parser.print_usage()
        print(f"Command error: {e}")
        return 1

    if args.command is None or (
        args.command in ("current", "forecast") and args.lookup is None
    ):
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.command == "config":
            return _cmd_config(config, args)
        client = WeatherClient(require_api_key(config), base_url=config.owm_base_url)
        if args.command == "current":
            return _cmd_current(client, args)
        return _cmd_forecast(client, args)
    except (WeatherCliError, httpx.HTTPError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Command error: {e}")
        return 1


def _cmd_current(client: WeatherClient, args) -> int:
    units = resolve_units(args.units)
    if args.lookup == "city":
        weather = client.current_by_city(args.location, args.country, units)
    else:
        weather = client.current_by_postal_code(args.location, args.country, units)
    render_current(weather, args.detailed, units)
    return 0


def _cmd_forecast(client: WeatherClient, args) -> int:
    units = resolve_units(args.units)
    if args.lookup == "city":
        forecast = client.forecast_by_city(args.location, args.country, args.count, units)
    else:
        forecast = client.forecast_by_postal_code(
            args.location, args.country, args.count, units
        )
    render_forecast(forecast, args.count, args.detailed, units)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.masked().model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1


def run() -> None:
    sys.exit(main())

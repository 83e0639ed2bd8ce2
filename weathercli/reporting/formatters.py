"""Console formatters for current weather and daily forecasts."""

import logging
import sys
from datetime import datetime
from typing import TextIO

from weathercli.models.common import Units, resolve_units
from weathercli.models.current import CurrentWeather
from weathercli.models.forecast import DailyForecast, WeatherForecast

logger = logging.getLogger(__name__)

CLOCK_FORMAT = "%H:%M:%S"
DATE_FORMAT = "%a %d-%m-%Y"
TIMESTAMP_FORMAT = f"{DATE_FORMAT} {CLOCK_FORMAT}"

_SYMBOLS = {
    Units.STANDARD: ("K", "m/s"),
    Units.IMPERIAL: ("°F", "mph"),
    Units.METRIC: ("°C", "m/s"),
}


def unit_symbols(units: Units | str | None) -> tuple[str, str]:
    """(temperature symbol, speed symbol) for a units code or M/I/S flag."""
    return _SYMBOLS[resolve_units(units)]


def local_time(ts: int, fmt: str = CLOCK_FORMAT) -> str:
    return datetime.fromtimestamp(ts).strftime(fmt)


def _table(rows: list[tuple[str, str]]) -> list[str]:
    """Pad labels to the longest one, then a two-space gap before the value."""
    if not rows:
        return []
    width = max(len(label) for label, _ in rows) + 1
    return [f"{label:<{width}} {value}".rstrip() for label, value in rows]


def format_current(weather: CurrentWeather, detailed: bool, units: Units | str) -> str:
    temp, speed = unit_symbols(units)
    rows = [
        ("City:", f"{weather.name} {weather.sys.country}".strip()),
        ("Temperature:", f"{weather.main.temp} {temp}"),
        ("Feels like:", f"{weather.main.feels_like} {temp}"),
        ("Min Temperature:", f"{weather.main.temp_min} {temp}"),
        ("Max Temperature:", f"{weather.main.temp_max} {temp}"),
        ("Condition:", weather.condition.description),
        ("Humidity:", f"{weather.main.humidity} %"),
    ]
    if detailed:
        rows += [
            ("Pressure:", f"{weather.main.pressure} hPa"),
            ("Cloudiness:", f"{weather.clouds.all} %"),
            ("Wind speed:", f"{weather.wind.speed} {speed}"),
            ("Wind direction:", f"{weather.wind.deg} °"),
            ("Wind gust:", f"{weather.wind.gust} {speed}"),
        ]
        if weather.rain is not None:
            rows.append(("Rain (1h):", f"{weather.rain.last_hour} mm"))
        if weather.snow is not None:
            rows.append(("Snow (1h):", f"{weather.snow.last_hour} mm"))
        rows += [
            ("Sunrise:", local_time(weather.sys.sunrise)),
            ("Sunset:", local_time(weather.sys.sunset)),
            ("Longitude:", str(weather.coordinates.lon)),
            ("Latitude:", str(weather.coordinates.lat)),
        ]
    rows.append(("Date & Time of data collection:", local_time(weather.dt, TIMESTAMP_FORMAT)))

    lines = ["Here is the current Condition data."]
    lines.extend(_table(rows))
    return "\n".join(lines)


def _day_rows(day: DailyForecast, detailed: bool, temp: str, speed: str) -> list[tuple[str, str]]:
    rows = [
        ("Day:", f"{day.temp.day} {temp}"),
        ("Min:", f"{day.temp.min} {temp}"),
        ("Max:", f"{day.temp.max} {temp}"),
        ("Night:", f"{day.temp.night} {temp}"),
        ("Evening:", f"{day.temp.eve} {temp}"),
        ("Morning:", f"{day.temp.morn} {temp}"),
        ("Feels like:", f"{day.feels_like.day} {temp}"),
        ("Condition:", day.condition.description),
        ("Humidity:", f"{day.humidity} %"),
        ("Precipitation chance:", f"{round(day.pop * 100)} %"),
    ]
    if detailed:
        rows += [
            ("Pressure:", f"{day.pressure} hPa"),
            ("Cloudiness:", f"{day.clouds} %"),
            ("Wind speed:", f"{day.speed} {speed}"),
            ("Wind direction:", f"{day.deg} °"),
            ("Wind gust:", f"{day.gust} {speed}"),
            ("Rain:", f"{day.rain} mm"),
            ("Snow:", f"{day.snow} mm"),
            ("Sunrise:", local_time(day.sunrise)),
            ("Sunset:", local_time(day.sunset)),
        ]
    return rows


def format_forecast(
    forecast: WeatherForecast, day_count: int, detailed: bool, units: Units | str
) -> str:
    """One header, then one dated block per day in the order received."""
    temp, speed = unit_symbols(units)
    city = forecast.city
    lines = [f"Weather forecast for {city.name} {city.country}".rstrip()]
    if detailed:
        lines.append(f"Longitude: {city.coordinates.lon}  Latitude: {city.coordinates.lat}")

    for day in forecast.days[:day_count]:
        lines.append("")
        lines.append(local_time(day.dt, DATE_FORMAT))
        lines.extend(f"  {line}" for line in _table(_day_rows(day, detailed, temp, speed)))
    return "\n".join(lines)


def _write(text: str, stream: TextIO | None) -> None:
    out = stream if stream is not None else sys.stdout
    try:
        out.write(text + "\n")
        out.flush()
    except OSError as e:
        logger.debug("Could not write weather output: %s", e)


def render_current(
    weather: CurrentWeather,
    detailed: bool,
    units: Units | str,
    stream: TextIO | None = None,
) -> None:
    _write(format_current(weather, detailed, units), stream)


def render_forecast(
    forecast: WeatherForecast,
    day_count: int,
    detailed: bool,
    units: Units | str,
    stream: TextIO | None = None,
) -> None:
    _write(format_forecast(forecast, day_count, detailed, units), stream)

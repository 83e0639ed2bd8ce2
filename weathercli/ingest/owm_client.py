"""OpenWeatherMap client for current weather and daily forecasts."""

import logging
from urllib.parse import quote_plus, urlencode

import httpx
from pydantic import BaseModel, ValidationError

from weathercli.config.defaults import OWM_BASE_URL
from weathercli.errors import ApiError, DecodeError, UsageError
from weathercli.models.common import Units
from weathercli.models.current import CurrentWeather
from weathercli.models.forecast import WeatherForecast

logger = logging.getLogger(__name__)

MIN_DAY_COUNT = 1
MAX_DAY_COUNT = 16
DEFAULT_DAY_COUNT = 7


def city_query_token(city: str) -> str:
    """Join multi-word city names with '+' (new-york -> new+york)."""
    return city.strip().replace("-", "+")


def check_day_count(day_count: int) -> None:
    if not MIN_DAY_COUNT <= day_count <= MAX_DAY_COUNT:
        raise UsageError(
            f"the number of days must be between {MIN_DAY_COUNT} and {MAX_DAY_COUNT}"
        )


def _location(value: str, country: str) -> str:
    return f"{value},{country}" if country else value


def _api_message(message: str, code: int) -> str:
    return message or f"API returned status {code}"


class WeatherClient:
    """Issues one synchronous GET per call; holds the API key."""

    def __init__(self, api_key: str, base_url: str = OWM_BASE_URL):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    def current_by_city(
        self, city: str, country: str = "", units: Units = Units.METRIC
    ) -> CurrentWeather:
        params = {"q": _location(city_query_token(city), country), "units": units}
        return self._get_current(params)

    def current_by_postal_code(
        self, code: str, country: str = "", units: Units = Units.METRIC
    ) -> CurrentWeather:
        params = {"zip": _location(code.strip(), country), "units": units}
        return self._get_current(params)

    def forecast_by_city(
        self,
        city: str,
        country: str = "",
        day_count: int = DEFAULT_DAY_COUNT,
        units: Units = Units.METRIC,
    ) -> WeatherForecast:
        check_day_count(day_count)
        params = {
            "q": _location(city_query_token(city), country),
            "units": units,
            "cnt": day_count,
        }
        return self._get_forecast(params, day_count)

    def forecast_by_postal_code(
        self,
        code: str,
        country: str = "",
        day_count: int = DEFAULT_DAY_COUNT,
        units: Units = Units.METRIC,
    ) -> WeatherForecast:
        check_day_count(day_count)
        params = {
            "zip": _location(code.strip(), country),
            "units": units,
            "cnt": day_count,
        }
        return self._get_forecast(params, day_count)

    def _get_current(self, params: dict) -> CurrentWeather:
        weather = self._fetch("/weather", params, CurrentWeather)
        if weather.is_error:
            logger.warning("API error %d: %s", weather.code, weather.message)
            raise ApiError(_api_message(weather.message, weather.code), weather.code)
        return weather

    def _get_forecast(self, params: dict, day_count: int) -> WeatherForecast:
        forecast = self._fetch("/forecast/daily", params, WeatherForecast)
        if forecast.is_error:
            logger.warning("API error %d: %s", forecast.code, forecast.message)
            raise ApiError(
                _api_message(forecast.error_message, forecast.code), forecast.code
            )
        if len(forecast.days) != day_count:
            raise DecodeError(
                f"expected {day_count} forecast days, got {len(forecast.days)}"
            )
        return forecast

    def build_url(self, path: str, params: dict) -> str:
        """Full request URL; '+' and ',' in values are kept as-is."""
        query = dict(params)
        query["APPID"] = self.api_key
        return f"{self.base_url}{path}?{urlencode(query, safe='+,', quote_via=quote_plus)}"

    def _fetch(self, path: str, params: dict, model: type[BaseModel]):
        logger.debug("GET %s%s params=%s", self.base_url, path, params)
        resp = httpx.get(self.build_url(path, params))
        try:
            payload = resp.json()
        except ValueError as e:
            if resp.is_error:
                resp.raise_for_status()
            raise DecodeError(f"response body is not valid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise DecodeError(f"unexpected response shape: {type(payload).__name__}")
        if resp.is_error and "cod" not in payload:
            # not an API error body; report the HTTP status itself
            resp.raise_for_status()
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"unexpected response shape: {e}") from e

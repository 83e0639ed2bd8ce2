"""Daily forecast record decoded from the /forecast/daily endpoint."""

from pydantic import BaseModel, Field

from weathercli.models.common import RECORD_CONFIG, Condition, Coordinates, first_condition


class CityInfo(BaseModel):
    model_config = RECORD_CONFIG

    id: int = 0
    name: str = ""
    coordinates: Coordinates = Field(default_factory=Coordinates, alias="coord")
    country: str = ""
    population: int = 0
    timezone: int = 0  # shift from UTC in seconds


class DayTemperatures(BaseModel):
    model_config = RECORD_CONFIG

    day: float = 0.0
    min: float = 0.0
    max: float = 0.0
    night: float = 0.0
    eve: float = 0.0
    morn: float = 0.0


class FeelsLike(BaseModel):
    model_config = RECORD_CONFIG

    day: float = 0.0
    night: float = 0.0
    eve: float = 0.0
    morn: float = 0.0


class DailyForecast(BaseModel):
    model_config = RECORD_CONFIG

    dt: int = 0
    sunrise: int = 0
    sunset: int = 0
    temp: DayTemperatures = Field(default_factory=DayTemperatures)
    feels_like: FeelsLike = Field(default_factory=FeelsLike)
    pressure: int = 0
    humidity: int = 0
    conditions: list[Condition] = Field(default_factory=list, alias="weather")
    speed: float = 0.0
    deg: int = 0
    gust: float = 0.0
    clouds: int = 0
    rain: float = 0.0  # mm
    snow: float = 0.0  # mm
    pop: float = 0.0  # probability of precipitation, 0..1

    @property
    def condition(self) -> Condition:
        return first_condition(self.conditions)


class WeatherForecast(BaseModel):
    model_config = RECORD_CONFIG

    city: CityInfo = Field(default_factory=CityInfo)
    code: int = Field(default=0, alias="cod")
    # a float on success, the error text on failure
    message: str | float = ""
    cnt: int = 0
    days: list[DailyForecast] = Field(default_factory=list, alias="list")

    @property
    def is_error(self) -> bool:
        return self.code != 200

    @property
    def error_message(self) -> str:
        return self.message if isinstance(self.message, str) else ""

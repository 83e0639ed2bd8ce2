"""Current weather record decoded from the /weather endpoint."""

from pydantic import BaseModel, Field

from weathercli.models.common import RECORD_CONFIG, Condition, Coordinates, first_condition


class MainMeasurements(BaseModel):
    model_config = RECORD_CONFIG

    temp: float = 0.0
    feels_like: float = 0.0
    temp_min: float = 0.0
    temp_max: float = 0.0
    pressure: int = 0  # hPa
    humidity: int = 0  # %
    sea_level: int = 0  # hPa
    ground_level: int = Field(default=0, alias="grnd_level")  # hPa


class Wind(BaseModel):
    model_config = RECORD_CONFIG

    speed: float = 0.0
    deg: int = 0
    gust: float = 0.0


class Clouds(BaseModel):
    model_config = RECORD_CONFIG

    all: int = 0  # %


class Precipitation(BaseModel):
    model_config = RECORD_CONFIG

    last_hour: float = Field(default=0.0, alias="1h")  # mm


class SysInfo(BaseModel):
    model_config = RECORD_CONFIG

    type: int = 0
    id: int = 0
    country: str = ""
    sunrise: int = 0  # Unix timestamp
    sunset: int = 0  # Unix timestamp


class CurrentWeather(BaseModel):
    """Snapshot of the weather at one location.

    A record whose ``code`` is not 200 is an API error payload; none of its
    weather fields are meaningful.
    """

    model_config = RECORD_CONFIG

    coordinates: Coordinates = Field(default_factory=Coordinates, alias="coord")
    conditions: list[Condition] = Field(default_factory=list, alias="weather")
    base: str = ""
    main: MainMeasurements = Field(default_factory=MainMeasurements)
    visibility: int = 0  # metres
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    rain: Precipitation | None = None
    snow: Precipitation | None = None
    dt: int = 0  # Unix timestamp of the observation
    sys: SysInfo = Field(default_factory=SysInfo)
    timezone: int = 0  # shift from UTC in seconds
    id: int = 0
    name: str = ""
    code: int = Field(default=0, alias="cod")
    message: str = ""

    @property
    def is_error(self) -> bool:
        return self.code != 200

    @property
    def condition(self) -> Condition:
        return first_condition(self.conditions)

"""Default endpoint and config locations."""

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_CONFIG = "config/config.yaml"
API_KEY_ENV = "OPEN_WEATHER_MAP_API_KEY"

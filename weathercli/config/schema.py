"""Pydantic v2 settings schema."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from weathercli.config.defaults import OWM_BASE_URL


class AppConfig(BaseSettings):
    """Resolved settings.

    Values passed in (the YAML file contents) are overridden by environment
    variables of the same name, e.g. OPEN_WEATHER_MAP_API_KEY.
    """

    model_config = SettingsConfigDict(extra="forbid", case_sensitive=False)

    open_weather_map_api_key: str = ""
    owm_base_url: str = OWM_BASE_URL

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (env_settings, init_settings)

    def masked(self) -> "AppConfig":
        """Copy with the API key hidden, for display."""
        key = self.open_weather_map_api_key
        hidden = f"{key[:4]}{'*' * (len(key) - 4)}" if len(key) > 4 else "*" * len(key)
        return self.model_copy(update={"open_weather_map_api_key": hidden})

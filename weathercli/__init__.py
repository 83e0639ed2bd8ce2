"""Command-line client for OpenWeatherMap current weather and daily forecasts."""

__version__ = "0.1.0"

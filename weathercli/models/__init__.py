"""Typed records decoded from OpenWeatherMap responses."""

"""Exception types raised by the weather client, config loader and formatter."""


class WeatherCliError(Exception):
    """Base class for every error reported to the user."""


class UsageError(WeatherCliError):
    """Invalid command-line input, detected before any request is made."""


class ConfigError(WeatherCliError):
    """Configuration could not be read or is missing the API key."""


class DecodeError(WeatherCliError):
    """Response body is not JSON or does not match the expected record."""


class ApiError(WeatherCliError):
    """The API answered with a non-200 status code in the body."""

    def __init__(self, message: str, code: int | None = None):
        super().__init__(message)
        self.message = message
        self.code = code


class MissingConditionDescriptor(WeatherCliError):
    """A record carries an empty list of condition descriptors."""

"""Exceptions raised by weather lookups."""

LOOKUP_FAILED_MESSAGE = "City not found. Please try another location."


class WeatherSphereError(Exception):
    """Base class for all application errors."""


class EmptyInput(WeatherSphereError, ValueError):
    """Raised when a lookup is attempted with a blank city name."""


class LookupFailed(WeatherSphereError):
    """Raised when the provider lookup fails for any reason.

    Transport errors and non-success responses are not distinguished; both
    carry the same user-facing message.
    """

    def __init__(self, message: str = LOOKUP_FAILED_MESSAGE, city: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.city = city

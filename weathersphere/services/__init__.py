"""Services for fetching weather and deriving local time."""

from .search import WeatherSearch
from .weather_service import WeatherService

__all__ = ["WeatherSearch", "WeatherService"]

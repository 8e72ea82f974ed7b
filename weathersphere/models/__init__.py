"""Data models for the weather lookup."""

from .config import Config, Settings, WeatherConfig
from .view_state import ViewState, ViewStatus
from .weather import CurrentConditions, OpenWeatherResponse

__all__ = [
    "Config",
    "CurrentConditions",
    "OpenWeatherResponse",
    "Settings",
    "ViewState",
    "ViewStatus",
    "WeatherConfig",
]

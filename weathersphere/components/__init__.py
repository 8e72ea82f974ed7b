"""UI components for the weather lookup."""

from .local_clock import LocalClock
from .search_bar import SearchBar
from .status_bar import StatusBar
from .weather_panel import WeatherPanel

__all__ = ["LocalClock", "SearchBar", "StatusBar", "WeatherPanel"]

"""WeatherSphere - a terminal weather lookup widget."""

__version__ = "0.1.0"

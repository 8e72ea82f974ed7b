"""Configuration models using Pydantic for validation."""

import json
import os
from pathlib import Path
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

# Environment variable holding the provider API key
API_KEY_ENV = "WEATHER_API_KEY"

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"


class WeatherConfig(BaseModel):
    """Weather provider configuration."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    units: Literal["metric"] = "metric"
    timeout_seconds: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate that URL is a valid HTTP/HTTPS URL."""
        try:
            parsed = urlparse(v)
            if parsed.scheme not in ("http", "https"):
                raise ValueError(f"URL must use http or https scheme, got '{parsed.scheme}'")
            if not parsed.netloc:
                raise ValueError("URL must have a valid host")
        except Exception as e:
            raise ValueError(f"Invalid URL '{v}': {e}")
        return v


class Settings(BaseModel):
    """General application settings."""

    default_city: str = ""
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @field_validator("default_city")
    @classmethod
    def strip_city(cls, v: str) -> str:
        return v.strip()


class Config(BaseModel):
    """Main configuration model."""

    weather: WeatherConfig = Field(default_factory=WeatherConfig)
    settings: Settings = Field(default_factory=Settings)

    def with_env(self, environ: dict[str, str] | None = None) -> "Config":
        """Return a copy with the API key taken from the environment, if set."""
        environ = os.environ if environ is None else environ
        api_key = environ.get(API_KEY_ENV, "").strip()
        if not api_key:
            return self
        weather = self.weather.model_copy(update={"api_key": api_key})
        return self.model_copy(update={"weather": weather})

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data).with_env()

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls().with_env()

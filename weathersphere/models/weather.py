"""Weather data models."""

import math
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


class CurrentConditions(BaseModel):
    """Current weather conditions for one location at one observation time."""

    model_config = ConfigDict(frozen=True)

    location: str
    country: str = ""
    timestamp: datetime
    utc_offset_seconds: int = 0
    condition_tag: str = ""
    description: str = ""
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int
    wind_speed: float

    @property
    def display_location(self) -> str:
        """Return 'Name, CC' or just the name when there is no country."""
        if self.country:
            return f"{self.location}, {self.country}"
        return self.location

    @property
    def display_description(self) -> str:
        """Return the description with its first letter of each word capitalised."""
        return " ".join(word.capitalize() for word in self.description.split())

    @property
    def display_temp(self) -> int:
        return round_half_up(self.temp)

    @property
    def display_feels_like(self) -> int:
        return round_half_up(self.feels_like)

    @property
    def display_temp_min(self) -> int:
        return round_half_up(self.temp_min)

    @property
    def display_temp_max(self) -> int:
        return round_half_up(self.temp_max)


# Provider response schema (OpenWeatherMap 2.5 "current weather")


class ProviderSys(BaseModel):
    country: str = ""


class ProviderCondition(BaseModel):
    main: str = ""
    description: str = ""


class ProviderMain(BaseModel):
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int
    pressure: int


class ProviderWind(BaseModel):
    speed: float = 0.0


class OpenWeatherResponse(BaseModel):
    """Subset of the provider payload needed to build CurrentConditions."""

    id: int | None = None
    name: str
    dt: int
    timezone: int = 0
    sys: ProviderSys = Field(default_factory=ProviderSys)
    weather: list[ProviderCondition] = Field(default_factory=list)
    main: ProviderMain
    wind: ProviderWind = Field(default_factory=ProviderWind)

    def to_conditions(self) -> CurrentConditions:
        """Map the provider payload onto the application's record."""
        condition = self.weather[0] if self.weather else ProviderCondition()
        return CurrentConditions(
            location=self.name,
            country=self.sys.country,
            timestamp=datetime.fromtimestamp(self.dt, UTC),
            utc_offset_seconds=self.timezone,
            condition_tag=condition.main,
            description=condition.description,
            temp=self.main.temp,
            feels_like=self.main.feels_like,
            temp_min=self.main.temp_min,
            temp_max=self.main.temp_max,
            humidity=self.main.humidity,
            pressure=self.main.pressure,
            wind_speed=self.wind.speed,
        )

"""Pytest configuration and fixtures."""

import json
import tempfile
from datetime import UTC, datetime
from pathlib import Path

import pytest

from weathersphere.models.weather import CurrentConditions


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "weather": {
            "api_key": "file-key",
            "base_url": "https://api.example.com/data/2.5/weather",
            "timeout_seconds": 5,
        },
        "settings": {
            "default_city": "  London ",
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path


@pytest.fixture
def provider_payload():
    """A current weather response as returned by the provider."""
    return {
        "coord": {"lon": -0.1257, "lat": 51.5085},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "base": "stations",
        "main": {
            "temp": 12.5,
            "feels_like": 11.49,
            "temp_min": 10.6,
            "temp_max": 13.8,
            "pressure": 1012,
            "humidity": 81,
        },
        "visibility": 10000,
        "wind": {"speed": 4.63, "deg": 240},
        "clouds": {"all": 75},
        "dt": 1760790000,
        "sys": {"type": 2, "id": 2075535, "country": "GB"},
        "timezone": 3600,
        "id": 2643743,
        "name": "London",
        "cod": 200,
    }


def make_conditions(**overrides) -> CurrentConditions:
    """Build a CurrentConditions with sensible defaults."""
    values = {
        "location": "London",
        "country": "GB",
        "timestamp": datetime(2026, 10, 18, 12, 20, tzinfo=UTC),
        "utc_offset_seconds": 3600,
        "condition_tag": "Rain",
        "description": "light rain",
        "temp": 12.5,
        "feels_like": 11.49,
        "temp_min": 10.6,
        "temp_max": 13.8,
        "humidity": 81,
        "pressure": 1012,
        "wind_speed": 4.63,
    }
    values.update(overrides)
    return CurrentConditions(**values)


@pytest.fixture
def conditions():
    """Sample current conditions."""
    return make_conditions()

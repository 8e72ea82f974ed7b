"""Mapping from provider condition tags to icons and backgrounds."""

from typing import NamedTuple


class Icon(NamedTuple):
    """An icon identifier with the glyph used to draw it."""

    name: str
    glyph: str
    color: str


SUN = Icon("sun", "☀", "yellow")
CLOUD = Icon("cloud", "☁", "grey70")
CLOUD_RAIN = Icon("cloud-rain", "🌧", "dodger_blue1")
SNOWFLAKE = Icon("snowflake", "❄", "cyan")
BOLT = Icon("bolt", "⚡", "gold1")
SMOG = Icon("smog", "🌫", "grey58")

DEFAULT_ICON = CLOUD
DEFAULT_BACKGROUND = "default"

_ICONS: dict[str, Icon] = {
    "Clear": SUN,
    "Clouds": CLOUD,
    "Rain": CLOUD_RAIN,
    "Snow": SNOWFLAKE,
    "Thunderstorm": BOLT,
    "Mist": SMOG,
    "Smoke": SMOG,
    "Haze": SMOG,
    "Fog": SMOG,
}

_BACKGROUNDS: dict[str, str] = {
    "Clear": "clear",
    "Rain": "rain",
    "Clouds": "clouds",
    "Snow": "snow",
    "Thunderstorm": "thunderstorm",
}

BACKGROUNDS = frozenset(_BACKGROUNDS.values()) | {DEFAULT_BACKGROUND}


def icon_for(condition_tag: str | None) -> Icon:
    """Return the icon for a condition tag, falling back to a cloud."""
    return _ICONS.get(condition_tag or "", DEFAULT_ICON)


def background_for(condition_tag: str | None) -> str:
    """Return the background identifier for a condition tag."""
    return _BACKGROUNDS.get(condition_tag or "", DEFAULT_BACKGROUND)


def background_class(background: str) -> str:
    """CSS class applied to the screen for a background identifier."""
    return f"bg-{background}"

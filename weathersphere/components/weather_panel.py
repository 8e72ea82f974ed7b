"""Weather panel component for displaying current conditions."""

from collections.abc import Callable
from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static

from ..models.weather import CurrentConditions
from ..services.local_clock import format_local_date, utc_offset_label, viewer_now
from .icons import icon_for
from .local_clock import LocalClock

EMPTY_TITLE = "Search for Weather"
EMPTY_HINT = (
    "Enter a city name above to get current weather information, "
    "including temperature, humidity, and more."
)


def escape_markup(text: str) -> str:
    """Escape Rich markup characters in provider content."""
    return text.replace("[", r"\[").replace("]", r"\]")


def temp_color(temp: float) -> str:
    """Get color for temperature value."""
    if temp <= 0:
        return "blue"
    elif temp <= 10:
        return "cyan"
    elif temp <= 20:
        return "green"
    elif temp <= 30:
        return "yellow"
    return "red"


class WeatherPanel(Static):
    """Panel displaying the error banner, empty state and results card."""

    DEFAULT_CSS = """
    WeatherPanel {
        height: auto;
        padding: 0 1;
    }

    WeatherPanel #weather-error {
        color: $error;
        border: solid $error;
        width: 100%;
        text-align: center;
        display: none;
    }

    WeatherPanel #weather-error.visible {
        display: block;
    }

    WeatherPanel #weather-empty {
        color: $text-muted;
        border: dashed $primary;
        width: 100%;
        padding: 1 2;
        text-align: center;
    }

    WeatherPanel #weather-card {
        height: auto;
        border: solid $primary;
        padding: 0 1;
        display: none;
    }

    WeatherPanel #weather-card.visible {
        display: block;
    }

    WeatherPanel #weather-top {
        height: auto;
    }

    WeatherPanel #weather-location {
        width: 1fr;
    }

    WeatherPanel #weather-time-label {
        width: auto;
        color: $text-muted;
        padding-right: 1;
    }

    WeatherPanel #weather-main, WeatherPanel #weather-stats {
        padding-top: 1;
    }
    """

    def __init__(self, clock: Callable[[], datetime] = viewer_now) -> None:
        super().__init__()
        self._now = clock
        self._conditions: CurrentConditions | None = None
        self._error: str | None = None
        self.date_text = ""

    @property
    def conditions(self) -> CurrentConditions | None:
        return self._conditions

    @property
    def error(self) -> str | None:
        return self._error

    def compose(self) -> ComposeResult:
        yield Label("", id="weather-error")
        yield Static(
            f"[bold]{EMPTY_TITLE}[/bold]\n\n[dim]{EMPTY_HINT}[/dim]",
            id="weather-empty",
        )
        with Vertical(id="weather-card"):
            with Horizontal(id="weather-top"):
                yield Static("", id="weather-location")
                yield Label("Local Time", id="weather-time-label")
                yield LocalClock(clock=self._now, id="weather-clock")
            yield Static("", id="weather-main")
            yield Static("", id="weather-stats")

    def set_empty(self, visible: bool = True) -> None:
        """Show or hide the empty state."""
        self.query_one("#weather-empty", Static).display = visible

    def set_error(self, error: str | None) -> None:
        """Display an error message, or hide the banner when None."""
        self._error = error
        error_label = self.query_one("#weather-error", Label)
        if error:
            error_label.update(escape_markup(error))
            error_label.add_class("visible")
        else:
            error_label.update("")
            error_label.remove_class("visible")

    def update_conditions(self, conditions: CurrentConditions) -> None:
        """Replace the results card with new conditions."""
        self._conditions = conditions

        icon = icon_for(conditions.condition_tag)
        tc = temp_color(conditions.temp)
        self._render_location(format_local_date(conditions.utc_offset_seconds, self._now()))
        self.query_one("#weather-main", Static).update(
            f"[{icon.color}]{icon.glyph}[/{icon.color}]  "
            f"{escape_markup(conditions.display_description)}    "
            f"[bold {tc}]{conditions.display_temp}°C[/]  "
            f"[dim]↓[/dim]{conditions.display_temp_min}° "
            f"[dim]↑[/dim]{conditions.display_temp_max}°"
        )
        self.query_one("#weather-stats", Static).update(
            f"Humidity [bold]{conditions.humidity}%[/bold]   "
            f"Wind [bold]{conditions.wind_speed} m/s[/bold]   "
            f"Pressure [bold]{conditions.pressure} hPa[/bold]   "
            f"Feels Like [bold]{conditions.display_feels_like}°C[/bold]"
        )
        self.query_one("#weather-time-label", Label).update(
            f"Local Time [dim]({utc_offset_label(conditions.utc_offset_seconds)})[/dim]"
        )
        self.query_one(LocalClock).set_offset(conditions.utc_offset_seconds)
        self.query_one("#weather-card", Vertical).add_class("visible")

    def clear(self) -> None:
        """Hide the results card and stop the clock."""
        self._conditions = None
        self.date_text = ""
        self.query_one(LocalClock).clear_offset()
        self.query_one("#weather-card", Vertical).remove_class("visible")
        self.query_one("#weather-location", Static).update("")
        self.query_one("#weather-main", Static).update("")
        self.query_one("#weather-stats", Static).update("")

    def _render_location(self, date_text: str) -> None:
        if self._conditions is None:
            return
        self.date_text = date_text
        self.query_one("#weather-location", Static).update(
            f"[bold]{escape_markup(self._conditions.display_location)}[/bold]\n"
            f"[dim]{date_text}[/dim]"
        )

    def on_local_clock_date_changed(self, event: LocalClock.DateChanged) -> None:
        """Keep the date line in step with the ticking clock."""
        event.stop()
        if event.date_text == self.query_one(LocalClock).date_text:
            self._render_location(event.date_text)

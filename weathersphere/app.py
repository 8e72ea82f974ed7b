"""Main Textual application for the weather lookup."""

import logging
from collections.abc import Callable
from datetime import datetime

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Header, Input, LoadingIndicator

from .components import SearchBar, StatusBar, WeatherPanel
from .components.icons import BACKGROUNDS, background_class, background_for
from .components.weather_panel import escape_markup
from .models.config import Config
from .models.view_state import ViewState, ViewStatus
from .services.local_clock import viewer_now
from .services.search import ConditionsFetcher, WeatherSearch
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)


class WeatherApp(App):
    """Single-screen weather lookup."""

    TITLE = "WeatherSphere"
    SUB_TITLE = "Get real-time weather updates anywhere"

    CSS = """
    Screen {
        background: $background;
    }

    Screen.bg-default {
        background: #0b1a33;
    }

    Screen.bg-clear {
        background: #1e5fb4;
    }

    Screen.bg-rain {
        background: #2c3e5c;
    }

    Screen.bg-clouds {
        background: #3f4650;
    }

    Screen.bg-snow {
        background: #4f7f99;
    }

    Screen.bg-thunderstorm {
        background: #2e1a40;
    }

    #loading {
        height: 1;
        display: none;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("slash", "focus_search", "Search", show=False),
    ]

    def __init__(
        self,
        config: Config | None = None,
        service: ConditionsFetcher | None = None,
        initial_city: str = "",
        clock: Callable[[], datetime] = viewer_now,
    ) -> None:
        super().__init__()
        self.app_config = config or Config()
        self.lookup = WeatherSearch(service or WeatherService(self.app_config.weather))
        self.lookup.subscribe(self._render_state)
        self._initial_city = initial_city.strip() or self.app_config.settings.default_city
        self._clock_source = clock
        self._pending_city = ""

    def compose(self) -> ComposeResult:
        yield Header()
        yield SearchBar()
        yield LoadingIndicator(id="loading")
        yield WeatherPanel(clock=self._clock_source)
        yield StatusBar()

    def on_mount(self) -> None:
        self._render_state(self.lookup.state)
        search_bar = self.query_one(SearchBar)
        search_bar.focus_input()

        if self._initial_city:
            self.query_one("#city-input", Input).value = self._initial_city
            self.start_search(self._initial_city)

    def start_search(self, city: str) -> None:
        """Run a lookup in the background without cancelling earlier ones."""
        if city.strip():
            self._pending_city = city.strip()
        self.run_worker(
            self.lookup.search(city), group="search", exclusive=False, exit_on_error=False
        )

    def on_search_bar_search_requested(self, event: SearchBar.SearchRequested) -> None:
        self.start_search(event.city)

    def action_focus_search(self) -> None:
        self.query_one(SearchBar).focus_input()

    def _apply_background(self, background: str) -> None:
        for name in BACKGROUNDS:
            self.screen.set_class(name == background, background_class(name))

    def _render_state(self, state: ViewState) -> None:
        """Bring every widget in line with the current view state."""
        search_bar = self.query_one(SearchBar)
        panel = self.query_one(WeatherPanel)
        status_bar = self.query_one(StatusBar)

        search_bar.set_loading(state.is_loading)
        self.query_one("#loading", LoadingIndicator).display = state.is_loading
        panel.set_error(state.error)
        panel.set_empty(state.status == ViewStatus.IDLE)

        if state.conditions is None:
            panel.clear()
        elif state.conditions is not panel.conditions:
            panel.update_conditions(state.conditions)

        tag = state.conditions.condition_tag if state.conditions else None
        self._apply_background(background_for(tag))

        if state.is_loading:
            status_bar.set_activity(f"Searching {escape_markup(self._pending_city)}...")
        else:
            status_bar.clear_activity()

        if state.status == ViewStatus.SUCCESS:
            status_bar.set_last_update()
        elif state.status == ViewStatus.FAILED:
            status_bar.clear_last_update()
            logger.info(f"Lookup failed: {state.error}")

"""Search bar with the city input and submit button."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Button, Input


class SearchBar(Horizontal):
    """City input plus a Search button. Enter or click submits."""

    DEFAULT_CSS = """
    SearchBar {
        height: auto;
        width: 100%;
        padding: 0 1;
    }

    SearchBar #city-input {
        width: 1fr;
    }

    SearchBar #search-button {
        width: auto;
        min-width: 16;
    }
    """

    class SearchRequested(Message):
        """Message sent when the user submits a city name."""

        def __init__(self, city: str) -> None:
            super().__init__()
            self.city = city

    def __init__(self) -> None:
        super().__init__()
        self._loading = False

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Enter city name...", id="city-input")
        yield Button("Search", id="search-button", variant="primary", disabled=True)

    @property
    def value(self) -> str:
        return self.query_one("#city-input", Input).value

    def focus_input(self) -> None:
        self.query_one("#city-input", Input).focus()

    def set_loading(self, loading: bool) -> None:
        """Disable input while a lookup is in flight."""
        self._loading = loading
        city_input = self.query_one("#city-input", Input)
        button = self.query_one("#search-button", Button)
        city_input.disabled = loading
        button.label = "Searching..." if loading else "Search"
        self._sync_button()
        if not loading:
            city_input.focus()

    def _sync_button(self) -> None:
        button = self.query_one("#search-button", Button)
        button.disabled = self._loading or not self.value.strip()

    def _submit(self) -> None:
        if self._loading:
            return
        city = self.value
        if not city.strip():
            return
        self.post_message(self.SearchRequested(city))

    def on_input_changed(self, event: Input.Changed) -> None:
        self._sync_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "search-button":
            event.stop()
            self._submit()

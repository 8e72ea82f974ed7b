"""Status bar component showing lookup activity and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


class StatusBar(Horizontal):
    """Bottom status bar with activity, last update and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
        dock: bottom;
    }

    StatusBar #status-activity {
        width: auto;
        color: $warning;
    }

    StatusBar #status-updated {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_update: datetime | None = None
        self.activity = ""

    def compose(self) -> ComposeResult:
        yield Static("", id="status-activity")
        yield Static("", id="status-updated")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]enter[/dim] Search  [dim]/[/dim] Focus  [dim]q[/dim] Quit",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start the relative-time update timer."""
        self.set_interval(30, self._update_time)

    def _update_time(self) -> None:
        """Update the 'updated N mins ago' text."""
        if not self._last_update:
            self.query_one("#status-updated", Static).update("")
            return

        delta = datetime.now() - self._last_update
        minutes = int(delta.total_seconds() // 60)
        if minutes == 0:
            text = "Updated just now"
        elif minutes == 1:
            text = "Updated 1 min ago"
        else:
            text = f"Updated {minutes} mins ago"
        self.query_one("#status-updated", Static).update(f"[dim]{text}[/dim]")

    def set_last_update(self, time: datetime | None = None) -> None:
        """Record the time of the last successful lookup."""
        self._last_update = time or datetime.now()
        self._update_time()

    def clear_last_update(self) -> None:
        self._last_update = None
        self._update_time()

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g., 'Searching London...')."""
        self.activity = activity
        self.query_one("#status-activity", Static).update(
            f"[yellow]{activity}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        """Clear activity message."""
        self.set_activity("")

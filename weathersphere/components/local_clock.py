"""Live clock showing the time at the displayed location."""

from collections.abc import Callable
from datetime import datetime

from textual.message import Message
from textual.timer import Timer
from textual.widgets import Static

from ..services.local_clock import format_local_date, format_local_time, viewer_now


class LocalClock(Static):
    """Ticks once per second while an offset is active."""

    DEFAULT_CSS = """
    LocalClock {
        width: auto;
        text-style: bold;
    }
    """

    class DateChanged(Message):
        """Posted when the location's calendar date changes."""

        def __init__(self, date_text: str) -> None:
            super().__init__()
            self.date_text = date_text

    def __init__(
        self,
        clock: Callable[[], datetime] = viewer_now,
        **kwargs,
    ) -> None:
        super().__init__("", **kwargs)
        self._now = clock
        self._utc_offset: int | None = None
        self._tick_timer: Timer | None = None
        self.time_text = ""
        self.date_text = ""

    @property
    def utc_offset(self) -> int | None:
        return self._utc_offset

    @property
    def ticking(self) -> bool:
        return self._tick_timer is not None

    def set_offset(self, utc_offset_seconds: int) -> None:
        """Show the time for a new offset, replacing any running timer."""
        if self._utc_offset == utc_offset_seconds and self._tick_timer is not None:
            return
        self._stop_timer()
        self._utc_offset = utc_offset_seconds
        self._tick()
        self._tick_timer = self.set_interval(1, self._tick)

    def clear_offset(self) -> None:
        """Stop ticking and blank the display."""
        self._stop_timer()
        self._utc_offset = None
        self.time_text = ""
        self.date_text = ""
        self.update("")

    def _stop_timer(self) -> None:
        if self._tick_timer is not None:
            self._tick_timer.stop()
            self._tick_timer = None

    def _tick(self) -> None:
        if self._utc_offset is None:
            return
        now = self._now()
        self.time_text = format_local_time(self._utc_offset, now)
        self.update(self.time_text)

        date_text = format_local_date(self._utc_offset, now)
        if date_text != self.date_text:
            self.date_text = date_text
            self.post_message(self.DateChanged(date_text))

    def on_unmount(self) -> None:
        self._stop_timer()

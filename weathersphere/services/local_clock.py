"""Wall-clock time at a location given its UTC offset."""

from datetime import datetime, timedelta


def viewer_now() -> datetime:
    """Return the current time as an aware datetime in the viewer's zone."""
    return datetime.now().astimezone()


def derive_local_time(utc_offset_seconds: int, now: datetime | None = None) -> datetime:
    """Return the naive wall-clock time at a location.

    This is the viewer's wall time plus the target offset minus the viewer's
    own offset, so the result does not depend on the viewer's time zone.

    Args:
        utc_offset_seconds: Signed offset of the location from UTC.
        now: Current instant; naive values are taken as the viewer's local time.
    """
    if now is None:
        now = viewer_now()
    elif now.tzinfo is None:
        now = now.astimezone()

    viewer_offset = now.utcoffset() or timedelta(0)
    wall = now.replace(tzinfo=None)
    return wall + timedelta(seconds=utc_offset_seconds) - viewer_offset


def format_local_time(utc_offset_seconds: int, now: datetime | None = None) -> str:
    """Format the location's time as HH:MM on a 24-hour clock."""
    return derive_local_time(utc_offset_seconds, now).strftime("%H:%M")


def format_local_date(utc_offset_seconds: int, now: datetime | None = None) -> str:
    """Format the location's date, e.g. 'Sunday, October 18, 2026'."""
    local = derive_local_time(utc_offset_seconds, now)
    return f"{local:%A, %B} {local.day}, {local.year}"


def utc_offset_label(utc_offset_seconds: int) -> str:
    """Return a label such as 'UTC+05:30' for an offset."""
    sign = "+" if utc_offset_seconds >= 0 else "-"
    minutes = abs(utc_offset_seconds) // 60
    return f"UTC{sign}{minutes // 60:02d}:{minutes % 60:02d}"

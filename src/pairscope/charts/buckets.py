"""Time windows, bucket widths, colours and axis labels for charts.

Coarser buckets as the window widens keep the number of rendered buckets
roughly bounded regardless of window length.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone, tzinfo

from pydantic import BaseModel

TIME_DELTA_24_HOURS = 24 * 60 * 60
TIME_DELTA_7_DAYS = 7 * TIME_DELTA_24_HOURS
TIME_DELTA_30_DAYS = 30 * TIME_DELTA_24_HOURS
TIME_DELTA_1_YEAR = 365 * TIME_DELTA_24_HOURS

BUCKET_SECONDS_24_HOURS = 900  # 15 min
BUCKET_SECONDS_7_DAYS = 3600  # 1 h
BUCKET_SECONDS_30_DAYS = 14400  # 4 h
BUCKET_SECONDS_1_YEAR = 86400  # 1 d

# Fixed English names; labels must not depend on the host locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 3600,
    "d": TIME_DELTA_24_HOURS,
    "w": 7 * TIME_DELTA_24_HOURS,
    "y": TIME_DELTA_1_YEAR,
}
_TIME_DELTA_PATTERN = re.compile(r"^(\d+)([smhdwy])?$")


class ChartColors(BaseModel):
    """Colour palette for pair charts."""

    buy_volume: str = "#26a69a"
    buy_volume_transparent: str = "rgba(38, 166, 154, 0.5)"
    sell_volume: str = "#ef5350"
    sell_volume_transparent: str = "rgba(239, 83, 80, 0.5)"
    price_line: str = "#5c6bc0"
    zero_line: str = "#888888"

    model_config = {"frozen": True}


HISTORICAL_COLOR_DARK = "#5178FF"
HISTORICAL_COLOR_LIGHT = "#4E4AF6"


def historical_color(color_theme: str) -> str:
    """Series colour for a single order's chart. Anything but 'dark' is light."""
    return HISTORICAL_COLOR_DARK if color_theme == "dark" else HISTORICAL_COLOR_LIGHT


def get_bucket_seconds_for_time_delta(time_delta_seconds: int) -> int:
    """Bucket width for a lookback window.

    <= 24h -> 15 min, <= 7d -> 1 h, <= 30d -> 4 h, otherwise 1 day.
    """
    if time_delta_seconds <= TIME_DELTA_24_HOURS:
        return BUCKET_SECONDS_24_HOURS
    if time_delta_seconds <= TIME_DELTA_7_DAYS:
        return BUCKET_SECONDS_7_DAYS
    if time_delta_seconds <= TIME_DELTA_30_DAYS:
        return BUCKET_SECONDS_30_DAYS
    return BUCKET_SECONDS_1_YEAR


def bucket_start(timestamp: int, bucket_seconds: int) -> int:
    """Floor a timestamp to the start of its bucket."""
    return (timestamp // bucket_seconds) * bucket_seconds


def parse_time_delta(value: str | int) -> int:
    """Parse a window like '24h', '7d', '30d', '1y' or plain seconds.

    Raises:
        ValueError: If the value is malformed or not positive.
    """
    if isinstance(value, int):
        seconds = value
    else:
        m = _TIME_DELTA_PATTERN.match(value.strip().lower())
        if not m:
            raise ValueError(
                f"Invalid time window '{value}'. Expected e.g. 24h, 7d, 30d, 1y or seconds."
            )
        seconds = int(m.group(1)) * _UNIT_SECONDS[m.group(2) or "s"]
    if seconds <= 0:
        raise ValueError(f"Time window must be positive, got {value!r}")
    return seconds


def format_chart_timestamp(
    timestamp_seconds: int | float,
    time_delta_seconds: int,
    tz: tzinfo = timezone.utc,
) -> str:
    """Axis label whose precision follows the active window.

    <= 24h: 'Jan 5 09:05'; <= 7d: 'Jan 5 09:00'; otherwise 'Jan 5'.
    Day of month is unpadded, hour and minute are zero-padded.
    """
    dt = datetime.fromtimestamp(timestamp_seconds, tz=tz)
    day = f"{_MONTHS[dt.month - 1]} {dt.day}"
    if time_delta_seconds <= TIME_DELTA_24_HOURS:
        return f"{day} {dt.hour:02d}:{dt.minute:02d}"
    if time_delta_seconds <= TIME_DELTA_7_DAYS:
        return f"{day} {dt.hour:02d}:00"
    return day

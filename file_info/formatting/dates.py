from datetime import datetime, UTC

from .. import config
from ..exceptions import InvalidTimestampError


def parse_iso(value: str) -> datetime:
    """
    Parses an ISO-8601 timestamp ('2017-01-10T11:08:48.000Z').
    Naive timestamps are taken as UTC.
    """
    try:
        dt = datetime.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise InvalidTimestampError(f"Not an ISO-8601 timestamp: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def to_iso(timestamp: float) -> str:
    """POSIX timestamp -> ISO-8601 UTC string with millisecond precision."""
    dt = datetime.fromtimestamp(timestamp, UTC)
    return dt.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')


def format_time(dt: datetime, use_24_hour_format: bool) -> str:
    if use_24_hour_format:
        return dt.strftime(config.FORMAT_24_HOUR)
    # %I and %p are zero-padded and locale dependent; build h:mm:ss am/pm by hand
    hour = dt.hour % 12 or 12
    meridiem = 'am' if dt.hour < 12 else 'pm'
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def format_pretty_date(value: str, use_24_hour_format: bool = False) -> str:
    """
    Renders an ISO timestamp as 'January 10th 2017, 11:08:48 am'
    (or '..., 11:08:48' with the 24-hour clock). Always in UTC.
    """
    dt = parse_iso(value)
    return config.DATE_PATTERN.format(
        month=dt.strftime('%B'),
        day=dt.day,
        suffix=ordinal_suffix(dt.day),
        year=dt.year,
        time=format_time(dt, use_24_hour_format),
    )

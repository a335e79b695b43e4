import datetime
import math

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24

_UNITS = {
    "ja": {"minute": "{n}分前", "hour": "{n}時間前", "day": "{n}日前"},
    "en": {
        "minute": "{n} minute{s} ago",
        "hour": "{n} hour{s} ago",
        "day": "{n} day{s} ago",
    },
}


def to_datetime(value) -> datetime.datetime:
    """Coerce an ISO string, date or datetime into an aware UTC datetime.

    Naive values are taken to be UTC.
    """
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        parsed = datetime.datetime.fromisoformat(text)
    else:
        raise ValueError(f"Unsupported date value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def days_ago(iso_date, now: datetime.datetime | None = None, locale: str = "ja") -> str:
    """Format how long ago ``iso_date`` was, in minutes, hours or days.

    Anything under an hour (including dates in the future) reports at least
    one minute.
    """
    target = to_datetime(iso_date)
    current = to_datetime(now) if now is not None else datetime.datetime.now(
        datetime.timezone.utc
    )
    diff = (current - target).total_seconds()
    units = _UNITS.get(locale, _UNITS["ja"])

    if diff < HOUR:
        unit, n = "minute", max(1, math.floor(diff / MINUTE))
    elif diff < DAY:
        unit, n = "hour", math.floor(diff / HOUR)
    else:
        unit, n = "day", math.floor(diff / DAY)

    return units[unit].format(n=n, s="" if n == 1 else "s")

"""Date token formatting for daily note filenames and template text."""

from datetime import datetime, timezone


def format_date(pattern: str, when: datetime) -> str:
    """Format a date using the DD / MM / YYYY token pattern.

    Each token is replaced once (first occurrence only), in the order
    DD, MM, YYYY. Anything else in the pattern passes through untouched.
    """
    result = pattern.replace("DD", f"{when.day:02d}", 1)
    result = result.replace("MM", f"{when.month:02d}", 1)
    return result.replace("YYYY", f"{when.year:04d}", 1)


def long_date(when: datetime) -> str:
    """Human-readable date used inside note content, e.g. "March 7, 2024"."""
    return f"{when:%B} {when.day}, {when.year}"


def preview_date(when: datetime) -> str:
    """Long date with weekday, e.g. "Thursday, March 7, 2024"."""
    return f"{when:%A}, {long_date(when)}"


def timestamp(when: datetime) -> str:
    """ISO-8601 timestamp with UTC offset, to the second.

    Naive datetimes are taken as local time.
    """
    if when.tzinfo is None:
        when = when.astimezone()
    return when.isoformat(timespec="seconds")


def utc_timestamp(when: datetime) -> str:
    """ISO-8601 UTC timestamp with milliseconds and a Z suffix."""
    utc = when.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"

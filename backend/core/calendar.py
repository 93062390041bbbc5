"""
Calendar arithmetic shared by the analytics.

"Local day" is always defined by an explicit tzinfo, normally the zone of
the caller-supplied ``now``. Nothing in this module reads the wall clock.

Naive datetimes are taken as already local to the reference zone, so
naive and aware values can be mixed freely; every comparison goes
through ``localize`` first.
"""
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple


def localize(moment: datetime, tz: Optional[tzinfo]) -> datetime:
    """
    Express ``moment`` in zone ``tz``.

    Naive moments get ``tz`` attached as-is. With ``tz=None`` (a naive
    reference) aware moments drop their zone and keep their wall time.
    """
    if moment.tzinfo is None:
        return moment if tz is None else moment.replace(tzinfo=tz)
    if tz is None:
        return moment.replace(tzinfo=None)
    return moment.astimezone(tz)


def instant(moment: datetime) -> datetime:
    """Sort key for moments with no reference zone; naive ones read as UTC."""
    return localize(moment, timezone.utc)


def local_date(moment: datetime, tz: Optional[tzinfo] = None) -> date:
    """
    Calendar date of ``moment`` in zone ``tz``.

    Aware datetimes are converted to ``tz``; naive datetimes are taken as
    already local. With ``tz=None`` the moment is used as given.
    """
    if tz is None:
        return moment.date()
    return localize(moment, tz).date()


def week_start(day: date) -> date:
    """Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def week_bounds(now: datetime) -> Tuple[datetime, datetime]:
    """
    Half-open ``[Monday 00:00, next Monday 00:00)`` around ``now``.

    Bounds carry ``now``'s tzinfo, so the window covers Monday 00:00
    through Sunday 23:59:59.999999 local time.
    """
    monday = week_start(now.date())
    start = datetime(monday.year, monday.month, monday.day, tzinfo=now.tzinfo)
    return start, start + timedelta(days=7)


def window_start(now: datetime, days: int) -> datetime:
    """Lower bound of a trailing window of ``days`` days ending at ``now``."""
    return now - timedelta(days=days)


def on_or_after(moment: datetime, since: datetime) -> bool:
    """True when ``moment`` is not earlier than ``since``, read in since's zone."""
    return localize(moment, since.tzinfo) >= since


def in_window(moment: datetime, start: datetime, end: datetime) -> bool:
    """True when ``start <= moment < end``, read in start's zone."""
    return start <= localize(moment, start.tzinfo) < end

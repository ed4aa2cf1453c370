"""
Date arithmetic for the weekly Elite Atomic.

Elite Atomics happen on Sundays at 19:00 UTC. All functions here are pure
except `now`, which callers should accept as an injectable clock.
"""

from datetime import datetime, timedelta, timezone

# Sunday, counted with days_from_sunday
TOURNAMENT_WEEKDAY = 0
TOURNAMENT_HOUR = 19
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now() -> datetime:
    """Current UTC instant."""
    return datetime.now(timezone.utc)


def _as_utc(instant: datetime) -> datetime:
    # Naive datetimes are taken to already be UTC.
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def days_from_sunday(instant: datetime) -> int:
    """Weekday number with Sunday as 0 and Saturday as 6."""
    return instant.isoweekday() % 7


def next_occurrence(after: datetime) -> datetime:
    """
    Return the start of the next Elite Atomic at or after `after`.

    If `after` is not a Sunday, returns the following Sunday. If it is a Sunday,
    returns the same Sunday when the hour is before 19:00 UTC and the next one
    otherwise.

    :param after: reference instant; naive values are read as UTC
    :return: UTC-aware datetime on a Sunday at 19:00:00
    """
    after = _as_utc(after)
    weekday = days_from_sunday(after)

    if weekday == TOURNAMENT_WEEKDAY:
        days_ahead = 0 if after.hour < TOURNAMENT_HOUR else 7
    else:
        days_ahead = 7 - weekday

    day = after.date() + timedelta(days=days_ahead)

    return datetime(
        day.year, day.month, day.day, TOURNAMENT_HOUR, tzinfo=timezone.utc
    )


def slot_of(instant: datetime) -> int:
    """
    Which Sunday of the month `instant` falls on, counting from 0.

    Days 1-7 are slot 0, 8-14 slot 1, and so on up to slot 4 for days 29-31.
    """
    return (_as_utc(instant).day - 1) // 7


def to_epoch_millis(instant: datetime) -> int:
    """Milliseconds since the Unix epoch, ignoring leap seconds."""
    return (_as_utc(instant) - EPOCH) // timedelta(milliseconds=1)

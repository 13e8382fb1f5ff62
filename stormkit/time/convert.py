"""Duration unit constants and conversions that round down."""

from datetime import timedelta

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SEC = 1_000_000_000
MICROS_PER_SEC = 1_000_000
MILLIS_PER_SEC = 1_000
SECS_PER_MINUTE = 60
SECS_PER_HOUR = 3_600
SECS_PER_DAY = 86_400

SECOND = timedelta(seconds=1)
MILLISECOND = timedelta(milliseconds=1)
MICROSECOND = timedelta(microseconds=1)


def _parts(duration: timedelta) -> tuple[int, int]:
    """Whole seconds and the sub-second part in nanoseconds."""
    if duration < timedelta(0):
        raise ValueError("duration must not be negative")
    secs = duration.days * SECS_PER_DAY + duration.seconds
    return secs, duration.microseconds * NANOS_PER_MICRO


def as_days(duration: timedelta) -> int:
    return _parts(duration)[0] // SECS_PER_DAY


def as_hours(duration: timedelta) -> int:
    return _parts(duration)[0] // SECS_PER_HOUR


def as_minutes(duration: timedelta) -> int:
    return _parts(duration)[0] // SECS_PER_MINUTE


def as_seconds(duration: timedelta) -> int:
    return _parts(duration)[0]


def as_milliseconds(duration: timedelta) -> int:
    secs, nanos = _parts(duration)
    return secs * MILLIS_PER_SEC + nanos // NANOS_PER_MILLI


def as_microseconds(duration: timedelta) -> int:
    secs, nanos = _parts(duration)
    return secs * MICROS_PER_SEC + nanos // NANOS_PER_MICRO


def as_nanoseconds(duration: timedelta) -> int:
    secs, nanos = _parts(duration)
    return secs * NANOS_PER_SEC + nanos
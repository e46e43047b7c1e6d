'''
timetools
=========

Clock access, epoch conversion and day arithmetic on timezone-aware datetimes.

Every function that reads the current time takes a `clock` callable returning
float unix seconds, and every function that produces local time takes a `tz`.
Leaving `tz` as None means the system's local zone, resolved separately for
each instant so that daylight saving changes are respected.

Epoch values come in two forms. The float form is what most callers want and
is lossy below roughly a microsecond for present-day dates. EpochValue keeps
whole seconds and nanoseconds as two ints.
'''
import datetime
import math
import time
import typing

import dateutil.parser

from jpdatekit import vlogging

log = vlogging.get_logger(__name__)

UTC = datetime.timezone.utc
UNIX_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=UTC)

NANOSECONDS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 24 * 60 * 60

ISO_FORMAT = '%Y-%m-%dT%H:%M:%S%z'

class ParseError(ValueError):
    pass

def _localize(dt, tz=None):
    if tz is None:
        return dt.astimezone()
    return dt.astimezone(tz)

def _aware(dt):
    # Naive datetimes are taken to be system local time, like
    # datetime.timestamp does.
    if dt.tzinfo is None:
        return dt.astimezone()
    return dt

def fixed_timezone(hours) -> datetime.timezone:
    return datetime.timezone(datetime.timedelta(hours=hours))

def local_timezone(clock=time.time) -> datetime.tzinfo:
    '''
    Return the system zone's fixed offset as of clock().
    '''
    return now_local(clock=clock).tzinfo

# CLOCK
################################################################################

def fromtimestamp(unix) -> datetime.datetime:
    return datetime.datetime.fromtimestamp(unix, tz=UTC)

def now(clock=time.time) -> datetime.datetime:
    return fromtimestamp(clock())

def now_local(clock=time.time, tz=None) -> datetime.datetime:
    return _localize(now(clock=clock), tz)

# EPOCH
################################################################################

class EpochValue(typing.NamedTuple):
    '''
    Exact seconds since 1970-01-01T00:00:00Z.

    `nanoseconds` is always in [0, 1e9), so an instant before the epoch has a
    negative `seconds` and a positive `nanoseconds`: 1.25 seconds before the
    epoch is EpochValue(-2, 750000000).
    '''
    seconds: int
    nanoseconds: int

    @classmethod
    def from_datetime(cls, dt):
        delta = _aware(dt) - UNIX_EPOCH
        seconds = (delta.days * SECONDS_PER_DAY) + delta.seconds
        return cls(seconds, delta.microseconds * 1000)

    @classmethod
    def from_float(cls, epoch):
        seconds = math.floor(epoch)
        nanoseconds = round((epoch - seconds) * NANOSECONDS_PER_SECOND)
        if nanoseconds >= NANOSECONDS_PER_SECOND:
            seconds += 1
            nanoseconds -= NANOSECONDS_PER_SECOND
        return cls(seconds, nanoseconds)

    def to_float(self) -> float:
        return self.seconds + (self.nanoseconds / 1e9)

    def to_datetime(self, tz=None) -> datetime.datetime:
        # datetime stops at microseconds.
        delta = datetime.timedelta(
            seconds=self.seconds,
            microseconds=round(self.nanoseconds / 1000),
        )
        return _localize(UNIX_EPOCH + delta, tz)

def epoch_from_datetime(dt) -> float:
    '''
    Return the float seconds since the epoch for the given datetime, computed
    as whole seconds plus nanoseconds / 1e9.
    '''
    return EpochValue.from_datetime(dt).to_float()

def local_from_epoch(epoch, tz=None) -> datetime.datetime:
    '''
    Convert float epoch seconds to a datetime in `tz`, or the system zone.

    The whole part is truncated toward zero and the remainder keeps the sign of
    the input, so for negative epochs the fraction is applied backwards from
    the truncated second. -1.25 becomes -1 second and -250000000 nanoseconds,
    which is the correct instant. Nothing is clamped.
    '''
    seconds = int(epoch)
    nanoseconds = (epoch - seconds) * 1e9
    log.loud('Split epoch %r into %d s + %r ns.', epoch, seconds, nanoseconds)
    delta = datetime.timedelta(seconds=seconds, microseconds=nanoseconds / 1000)
    return _localize(UNIX_EPOCH + delta, tz)

# ARITHMETIC
################################################################################

def add_days(dt, days) -> datetime.datetime:
    '''
    Move the instant by exactly `days` * 86400 seconds and return it in the
    same zone as `dt`. Python's own aware arithmetic works on wall clock time
    within a zone, which is off by an hour across a daylight saving change.
    '''
    moved = _aware(dt).astimezone(UTC) + datetime.timedelta(days=days)
    return _localize(moved, dt.tzinfo)

def tomorrow(dt) -> datetime.datetime:
    return add_days(dt, 1)

def yesterday(dt) -> datetime.datetime:
    return add_days(dt, -1)

# ISO 8601
################################################################################

def format_iso(dt) -> str:
    '''
    2018-01-02T03:44:55+0000
    '''
    return _aware(dt).strftime(ISO_FORMAT)

def parse_iso(text) -> datetime.datetime:
    '''
    Parse an ISO 8601 string. Strings without an offset are read as system
    local time.
    '''
    try:
        return _aware(dateutil.parser.isoparse(text.strip()))
    except (ValueError, OverflowError) as exc:
        raise ParseError(f'{text!r} is not an ISO 8601 date.') from exc

'''
Print the current time in UTC and in the local zone, with the epoch seconds of
each and the local offset. The output is meant for reading, not parsing.
'''
import sys

from jpdatekit import timetools
from jpdatekit import vlogging

log = vlogging.get_logger(__name__)

def format_offset(delta) -> str:
    '''
    timedelta(hours=9) -> '+09:00'
    timedelta(hours=-3, minutes=-30) -> '-03:30'
    '''
    total_minutes = round(delta.total_seconds() / 60)
    sign = '-' if total_minutes < 0 else '+'
    (hours, minutes) = divmod(abs(total_minutes), 60)
    return f'{sign}{hours:02d}:{minutes:02d}'

def report_now(now=None, tz=None, stream=None):
    if now is None:
        now = timetools.now()
    if stream is None:
        stream = sys.stdout

    # One snapshot shown in two zones, so both epoch values are always equal.
    utc = now.astimezone(timetools.UTC)
    if tz is None:
        local = now.astimezone()
    else:
        local = now.astimezone(tz)

    utc_timestamp = timetools.EpochValue.from_datetime(utc).seconds
    local_timestamp = timetools.EpochValue.from_datetime(local).seconds
    log.debug('Reporting %s as %s.', utc.isoformat(), local.isoformat())

    lines = [
        'Now:',
        f'    utc: {str(utc)!r}',
        f'    local: {str(local)!r}',
        'Timestamp:',
        f'    utc.timestamp(): {utc_timestamp}',
        f'    local.timestamp(): {local_timestamp}',
        'TimeZone:',
        f'    local.offset()={format_offset(local.utcoffset())}',
    ]
    for line in lines:
        stream.write(line + '\n')

'''
This module formats datetimes as Japanese date strings with the weekday in
kanji, and parses them back. E.g.:
japanese.format_japanese(datetime(2018, 1, 2, 3, 44, 55)) -> '2018年01月02日(火) 03時44分55秒'
japanese.parse_japanese('2018年01月02日(火) 03時44分55秒') -> datetime(2018, 1, 2, 3, 44, 55, tzinfo=...)

The parser throws away everything between the parentheses without looking at
it, so a string with the wrong weekday still parses to the date it names.
'''
import datetime
import enum
import re

from jpdatekit import timetools
from jpdatekit import vlogging

log = vlogging.get_logger(__name__)

ParseError = timetools.ParseError

# Years are unpadded, so they may have any number of digits.
PARSE_PATTERN = re.compile(r'(\d+)年(\d{1,2})月(\d{1,2})日 (\d{1,2})時(\d{1,2})分(\d{1,2})秒')

class Weekday(enum.IntEnum):
    # Values match datetime.weekday().
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

WEEKDAY_KANJI = {
    Weekday.MONDAY: '月',
    Weekday.TUESDAY: '火',
    Weekday.WEDNESDAY: '水',
    Weekday.THURSDAY: '木',
    Weekday.FRIDAY: '金',
    Weekday.SATURDAY: '土',
    Weekday.SUNDAY: '日',
}

_missing = set(Weekday).difference(WEEKDAY_KANJI)
if _missing:
    raise RuntimeError(f'WEEKDAY_KANJI has no glyph for {sorted(_missing)}.')
del _missing

def weekday_kanji(weekday) -> str:
    return WEEKDAY_KANJI[Weekday(weekday)]

def format_japanese(dt) -> str:
    kanji = weekday_kanji(dt.weekday())
    return (
        f'{dt.year}年{dt.month:02d}月{dt.day:02d}日({kanji}) '
        f'{dt.hour:02d}時{dt.minute:02d}分{dt.second:02d}秒'
    )

def strip_weekday(text) -> str:
    '''
    Return the text before the first "(" joined to the text after the first
    ")". Raise ParseError if either is missing.
    '''
    (before, paren, rest) = text.partition('(')
    if not paren:
        raise ParseError(f'{text!r} has no "(" before the weekday.')

    close = text.find(')')
    if close == -1:
        raise ParseError(f'{text!r} has no ")" after the weekday.')

    return before + text[close + 1:]

def parse_japanese(text, tz=None) -> datetime.datetime:
    '''
    Parse a string in the format_japanese layout. The result is in `tz`, or the
    system's local zone if tz is None.

    The weekday is not checked against the date.
    '''
    stripped = strip_weekday(text)
    log.loud('Parsing %r.', stripped)

    match = PARSE_PATTERN.fullmatch(stripped)
    if not match:
        raise ParseError(f'{text!r} does not match 2018年01月02日(火) 03時44分55秒 pattern.')

    (year, month, day, hour, minute, second) = (int(field) for field in match.groups())
    try:
        naive = datetime.datetime(year, month, day, hour, minute, second)
        if tz is None:
            return naive.astimezone()
    except (ValueError, OverflowError) as exc:
        raise ParseError(f'{text!r} is not a Japanese date: {exc}') from exc

    return naive.replace(tzinfo=tz)

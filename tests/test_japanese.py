import datetime

import pytest

from jpdatekit import japanese
from jpdatekit import timetools

JST = timetools.fixed_timezone(9)

def test_format_japanese():
    local = datetime.datetime(2018, 1, 2, 3, 44, 55, tzinfo=JST)
    assert japanese.format_japanese(local) == '2018年01月02日(火) 03時44分55秒'

def test_format_japanese_all_weekdays():
    # 2018-01-01 was a Monday.
    glyphs = [
        japanese.format_japanese(datetime.datetime(2018, 1, day, tzinfo=JST))[12]
        for day in range(1, 8)
    ]
    assert ''.join(glyphs) == '月火水木金土日'

def test_format_japanese_year_is_not_padded():
    dt = datetime.datetime(999, 11, 30, 23, 5, 9, tzinfo=JST)
    text = japanese.format_japanese(dt)
    assert text.startswith('999年11月30日(')
    assert text.endswith(') 23時05分09秒')

def test_weekday_kanji_accepts_int_and_enum():
    assert japanese.weekday_kanji(japanese.Weekday.SATURDAY) == '土'
    assert japanese.weekday_kanji(6) == '日'

def test_weekday_kanji_covers_every_weekday():
    assert set(japanese.WEEKDAY_KANJI) == set(japanese.Weekday)
    assert len(set(japanese.WEEKDAY_KANJI.values())) == 7

def test_weekday_kanji_rejects_out_of_range():
    with pytest.raises(ValueError):
        japanese.weekday_kanji(7)

def test_parse_japanese():
    expected = datetime.datetime(2018, 1, 2, 3, 44, 55, tzinfo=JST)
    assert japanese.parse_japanese('2018年01月02日(火) 03時44分55秒', tz=JST) == expected

def test_parse_japanese_ignores_weekday():
    # 2018-01-02 was a Tuesday, 水 is Wednesday.
    expected = datetime.datetime(2018, 1, 2, 3, 44, 55, tzinfo=JST)
    assert japanese.parse_japanese('2018年01月02日(水) 03時44分55秒', tz=JST) == expected

def test_parse_japanese_system_zone():
    dt = japanese.parse_japanese('2018年01月02日(火) 03時44分55秒')
    assert dt.tzinfo is not None
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second) == (2018, 1, 2, 3, 44, 55)

@pytest.mark.parametrize('text', [
    '2018年13月02日(月) 03時44分55秒',
    '2018年01月32日(月) 03時44分55秒',
    '2018年02月30日(月) 03時44分55秒',
    '2018年01月02日(火) 24時44分55秒',
    '2018年01月02日(火) 03時60分55秒',
    '0年01月01日(月) 00時00分00秒',
    '10000年01月01日(月) 00時00分00秒',
])
def test_parse_japanese_out_of_range(text):
    with pytest.raises(japanese.ParseError):
        japanese.parse_japanese(text, tz=JST)

@pytest.mark.parametrize('text', [
    'not a date',
    '',
    '2018年01月02日 03時44分55秒',
    '2018年01月02日(火 03時44分55秒',
    '2018-01-02T03:44:55',
    '2018年01月02日(火)  03時44分55秒',
    '2018年1月2日(火) 3時44分',
    '2018年01月02日(火) 03時44分55秒 extra',
])
def test_parse_japanese_malformed(text):
    with pytest.raises(japanese.ParseError):
        japanese.parse_japanese(text, tz=JST)

def test_parse_error_chains_calendar_error():
    with pytest.raises(japanese.ParseError) as exc_info:
        japanese.parse_japanese('2018年13月02日(月) 03時44分55秒', tz=JST)
    assert isinstance(exc_info.value.__cause__, ValueError)

def test_strip_weekday():
    assert japanese.strip_weekday('2018年01月02日(火) 03時44分55秒') == '2018年01月02日 03時44分55秒'

@pytest.mark.parametrize('dt', [
    datetime.datetime(2018, 1, 2, 3, 44, 55, tzinfo=JST),
    datetime.datetime(1999, 12, 31, 23, 59, 59, tzinfo=JST),
    datetime.datetime(2024, 2, 29, 0, 0, 0, tzinfo=JST),
    datetime.datetime(1970, 1, 1, 9, 0, 0, 500000, tzinfo=JST),
    datetime.datetime(2018, 6, 15, 12, 30, 0, tzinfo=timetools.UTC),
    datetime.datetime(999, 11, 30, 23, 5, 9, tzinfo=JST),
    datetime.datetime(1, 1, 1, 0, 0, 0, tzinfo=JST),
])
def test_round_trip_keeps_fields(dt):
    parsed = japanese.parse_japanese(japanese.format_japanese(dt), tz=JST)
    fields = ('year', 'month', 'day', 'hour', 'minute', 'second')
    assert [getattr(parsed, f) for f in fields] == [getattr(dt, f) for f in fields]

def test_parse_japanese_short_year():
    expected = datetime.datetime(999, 11, 30, 23, 5, 9, tzinfo=JST)
    assert japanese.parse_japanese('999年11月30日(土) 23時05分09秒', tz=JST) == expected

def test_parse_japanese_unpadded_fields():
    expected = datetime.datetime(2018, 1, 2, 3, 4, 5, tzinfo=JST)
    assert japanese.parse_japanese('2018年1月2日(火) 3時4分5秒', tz=JST) == expected

'''
jpdate
======

Show the time in Japanese date format and convert between Japanese dates,
ISO 8601 dates and epoch seconds.

Run with no arguments to print the current time in UTC and in the local zone.

> jpdate
> jpdate now
> jpdate format 1514732400 --tz-offset 9
> jpdate parse "2018年01月02日(火) 03時44分55秒"
> jpdate epoch 2018-01-02T03:44:55+0900

Positional arguments of format, parse and epoch may be !i to read lines from
stdin or !c to read lines from the clipboard.
'''
import argparse
import sys

from jpdatekit import betterhelp
from jpdatekit import japanese
from jpdatekit import pipeable
from jpdatekit import report
from jpdatekit import timetools
from jpdatekit import vlogging

log = vlogging.get_logger(__name__, 'jpdate')

def _get_tz(args):
    return getattr(args, 'tz_offset', None)

def tz_offset_type(text):
    '''
    argparse type for --tz-offset. Return a fixed timezone for a number of hours
    strictly between -24 and 24.
    '''
    try:
        hours = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{text!r} is not a number of hours.')
    if not -24 < hours < 24:
        raise argparse.ArgumentTypeError(f'{text} is not between -24 and 24 hours.')
    return timetools.fixed_timezone(hours)

def _lines(args):
    return pipeable.input_many(args.inputs, strip=True, skip_blank=True)

def report_argparse(args):
    report.report_now(tz=_get_tz(args))
    return 0

def now_argparse(args):
    if args.utc:
        dt = timetools.now()
    else:
        dt = timetools.now_local(tz=_get_tz(args))
    pipeable.stdout(japanese.format_japanese(dt))
    return 0

@pipeable.ctrlc_return1
def format_argparse(args):
    tz = _get_tz(args)
    status = 0
    for line in _lines(args):
        try:
            epoch = float(line)
        except ValueError:
            log.error('%r is not a number of seconds.', line)
            status = 1
            continue
        try:
            dt = timetools.local_from_epoch(epoch, tz=tz)
        except (ValueError, OverflowError) as exc:
            log.error('%r is outside the supported date range: %s', line, exc)
            status = 1
            continue
        pipeable.stdout(japanese.format_japanese(dt))
    return status

@pipeable.ctrlc_return1
def parse_argparse(args):
    tz = _get_tz(args)
    status = 0
    for line in _lines(args):
        try:
            dt = japanese.parse_japanese(line, tz=tz)
        except japanese.ParseError as exc:
            log.error(exc)
            status = 1
            continue
        epoch = timetools.epoch_from_datetime(dt)
        pipeable.stdout(f'{timetools.format_iso(dt)} {epoch}')
    return status

@pipeable.ctrlc_return1
def epoch_argparse(args):
    status = 0
    for line in _lines(args):
        try:
            dt = timetools.parse_iso(line)
        except timetools.ParseError as exc:
            log.error(exc)
            status = 1
            continue
        pipeable.stdout(timetools.epoch_from_datetime(dt))
    return status

@vlogging.main_decorator
def main(argv):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.set_defaults(func=report_argparse)

    tz_parent = argparse.ArgumentParser(add_help=False)
    tz_parent.add_argument(
        '--tz_offset',
        '--tz-offset',
        dest='tz_offset',
        type=tz_offset_type,
        default=None,
        help='''
        Render local times at this fixed offset from UTC, in hours, instead of
        the system's zone. E.g. 9 for Japan, -3.5 for Newfoundland.
        ''',
    )

    subparsers = parser.add_subparsers()

    ################################################################################################

    p_report = subparsers.add_parser(
        'report',
        parents=[tz_parent],
        description='''
        Print the current time in UTC and local time, their epoch seconds,
        and the local offset. This is what running jpdate bare does.
        ''',
    )
    p_report.set_defaults(func=report_argparse)

    ################################################################################################

    p_now = subparsers.add_parser(
        'now',
        parents=[tz_parent],
        description='''
        Print the current time in Japanese date format.
        ''',
    )
    p_now.add_argument(
        '--utc',
        action='store_true',
        help='''
        Show UTC instead of local time.
        ''',
    )
    p_now.set_defaults(func=now_argparse)

    ################################################################################################

    p_format = subparsers.add_parser(
        'format',
        parents=[tz_parent],
        description='''
        Convert epoch seconds to Japanese date format.
        ''',
    )
    p_format.add_argument(
        'inputs',
        metavar='epoch',
        nargs='+',
        help='''
        Seconds since 1970-01-01T00:00:00Z, may be fractional or negative.
        Uses pipeable to support !c clipboard, !i stdin, one number per line.
        ''',
    )
    p_format.set_defaults(func=format_argparse)

    ################################################################################################

    p_parse = subparsers.add_parser(
        'parse',
        parents=[tz_parent],
        description='''
        Convert Japanese dates like 2018年01月02日(火) 03時44分55秒 to ISO 8601
        and epoch seconds. The weekday in parentheses is ignored.
        ''',
    )
    p_parse.add_argument(
        'inputs',
        metavar='date',
        nargs='+',
        help='''
        Uses pipeable to support !c clipboard, !i stdin, one date per line.
        ''',
    )
    p_parse.set_defaults(func=parse_argparse)

    ################################################################################################

    p_epoch = subparsers.add_parser(
        'epoch',
        description='''
        Convert ISO 8601 dates to epoch seconds. Dates without an offset are
        read as system local time.
        ''',
    )
    p_epoch.add_argument(
        'inputs',
        metavar='date',
        nargs='+',
        help='''
        Uses pipeable to support !c clipboard, !i stdin, one date per line.
        ''',
    )
    p_epoch.set_defaults(func=epoch_argparse)

    return betterhelp.go(parser, argv)

if __name__ == '__main__':
    raise SystemExit(main(sys.argv[1:]))

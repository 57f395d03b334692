"""
Demonstrates date ranges from the command line.

The program creates a date range from its arguments and shows its
boundaries, length, interval, and dates, and how some dates compare
with it. For example:

    date_range_demo "2017-10-01 to 2017-10-08" -z America/Chicago \
        -f "%a %b %d" -c now -c 2017-10-05

The range argument is either a single date, in which case the range
ends one interval after it, or two or more dates separated by " to ".
"""


import argparse
import logging
import sys

from date_range.date_range import Comparison, DateRange, Exclude
from date_range.errors import InvalidInputError
from date_range.helper import Helper
import date_range.interval_utils as interval_utils
import date_range.logging_utils as logging_utils
import date_range.time_zone_utils as time_zone_utils


_RANGE_SEPARATOR = ' to '
_DEFAULT_MAX_DATES = 10
_MIN_MAX_DATES = 3

_COMPARISON_DESCRIPTIONS = {
    Comparison.BEFORE: 'before',
    Comparison.BETWEEN: 'within',
    Comparison.AFTER: 'after',
}


_logger = logging.getLogger(__name__)


def _main():
    sys.exit(main())


def main(args=None):

    args = _parse_args(args)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging_utils.configure_root_logger(level)

    try:
        _show_date_range(args)

    except InvalidInputError as e:
        _logger.error(f'Invalid date range parameters: {e}')
        return 1

    return 0


def _parse_args(args):

    parser = argparse.ArgumentParser(
        description='Shows the dates of a date range.')

    parser.add_argument(
        'range',
        help=(
            'a date, or two or more dates separated by " to ", for '
            'example "2017-10-01 to 2017-10-08"'))

    parser.add_argument(
        '-z', '--time-zone', default=None,
        help='time zone name, for example "America/Chicago"')

    parser.add_argument(
        '-i', '--interval', default=None,
        help='ISO 8601 interval between dates, for example "P1D"')

    parser.add_argument(
        '-f', '--format', dest='date_format', default=None,
        help='strftime date format, for example "%%Y-%%m-%%d"')

    parser.add_argument(
        '--exclude-start', action='store_true',
        help='exclude the start date from dates and comparisons')

    parser.add_argument(
        '--exclude-end', action='store_true',
        help='exclude the end date from dates and comparisons')

    parser.add_argument(
        '-c', '--compare', action='append', default=[], metavar='DATE',
        help='date to compare with the range (may be repeated)')

    parser.add_argument(
        '-n', '--max-dates', type=int, default=_DEFAULT_MAX_DATES,
        help=(
            f'maximum number of dates to show (at least {_MIN_MAX_DATES}, '
            f'default {_DEFAULT_MAX_DATES})'))

    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='log debug messages')

    args = parser.parse_args(args)

    if args.max_dates < _MIN_MAX_DATES:
        parser.error(f'--max-dates must be at least {_MIN_MAX_DATES}.')

    return args


def _show_date_range(args):

    dates = args.range.split(_RANGE_SEPARATOR)
    start = dates if len(dates) > 1 else dates[0]

    r = DateRange(start, None, args.time_zone, args.interval)
    helper = Helper(r)

    exclude = Exclude.NONE
    if args.exclude_start:
        exclude |= Exclude.START_DATE
    if args.exclude_end:
        exclude |= Exclude.END_DATE

    time_zone_name = time_zone_utils.get_time_zone_name(r.time_zone)
    interval = interval_utils.format_interval(r.interval)

    print(f'Range: {r.to_string(args.date_format)}')
    print(f'Start: {r.start_date.isoformat()}')
    print(f'End: {r.end_date.isoformat()}')
    print(f'Time zone: {time_zone_name}')
    print(f'Interval: {interval}')
    print(f'Length: {r.diff()}')
    print(f'Weekend: {"yes" if helper.on_weekend() else "no"}')

    dates = r.to_list(args.date_format, exclude=exclude)
    print(f'Dates ({len(dates)}):')
    for line in _abridge(dates, args.max_dates):
        print(f'    {line}')

    if len(args.compare) != 0:
        print('Comparisons:')
        for date in args.compare:
            result = r.compare(date, exclude)
            description = _COMPARISON_DESCRIPTIONS[result]
            print(f'    {date} is {description} the range.')


def _abridge(items, max_count):

    """
    Gets lines showing a list of items, abridging long lists.

    A list of more than `max_count` items is shown as its first
    `max_count - 2` items, an ellipsis, and its last item.
    """

    lines = [f'[{i}] {item}' for i, item in enumerate(items)]

    if len(lines) <= max_count:
        return lines

    return lines[:max_count - 2] + ['...', lines[-1]]


if __name__ == '__main__':
    _main()

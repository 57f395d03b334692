"""
Utility functions pertaining to intervals.

An *interval* is the step between consecutive dates of a date range
period. Intervals are `dateutil.relativedelta.relativedelta` objects,
so that intervals with year and month components step by calendar
years and months rather than by fixed numbers of days. A
`datetime.timedelta` is accepted anywhere an interval is.

Intervals are specified as strings with ISO 8601 durations of the
form `PnYnMnWnDTnHnMnS`, for example "P1D" (one day), "PT12H" (twelve
hours), or "P2Y4DT6H8M" (two years, four days, six hours, and eight
minutes). Components that are zero may be omitted, but at least one
component must be present. The seconds component may have a fraction.
"""


from datetime import datetime as DateTime, timedelta as TimeDelta
import re

from dateutil.relativedelta import relativedelta as RelativeDelta

from date_range.errors import InvalidInputError
from date_range.settings import get_settings


_INTERVAL_RE = re.compile(
    r'^P(?!$)'
    r'(?:(?P<years>\d+)Y)?'
    r'(?:(?P<months>\d+)M)?'
    r'(?:(?P<weeks>\d+)W)?'
    r'(?:(?P<days>\d+)D)?'
    r'(?:T(?=\d)'
    r'(?:(?P<hours>\d+)H)?'
    r'(?:(?P<minutes>\d+)M)?'
    r'(?:(?P<seconds>\d+)(?:\.(?P<fraction>\d{1,6}))?S)?'
    r')?$')

_REFERENCE_DATETIME = DateTime(2000, 1, 1)

_INTEGER_FIELD_NAMES = (
    'years', 'months', 'weeks', 'days', 'hours', 'minutes')


def get_interval(interval=None):

    """
    Gets an interval.

    The `interval` argument can be:

    * `None`, implying the interval of the `interval` setting (one
      day unless configured otherwise).

    * an ISO 8601 duration string, for example "P1D".

    * a `relativedelta` or `timedelta`, which is returned as is.

    :Raises InvalidInputError:
        if the interval is not one of the above.
    """

    if interval is None:
        interval = get_settings().get_required('interval')

    if isinstance(interval, (RelativeDelta, TimeDelta)):
        return interval

    elif isinstance(interval, str):
        return parse_interval(interval)

    else:
        raise InvalidInputError(
            f'Interval must be an ISO 8601 duration string, a '
            f'relativedelta, or a timedelta, not a '
            f'{interval.__class__.__name__}.')


def parse_interval(spec):

    """
    Parses an ISO 8601 duration string into a `relativedelta`.

    :Raises InvalidInputError:
        if the string is not a valid duration.
    """

    m = _INTERVAL_RE.fullmatch(spec)

    if m is None:
        raise InvalidInputError(f'Bad interval "{spec}".')

    kwargs = dict(
        (name, int(m.group(name)))
        for name in _INTEGER_FIELD_NAMES
        if m.group(name) is not None)

    seconds = m.group('seconds')
    if seconds is not None:
        kwargs['seconds'] = int(seconds)

    # Fraction digits that followed a decimal point, padded to
    # microseconds.
    fraction = m.group('fraction')
    if fraction is not None:
        kwargs['microseconds'] = int(fraction.ljust(6, '0'))

    return RelativeDelta(**kwargs)


def format_interval(interval):

    """Formats an interval as an ISO 8601 duration string."""

    if isinstance(interval, TimeDelta):
        interval = RelativeDelta(
            days=interval.days, seconds=interval.seconds,
            microseconds=interval.microseconds)

    d = interval.normalized()

    date_part = ''.join(
        f'{value}{code}' for value, code in (
            (d.years, 'Y'), (d.months, 'M'), (d.days, 'D'))
        if value != 0)

    time_parts = [
        f'{value}{code}' for value, code in (
            (d.hours, 'H'), (d.minutes, 'M'))
        if value != 0]

    if d.seconds != 0 or d.microseconds != 0:
        time_parts.append(_format_seconds(d.seconds, d.microseconds))

    time_part = ''.join(time_parts)

    if date_part == '' and time_part == '':
        return 'P0D'
    elif time_part == '':
        return f'P{date_part}'
    else:
        return f'P{date_part}T{time_part}'


def _format_seconds(seconds, microseconds):

    if microseconds == 0:
        return f'{seconds}S'

    # `relativedelta.normalized` gives seconds and microseconds the
    # same sign.
    sign = '-' if seconds < 0 or microseconds < 0 else ''
    fraction = f'{abs(microseconds):06d}'.rstrip('0')
    return f'{sign}{abs(seconds)}.{fraction}S'


def add_interval(dt, interval, count=1):

    """
    Adds an interval to a `datetime` the specified number of times.

    The arithmetic is wall clock arithmetic: adding one day to noon
    yields noon of the next day even across a daylight saving time
    transition.

    :Raises InvalidInputError:
        if the result is outside the range of `datetime`.
    """

    try:

        result = dt + interval * count

        # Addition keeps the UTC offset a `pytz` time zone attached to
        # `dt`, which may be wrong for the new wall clock time.
        # Relocalizing fixes that.
        time_zone = result.tzinfo
        if hasattr(time_zone, 'localize'):
            result = time_zone.localize(result.replace(tzinfo=None))

    except (OverflowError, ValueError) as e:
        raise InvalidInputError(
            f'Adding interval "{format_interval(interval)}" {count} '
            f'times to {dt.isoformat()} yields a date out of '
            f'range.') from e

    return result


def check_interval_advances(dt, interval):

    """
    Checks that adding an interval to a `datetime` moves it forward.

    :Raises InvalidInputError:
        if the interval is zero or negative at `dt`.
    """

    try:
        advances = add_interval(dt, interval) > dt

    except InvalidInputError:
        # `dt` is too close to the end of the `datetime` range to
        # check there, so check at a date far from both ends. This
        # raises if the interval is too large for any date.
        advances = add_interval(_REFERENCE_DATETIME, interval) > \
            _REFERENCE_DATETIME

    if not advances:
        raise InvalidInputError(
            f'Interval "{format_interval(interval)}" is not positive. '
            f'An interval must advance from one date to the next.')

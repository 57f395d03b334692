"""
Utility functions that normalize date values to `datetime` objects.

Date range boundaries and the dates compared with date ranges can be
given in several forms. The functions of this module convert all of
them to aware `datetime` objects in a target time zone:

* a `datetime`, which is re-expressed in the target time zone if it
  is aware and localized to it if it is naive.

* a `date`, which becomes midnight of that day.

* a number or numeric string, which is a Unix timestamp. Negative
  timestamps are clamped to zero.

* one of the strings "now", "today", "midnight", "tomorrow", or
  "yesterday", which are relative to the current time in the target
  time zone.

* any other string that `dateutil.parser.parse` understands, for
  example "2017-10-01", "October 1 2017", or "2017-10-01 12:34:56 PM".
"""


from collections.abc import Iterable
from datetime import (
    date as Date,
    datetime as DateTime,
    time as Time,
    timedelta as TimeDelta)
from numbers import Real
import logging
import re

import dateutil.parser

from date_range.errors import InvalidInputError
import date_range.time_zone_utils as time_zone_utils


_NUMERIC_RE = re.compile(
    r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*$')
"""Regular expression for strings that are Unix timestamps."""

_RELATIVE_DAY_OFFSETS = {
    'today': 0,
    'midnight': 0,
    'tomorrow': 1,
    'yesterday': -1,
}


_logger = logging.getLogger(__name__)


def to_datetime(value, time_zone, keep_time_zone=False):

    """
    Normalizes a date value to an aware `datetime`.

    Parameters
    ----------
    value : datetime, date, int, float, or str
        the value to normalize.

    time_zone : tzinfo
        the time zone of the returned `datetime`. Values without time
        zone information are interpreted in this time zone.

    keep_time_zone : bool
        `True` if an aware `datetime` value should be returned as is
        rather than re-expressed in `time_zone`.

    Returns
    -------
    datetime
        the normalized value.

    Raises
    ------
    InvalidInputError
        if the value cannot be normalized.
    """


    if isinstance(value, DateTime):

        if keep_time_zone and value.tzinfo is not None:
            return value
        else:
            return time_zone_utils.convert(value, time_zone)

    elif isinstance(value, Date):
        return time_zone_utils.localize(
            DateTime.combine(value, Time()), time_zone)

    elif isinstance(value, Real) and not isinstance(value, bool):
        return _timestamp_to_datetime(value, time_zone)

    elif isinstance(value, str):

        if _NUMERIC_RE.match(value):
            return _timestamp_to_datetime(float(value), time_zone)
        else:
            return _parse_date_string(value, time_zone)

    else:
        raise InvalidInputError(
            f'Can not parse date {value!r}. A date must be a datetime, '
            f'a date, a numeric timestamp, or a date string, not a '
            f'{value.__class__.__name__}.')


def _timestamp_to_datetime(timestamp, time_zone):
    try:
        return DateTime.fromtimestamp(max(0, timestamp), time_zone)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidInputError(
            f'Timestamp {timestamp} is out of range.') from e


def _parse_date_string(s, time_zone):

    keyword = s.strip().lower()

    if keyword == 'now':
        return DateTime.now(time_zone)

    offset = _RELATIVE_DAY_OFFSETS.get(keyword)

    if offset is not None:
        today = DateTime.now(time_zone).date()
        return time_zone_utils.localize(
            DateTime.combine(today + TimeDelta(days=offset), Time()),
            time_zone)

    # Missing date fields default to today in the target time zone,
    # and missing time fields to midnight.
    default = DateTime.combine(DateTime.now(time_zone).date(), Time())

    try:
        dt = dateutil.parser.parse(s, default=default)
    except (ValueError, OverflowError) as e:
        raise InvalidInputError(f'Could not parse date string "{s}".') from e

    return time_zone_utils.convert(dt, time_zone)


def get_boundaries(start, end, time_zone, keep_time_zone=False):

    """
    Normalizes the start and end values given to a date range.

    If `start` is a non-string iterable of two or more values, the
    values are normalized, values that cannot be normalized are
    discarded, and the earliest and latest of the remaining values
    are returned. `end` is ignored in this case. An iterable with a
    single value is treated as that value.

    Otherwise `start` and `end` are normalized separately. An `end`
    of `None` is returned as `None`.

    The returned values are not ordered. Ordering is up to the caller.

    :Raises InvalidInputError:
        if a value cannot be normalized, if `start` is an empty
        iterable, or if none of the values of `start` can be
        normalized.
    """


    if _is_date_collection(start):

        values = list(start)

        if len(values) == 0:
            raise InvalidInputError(
                'Can not get date range boundaries from an empty '
                'collection of dates.')

        elif len(values) == 1:
            start = values[0]

        else:
            dates = _to_datetimes(values, time_zone, keep_time_zone)
            return min(dates), max(dates)

    if _is_date_collection(end):
        raise InvalidInputError(
            'The end date must be a single date, not a collection.')

    start = to_datetime(start, time_zone, keep_time_zone)

    if end is not None:
        end = to_datetime(end, time_zone, keep_time_zone)

    return start, end


def _is_date_collection(value):
    return isinstance(value, Iterable) and \
        not isinstance(value, (str, bytes))


def _to_datetimes(values, time_zone, keep_time_zone):

    dates = []

    for value in values:

        try:
            dates.append(to_datetime(value, time_zone, keep_time_zone))

        except InvalidInputError as e:
            _logger.debug(f'Discarding unparsable date {value!r}: {e}')

    if len(dates) == 0:
        raise InvalidInputError(
            f'Could not parse any of the dates {values!r}.')

    return dates

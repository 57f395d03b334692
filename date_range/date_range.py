"""Module containing class `DateRange`."""


from enum import IntEnum, IntFlag
import logging

from date_range.datetime_formatter import DateTimeFormatter
from date_range.errors import InvalidInputError
from date_range.settings import get_settings
import date_range.date_utils as date_utils
import date_range.interval_utils as interval_utils
import date_range.time_zone_utils as time_zone_utils


_logger = logging.getLogger(__name__)


class Exclude(IntFlag):

    """
    Date range boundary exclusion flags.

    By default the start and end dates of a date range are included
    in comparisons and periods. These flags exclude either or both of
    them. They can be combined with the `|` operator.
    """

    NONE = 0
    START_DATE = 0b0001
    END_DATE = 0b0010
    BOTH = START_DATE | END_DATE


class Comparison(IntEnum):

    """Result of comparing a date with a date range."""

    BEFORE = -1
    BETWEEN = 0
    AFTER = 1


EXCLUDE_START_DATE = Exclude.START_DATE
EXCLUDE_END_DATE = Exclude.END_DATE

BEFORE = Comparison.BEFORE
BETWEEN = Comparison.BETWEEN
AFTER = Comparison.AFTER

_EXCLUSION_MASK = int(Exclude.BOTH)


class DateRange:

    """
    Range of dates.

    A date range has a start date, an end date, and an interval. The
    start date is never later than the end date. Both dates belong to
    the range unless they are excluded with `Exclude` flags. The
    interval is the step between consecutive dates when the range is
    iterated over.

    Iterating over a date range yields the dates from the start date
    through the end date, inclusive, spaced by the interval. For
    example:

        >>> r = DateRange('2017-10-01', '2017-10-04')
        >>> r.to_list('%A')
        ['Sunday', 'Monday', 'Tuesday', 'Wednesday']
    """


    EXCLUDE_START_DATE = Exclude.START_DATE
    EXCLUDE_END_DATE = Exclude.END_DATE

    BEFORE = Comparison.BEFORE
    BETWEEN = Comparison.BETWEEN
    AFTER = Comparison.AFTER


    def __init__(self, start, end=None, time_zone=None, interval=None):

        """
        Initializes a date range.

        Parameters
        ----------
        start : datetime, date, int, float, str, or iterable
            the start date of the range.

            This can be any value described in the `date_utils` module,
            or a non-string iterable of such values. For an iterable of
            two or more values, the values that can be parsed determine
            the range: the earliest is the start date and the latest is
            the end date, and `end` is ignored.

        end : datetime, date, int, float, str, or None
            the end date of the range.

            If `None`, the end date is the start date plus the interval.
            If earlier than the start date, the two dates are swapped.

        time_zone : tzinfo, str, or None
            the time zone of the range.

            Dates without time zone information are interpreted in this
            time zone. If a time zone is specified, aware `datetime`
            arguments are also re-expressed in it. If `None`, the time
            zone is that of the `time_zone` setting (UTC unless
            configured otherwise) and aware `datetime` arguments keep
            their own time zones.

        interval : relativedelta, timedelta, str, or None
            the interval of the range, for example "P1D".

            If `None`, the interval is that of the `interval` setting
            (one day unless configured otherwise).

        Raises
        ------
        InvalidInputError
            if any argument cannot be interpreted, or if the interval
            is not positive.
        """


        keep_time_zone = time_zone is None
        self._time_zone = time_zone_utils.get_time_zone(time_zone)

        start_date, end_date = date_utils.get_boundaries(
            start, end, self._time_zone, keep_time_zone)

        self._interval = interval_utils.get_interval(interval)

        if end_date is None:
            end_date = interval_utils.add_interval(start_date, self._interval)

        if start_date > end_date:
            _logger.debug(
                f'Swapping date range start date {start_date.isoformat()} '
                f'and end date {end_date.isoformat()}.')
            start_date, end_date = end_date, start_date

        self._start_date = start_date
        self._end_date = end_date

        interval_utils.check_interval_advances(
            self._start_date, self._interval)


    @property
    def start_date(self):
        return self._start_date


    @property
    def end_date(self):
        return self._end_date


    @property
    def time_zone(self):
        return self._time_zone


    @property
    def interval(self):
        return self._interval


    @interval.setter
    def interval(self, interval):
        interval = interval_utils.get_interval(interval)
        interval_utils.check_interval_advances(self._start_date, interval)
        self._interval = interval


    def set_interval(self, interval):

        """
        Sets the interval of this date range.

        This is equivalent to assigning to the `interval` property,
        but returns this date range so calls can be chained.
        """

        self.interval = interval
        return self


    def diff(self):

        """
        Gets the time from the start date to the end date.

        Returns
        -------
        timedelta
            the nonnegative difference of the end and start dates.
            Its `days` attribute is the number of whole days in the
            range.
        """

        return self._end_date - self._start_date


    def compare(self, date, exclude=Exclude.NONE):

        """
        Compares a date with this date range.

        Parameters
        ----------
        date : datetime, date, int, float, or str
            the date to compare. Values without time zone information
            are interpreted in the time zone of this range.

        exclude : Exclude, int, or None
            flags indicating which boundaries of this range to exclude
            from the comparison.

        Returns
        -------
        Comparison
            `BEFORE` if the date precedes the range, `BETWEEN` if it
            is in the range, and `AFTER` if it follows the range. A
            date equal to an included boundary is `BETWEEN`. A date
            equal to an excluded start date is `BEFORE`, and one equal
            to an excluded end date is `AFTER`.

        Raises
        ------
        InvalidInputError
            if the date cannot be parsed or the exclusion flags are
            invalid.
        """


        exclude = get_exclude(exclude)

        date = date_utils.to_datetime(
            date, self._time_zone, keep_time_zone=True)

        if exclude & Exclude.START_DATE:
            after_start = self._start_date < date
        else:
            after_start = self._start_date <= date

        if exclude & Exclude.END_DATE:
            before_end = date < self._end_date
        else:
            before_end = date <= self._end_date

        if after_start and before_end:
            return Comparison.BETWEEN
        elif not after_start:
            return Comparison.BEFORE
        else:
            return Comparison.AFTER


    def get_date_period(self, interval=None, exclude=Exclude.NONE):

        """
        Gets an iterator over the dates of this range.

        The iterator yields the start date, the start date plus the
        interval, the start date plus twice the interval, and so on,
        through the end date. Each call returns a new iterator.

        Parameters
        ----------
        interval : relativedelta, timedelta, str, or None
            the interval between consecutive dates, or `None` for the
            interval of this range.

        exclude : Exclude, int, or None
            flags indicating which boundaries of this range to omit.

        Raises
        ------
        InvalidInputError
            if the interval cannot be parsed or is not positive, or if
            the exclusion flags are invalid.
        """


        if interval is None:
            interval = self._interval
        else:
            interval = interval_utils.get_interval(interval)

        interval_utils.check_interval_advances(self._start_date, interval)

        exclude = get_exclude(exclude)

        skip_start = bool(exclude & Exclude.START_DATE)
        include_end = not exclude & Exclude.END_DATE

        return self._generate_dates(interval, skip_start, include_end)


    def _generate_dates(self, interval, skip_start, include_end):

        # We add multiples of the interval to the start date rather
        # than repeatedly adding the interval to the previous date so
        # that, for example, a one-month interval starting on January
        # 31 yields February 28 and then March 31 rather than March 28.

        count = 1 if skip_start else 0

        while True:

            try:
                date = interval_utils.add_interval(
                    self._start_date, interval, count)
            except InvalidInputError:
                # past the last representable `datetime`, so past the
                # end date
                return

            if date > self._end_date or \
                    (date == self._end_date and not include_end):
                return

            yield date

            count += 1


    def __iter__(self):
        return self.get_date_period()


    def __contains__(self, date):
        return self.compare(date) == Comparison.BETWEEN


    def to_list(
            self, date_format=None, short=False, interval=None,
            exclude=Exclude.NONE):

        """
        Gets the dates of this range as a list.

        Parameters
        ----------
        date_format : str or None
            format for the dates, as accepted by `DateTimeFormatter`.
            If `None`, the list contains `datetime` objects. Otherwise
            it contains the formatted dates.

        short : bool
            `True` if the list should contain only the start and end
            dates. `interval` and `exclude` are ignored in this case.

        interval : relativedelta, timedelta, str, or None
            as for `get_date_period`.

        exclude : Exclude, int, or None
            as for `get_date_period`.

        Raises
        ------
        InvalidInputError
            if the date format is invalid, or for any reason that
            `get_date_period` would.
        """


        if short:
            dates = [self._start_date, self._end_date]
        else:
            dates = list(self.get_date_period(interval, exclude))

        if date_format is None:
            return dates

        formatter = DateTimeFormatter(date_format)

        return [formatter.format(d) for d in dates]


    def to_string(
            self, start_format=None, end_format=None, combine_format=None):

        """
        Formats this date range as a string.

        Parameters
        ----------
        start_format : str or None
            format for the start date, as accepted by
            `DateTimeFormatter`, or `None` for the format of the
            `date_format` setting ("%Y-%m-%d" unless configured
            otherwise).

        end_format : str or None
            format for the end date, or `None` for the start format.

        combine_format : str or None
            `%` format string with two `%s` conversions, for the
            formatted start and end dates in that order, or `None`
            for the format of the `combine_format` setting ("%s - %s"
            unless configured otherwise).

        Raises
        ------
        InvalidInputError
            if any of the formats is invalid.
        """


        settings = get_settings()

        if start_format is None:
            start_format = settings.get_required('date_format')

        if end_format is None:
            end_format = start_format

        if combine_format is None:
            combine_format = settings.get_required('combine_format')

        start = DateTimeFormatter(start_format).format(self._start_date)
        end = DateTimeFormatter(end_format).format(self._end_date)

        try:
            return combine_format % (start, end)
        except (TypeError, ValueError) as e:
            raise InvalidInputError(
                f'Combine format "{combine_format}" must contain exactly '
                f'two string conversions.') from e


    def __str__(self):
        return self.to_string()


    def __repr__(self):
        start = self._start_date.isoformat()
        end = self._end_date.isoformat()
        interval = interval_utils.format_interval(self._interval)
        return f'DateRange({start!r}, {end!r}, interval={interval!r})'


def get_exclude(exclude):

    """
    Gets boundary exclusion flags as an `Exclude`.

    `None` means no exclusions.

    :Raises InvalidInputError:
        if `exclude` is not an integer or has bits other than those
        of `Exclude.BOTH`.
    """

    if exclude is None:
        return Exclude.NONE

    if not isinstance(exclude, int) or isinstance(exclude, bool):
        raise InvalidInputError(
            f'Boundary exclusion flags must be an integer, not a '
            f'{exclude.__class__.__name__}.')

    if int(exclude) & ~_EXCLUSION_MASK:
        raise InvalidInputError(
            f'Bad boundary exclusion flags {int(exclude):#06b}.')

    return Exclude(exclude)

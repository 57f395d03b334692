"""Module containing class `Helper`."""


from date_range.date_range import Comparison, Exclude, get_exclude


_SATURDAY = 5
_SUNDAY = 6


class Helper:

    """
    Convenience methods for a date range.

    The methods of this class restate `DateRange.compare` and
    `DateRange.to_list` in terms that read naturally at call sites.
    Boundaries are included by default. The `exclude` argument of each
    comparison method takes the same flags as `DateRange.compare`.
    """


    @staticmethod
    def to_list(date_range, date_format=None, short=False):

        """
        Gets the dates of a date range as a list.

        See `DateRange.to_list`.
        """

        return date_range.to_list(date_format, short)


    @staticmethod
    def is_weekend(date_range):

        """
        Checks whether a date range is a weekend.

        Returns `True` if the start date of the range is a Saturday
        and the end date is the following Sunday, otherwise `False`.
        """

        if date_range.diff().days != 1:
            return False

        return date_range.start_date.weekday() == _SATURDAY and \
            date_range.end_date.weekday() == _SUNDAY


    def __init__(self, date_range):
        self._date_range = date_range


    @property
    def date_range(self):
        return self._date_range


    def as_list(self, date_format=None, short=False):
        return Helper.to_list(self._date_range, date_format, short)


    def contains(self, date, exclude=None):

        """Checks whether a date is in the date range."""

        result = self._date_range.compare(date, exclude)
        return result == Comparison.BETWEEN


    def is_before(self, date, exclude=None):

        """
        Checks whether the date range is before a date.

        The end date of the range is excluded from the comparison, so
        the range is before its own end date.
        """

        exclude = get_exclude(exclude) | Exclude.END_DATE
        return self._date_range.compare(date, exclude) == Comparison.AFTER


    def is_after(self, date, exclude=None):

        """
        Checks whether the date range is after a date.

        The start date of the range is excluded from the comparison, so
        the range is after its own start date.
        """

        exclude = get_exclude(exclude) | Exclude.START_DATE
        return self._date_range.compare(date, exclude) == Comparison.BEFORE


    def on_weekend(self):
        return Helper.is_weekend(self._date_range)

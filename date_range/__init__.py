"""Date ranges with interval-based iteration and boundary comparison."""


from date_range.date_range import (
    AFTER, BEFORE, BETWEEN, EXCLUDE_END_DATE, EXCLUDE_START_DATE,
    Comparison, DateRange, Exclude)
from date_range.errors import InvalidInputError
from date_range.helper import Helper
from date_range.version import __version__

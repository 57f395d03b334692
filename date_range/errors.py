"""Module containing class `InvalidInputError`."""


class InvalidInputError(ValueError):
    
    """
    Raised when a date, time zone, interval, format, or exclusion flag
    given to a date range cannot be interpreted.
    
    The message names the offending value. When the failure came from
    an underlying parser, that parser's exception is chained as the
    `__cause__` of this one.
    """

"""Module containing class `DateTimeFormatter`."""


import itertools
import re

from date_range.errors import InvalidInputError


_FRACTION_CODE_RE = re.compile('%([1-6])f')
"""Regular expression for modified fraction codes."""

_FRACTION_PLACEHOLDER = '<~!@#$^&*>'
"""
Placeholder for modified fraction codes in `datetime.strftime` format string.

We replace modified fraction codes with this placeholder to make their
locations easy to find in the output of `datetime.strftime`.
"""

_DIRECTIVE_RE = re.compile(
    r'%(?:[1-6]f|(?P<flag>[-#]?)(?P<code>.?))', re.DOTALL)
"""
Regular expression for the directives of a format string segment
that contains no double percents.
"""

_STRFTIME_CODES = frozenset('aAbBcCdDeFfgGhHIjklmMnpPrRsStTuUVwWxXyYzZ')
"""
`datetime.strftime` format codes accepted in format strings.

These include the 1989 C standard codes, the codes Python adds (for
example "f"), and the widely supported POSIX and GNU extensions (for
example "e" and "F").
"""


class DateTimeFormatter:

    """Formats `datetime` objects according to a format string."""


    @staticmethod
    def check_format_string(format_string):

        """
        Checks that a format string contains only supported format codes.

        :Raises InvalidInputError:
            if the format string is not a string or contains an
            unsupported or incomplete format code.
        """


        if not isinstance(format_string, str):
            raise InvalidInputError(
                f'Date format must be a string, not a '
                f'{format_string.__class__.__name__}.')

        if '\0' in format_string:
            raise InvalidInputError(
                'Date format must not contain null characters.')

        # Split format string at double percents. This yields the
        # segments of the format string we need to search for format
        # codes. It's important to get rid of the double percents
        # so they don't interfere with the search. Consider the format
        # string "%%Q", for example, which does not contain the
        # unsupported format code "%Q" but rather the string "%Q".
        for segment in format_string.split('%%'):

            for m in _DIRECTIVE_RE.finditer(segment):

                code = m.group('code')

                if code is None:
                    # modified fraction code
                    continue

                elif code == '':
                    raise InvalidInputError(
                        f'Date format "{format_string}" ends with an '
                        f'incomplete format code.')

                elif code not in _STRFTIME_CODES:
                    raise InvalidInputError(
                        f'Date format "{format_string}" contains '
                        f'unsupported format code "{m.group(0)}".')


    def __init__(self, format_string):

        """
        Initializes a `datetime` formatter for the specified format string.

        Parameters
        ----------
        format_string : str
            the format according to which to format `datetime` objects.

            The format string can be any format string that one might
            pass to the `datetime.strftime` method, but one can also
            use the additional format code:

                %<n>f - n-digit fractional second, with 1 <= n <= 6

            As with `datetime.strftime`, during formatting each format
            code is replaced with the appropriate string for the
            `datetime` being formatted. Note that no rounding occurs
            during formatting. For example, formatting the `datetime`
            2020-01-01 12:34:56.789 according to the format code
            "%1f" yields the string "7".

        Raises
        ------
        InvalidInputError
            if the format string contains an unsupported format code.
        """


        self.check_format_string(format_string)

        self._format_string = format_string

        self._strftime_format_string, self._digit_counts = \
            self._parse_format_string(format_string)


    def _parse_format_string(self, format_string):

        # Split format string at double percents. This yields the
        # segments of the format string we need to search for modified
        # fraction codes. It's important to get rid of the double percents
        # so they don't interfere with the search for modified fraction
        # codes. Consider the format string "%%3f", for example, which
        # does not indicate a fractional second but rather the string "%3f".
        format_segments = format_string.split('%%')

        # Replace modified fraction codes with placeholders, retaining
        # digit counts separately.
        pairs = [self._parse_format_segment(s) for s in format_segments]

        # Zip pairs into `strftime` format segments and digit counts.
        strftime_format_segments, digit_count_lists = zip(*pairs)

        # Join `strftime` format segments with double percents.
        strftime_format_string = '%%'.join(strftime_format_segments)

        # Flatten digit count lists.
        digit_counts = list(itertools.chain.from_iterable(digit_count_lists))

        return strftime_format_string, digit_counts


    def _parse_format_segment(self, format_segment):

        # Split format segment at modified fraction codes.
        parts = _FRACTION_CODE_RE.split(format_segment)

        # Deinterleave format subsegments and digit counts.
        format_subsegments = parts[::2]
        digit_counts = [int(d) for d in parts[1::2]]

        # Rejoin format subsegments with fraction placeholder.
        strftime_format_segment = \
            _FRACTION_PLACEHOLDER.join(format_subsegments)

        return strftime_format_segment, digit_counts


    @property
    def format_string(self):
        return self._format_string


    def format(self, dt):

        """
        Formats the specified `datetime` object.

        Parameters
        ----------
        dt : datetime
            the `datetime` to be formatted.

        Returns
        -------
        str
            the formatted `datetime`.
        """


        # Format with `datetime.strftime`.
        try:
            formatted_datetime = dt.strftime(self._strftime_format_string)
        except ValueError as e:
            raise InvalidInputError(
                f'Could not format {dt.isoformat()} with date format '
                f'"{self._format_string}".') from e

        # Replace placeholders with fractional seconds.
        return self._add_fractional_seconds(
            formatted_datetime, self._digit_counts, dt)


    def _add_fractional_seconds(self, formatted_datetime, digit_counts, dt):

        # Split formatted `datetime` at fraction placeholder.
        other_segments = formatted_datetime.split(_FRACTION_PLACEHOLDER)

        # Create fraction segments to substitute for placeholders.
        microsecond = f'{dt.microsecond:06d}'
        fraction_segments = [microsecond[:c] for c in digit_counts]

        # Append empty string so `fraction_segments` has same length
        # as `other_segments`.
        fraction_segments.append('')

        # Interleave two types of segments.
        pairs = zip(other_segments, fraction_segments)
        segments = itertools.chain.from_iterable(pairs)

        return ''.join(segments)

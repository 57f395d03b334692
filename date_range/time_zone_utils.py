"""Utility functions pertaining to time zones."""


from datetime import tzinfo as TzInfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from date_range.errors import InvalidInputError
from date_range.settings import get_settings


def get_time_zone(time_zone=None):

    """
    Gets a time zone.

    The `time_zone` argument can be:

    * `None`, implying the time zone of the `time_zone` setting
      (UTC unless configured otherwise).

    * a string acceptable as an argument to the `zoneinfo.ZoneInfo`
      initializer, for example 'US/Eastern' or 'America/Costa_Rica'.

    * a `datetime.tzinfo` object, for example a `zoneinfo.ZoneInfo`
      or a `pytz` time zone, which is returned as is.

    :Raises InvalidInputError:
        if an unrecognized time zone is specified.
    """


    if time_zone is None:
        time_zone = get_settings().get_required('time_zone')

    if isinstance(time_zone, TzInfo):
        return time_zone

    if not isinstance(time_zone, str):
        raise InvalidInputError(
            f'Time zone must be a time zone name or a tzinfo object, '
            f'not a {time_zone.__class__.__name__}.')

    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidInputError(
            f'Could not get info for time zone "{time_zone}".') from e


def get_time_zone_name(time_zone):

    # `ZoneInfo` objects have a `key`, `pytz` time zones have a
    # `zone`, and other `tzinfo` objects have at least `tzname`.
    name = getattr(time_zone, 'key', None) or \
        getattr(time_zone, 'zone', None)

    if name is None:
        name = time_zone.tzname(None)

    return name


def localize(dt, time_zone):

    """
    Attaches a time zone to a naive `datetime`, keeping its wall
    clock time.
    """

    # `pytz` time zones must be attached with their `localize` method
    # to get the right UTC offset. Other time zones compute their
    # offsets on demand and can simply be attached.
    if hasattr(time_zone, 'localize'):
        return time_zone.localize(dt)
    else:
        return dt.replace(tzinfo=time_zone)


def convert(dt, time_zone):

    """
    Re-expresses a `datetime` in another time zone.

    An aware `datetime` keeps its instant and changes its time zone.
    A naive `datetime` is localized to the time zone instead.
    """

    if dt.tzinfo is None:
        return localize(dt, time_zone)
    else:
        return dt.astimezone(time_zone)

from datetime import (
    date as Date,
    datetime as DateTime,
    time as Time,
    timedelta as TimeDelta)
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta as RelativeDelta
import pytz

from date_range.date_range import (
    AFTER, BEFORE, BETWEEN, EXCLUDE_END_DATE, EXCLUDE_START_DATE,
    Comparison, DateRange, Exclude)
from date_range.errors import InvalidInputError
from date_range.tests.test_case import TestCase


_CHICAGO = ZoneInfo('America/Chicago')
_UTC = ZoneInfo('UTC')

_START_STR = '2017-10-01 12:34:56 PM'
_END_STR = '2017-10-08 4:32:10 AM'

_START = DateTime(2017, 10, 1, 12, 34, 56, tzinfo=_CHICAGO)
_END = DateTime(2017, 10, 8, 4, 32, 10, tzinfo=_CHICAGO)


def _utc(*args):
    return DateTime(*args, tzinfo=_UTC)


def _chicago(*args):
    return DateTime(*args, tzinfo=_CHICAGO)


class DateRangeTests(TestCase):


    def test_init(self):

        one_day_later = _START + TimeDelta(days=1)

        cases = [

            # two date strings, default time zone
            (
                (_START_STR, _END_STR, None, None),
                _utc(2017, 10, 1, 12, 34, 56), _utc(2017, 10, 8, 4, 32, 10)
            ),

            # two datetimes
            ((_START, _END, _CHICAGO, None), _START, _END),

            # two timestamps, one of them a string
            (
                (
                    int(_START.timestamp()), str(int(_END.timestamp())),
                    _CHICAGO, None
                ),
                _START, _END
            ),

            # date string and datetime
            ((_START_STR, _END, _CHICAGO, None), _START, _END),

            # no end date
            ((_START_STR, None, _CHICAGO, 'P1D'), _START, one_day_later),

            # dates out of order
            ((_END, _START, _CHICAGO, None), _START, _END),

            # list of strings with more than two dates
            (
                ([_START_STR, '2017-10-04', _END_STR], None,
                 'America/Chicago', None),
                _START, _END
            ),

            # list of datetimes with more than two dates
            (
                ([_START, one_day_later, _END], None, _CHICAGO, None),
                _START, _END
            ),

            # time zone as string
            ((_START, _END, 'America/Chicago', None), _START, _END),

            # interval as string
            ((_START, _END, _CHICAGO, 'P2Y4DT6H8M'), _START, _END),

            # interval as relativedelta
            (
                (_START, _END, _CHICAGO, RelativeDelta(years=2, days=4)),
                _START, _END
            ),

            # interval as timedelta
            ((_START, _END, _CHICAGO, TimeDelta(hours=6)), _START, _END),

            # dates
            (
                (Date(2017, 10, 1), Date(2017, 10, 8), None, None),
                _utc(2017, 10, 1), _utc(2017, 10, 8)
            ),

        ]

        for args, expected_start, expected_end in cases:
            r = DateRange(*args)
            self.assert_same_datetime(r.start_date, expected_start)
            self.assert_same_datetime(r.end_date, expected_end)


    def test_init_with_date_collections(self):

        expected_start = _utc(2017, 10, 1)
        expected_end = _utc(2017, 10, 4)

        cases = [

            # tuple with unparsable items, one of them a timestamp
            ('2017-10-03', 'nonsense', '2017-10-01', 1507075200),

            # set
            {'2017-10-04', '2017-10-02', '2017-10-01'},

            # generator
            (s for s in ('2017-10-04', '2017-10-01')),

        ]

        for dates in cases:
            r = DateRange(dates, '2020-01-01')
            self.assert_same_datetime(r.start_date, expected_start)
            self.assert_same_datetime(r.end_date, expected_end)


    def test_init_with_single_item_list(self):
        r = DateRange(['2017-10-01'], '2017-10-05')
        self.assert_same_datetime(r.start_date, _utc(2017, 10, 1))
        self.assert_same_datetime(r.end_date, _utc(2017, 10, 5))


    def test_init_with_negative_timestamp(self):
        r = DateRange(-100, 0)
        self.assert_same_datetime(r.start_date, _utc(1970, 1, 1))
        self.assert_same_datetime(r.end_date, _utc(1970, 1, 1))


    def test_init_order_invariance(self):
        a = DateRange('2017-10-01', '2017-10-08')
        b = DateRange('2017-10-08', '2017-10-01')
        self.assertEqual(a.start_date, b.start_date)
        self.assertEqual(a.end_date, b.end_date)
        self.assertLessEqual(b.start_date, b.end_date)


    def test_init_time_zone_conversion(self):

        start = DateTime(2017, 10, 1, 17, 30, 45, tzinfo=ZoneInfo(
            'Antarctica/Casey'))
        end = DateTime(2017, 10, 8, 1, 11, 22, tzinfo=ZoneInfo(
            'Arctic/Longyearbyen'))

        for time_zone in ('America/Chicago', _CHICAGO):

            r = DateRange(start, end, time_zone)

            for expected, actual in ((start, r.start_date), (end, r.end_date)):

                # same time zone
                self.assertEqual(actual.tzinfo.key, 'America/Chicago')

                # same instant
                self.assertEqual(actual, expected)

            self.assertEqual(r.time_zone.key, 'America/Chicago')


    def test_init_keeps_time_zones_of_datetimes(self):

        # Without a time zone argument, aware datetimes are used as is.
        r = DateRange(_START, _END)
        self.assertIs(r.start_date, _START)
        self.assertIs(r.end_date, _END)

        # Other dates are interpreted in UTC.
        r = DateRange(_START, '2017-10-08')
        self.assertIs(r.start_date, _START)
        self.assert_same_datetime(r.end_date, _utc(2017, 10, 8))


    def test_init_renormalization_is_idempotent(self):

        date_format = '%Y-%m-%d %H:%M:%S %Z%z'

        r = DateRange(_START, _END, _CHICAGO)

        expected = \
            f'{_START.strftime(date_format)} - {_END.strftime(date_format)}'
        self.assertEqual(r.to_string(date_format), expected)


    def test_init_with_pytz_time_zone(self):

        time_zone = pytz.timezone('America/Chicago')

        r = DateRange('2017-10-01', '2017-10-08', time_zone)

        self.assertEqual(r.start_date, time_zone.localize(
            DateTime(2017, 10, 1)))
        self.assertEqual(r.start_date.utcoffset(), TimeDelta(hours=-5))


    def test_default_arguments(self):

        today = DateTime.combine(
            DateTime.now(_CHICAGO).date(), Time(), tzinfo=_CHICAGO)
        tomorrow = DateTime.combine(
            today.date() + TimeDelta(days=1), Time(), tzinfo=_CHICAGO)

        # string start date, no end date
        r = DateRange('today', None, _CHICAGO)
        self.assert_same_datetime(r.start_date, today)
        self.assert_same_datetime(r.end_date, tomorrow)

        # datetime start date, no end date
        r = DateRange(today, None, _CHICAGO)
        self.assert_same_datetime(r.start_date, today)
        self.assert_same_datetime(r.end_date, tomorrow)

        # default time zone and interval
        r = DateRange('2017-10-01')
        self.assertEqual(r.time_zone.key, 'UTC')
        self.assertEqual(r.interval, RelativeDelta(days=1))
        self.assert_same_datetime(r.end_date, _utc(2017, 10, 2))


    def test_init_errors(self):

        bad_dates = [
            '⛄',
            'not-a-date',
            [],
            ['These', 'are', 'not', 'valid', 'date', 'strings'],
            None,
            True,
            object(),
        ]

        for date in bad_dates:

            # as start date
            self.assert_raises(InvalidInputError, DateRange, date)

            # as end date
            if date is not None:
                self.assert_raises(
                    InvalidInputError, DateRange, '2017-10-01', date)

        # end date collection
        self.assert_raises(
            InvalidInputError, DateRange, '2017-10-01',
            ['2017-10-02', '2017-10-03'])

        # bad time zones
        for time_zone in ('🍦', 'not-a-timezone', 5):
            self.assert_raises(
                InvalidInputError, DateRange, '2017-10-01', '2017-10-02',
                time_zone)

        # bad intervals
        for interval in ('🎈', 'P', 'P1.5D', 5, 'P0D', TimeDelta(days=-1)):
            self.assert_raises(
                InvalidInputError, DateRange, '2017-10-01', None, None,
                interval)


    def test_init_error_chaining(self):
        e = self.assert_raises(InvalidInputError, DateRange, '⛄')
        self.assertIsInstance(e.__cause__, ValueError)


    def test_interval(self):

        cases = [
            ('P7D', RelativeDelta(days=7)),
            (RelativeDelta(days=2), RelativeDelta(days=2)),
            (TimeDelta(days=3), TimeDelta(days=3)),
        ]

        start = _chicago(2017, 10, 1, 1, 30)
        end = _chicago(2017, 10, 8, 17, 45, 10)

        for interval, expected in cases:

            # via initializer
            r = DateRange(start, end, _CHICAGO, interval)
            self.assertEqual(r.interval, expected)

            # via property setter
            r = DateRange(start, end, _CHICAGO)
            self.assertEqual(r.interval, RelativeDelta(days=1))
            r.interval = interval
            self.assertEqual(r.interval, expected)

            # via `set_interval`
            r = DateRange(start, end, _CHICAGO)
            self.assertIs(r.set_interval(interval), r)
            self.assertEqual(r.interval, expected)


    def test_set_interval_errors(self):

        r = DateRange('2017-10-01', '2017-10-08')

        for interval in ('🎈', 'PT', 'P0D', TimeDelta(0), 1.5):
            self.assert_raises(InvalidInputError, r.set_interval, interval)

        # Interval is unchanged.
        self.assertEqual(r.interval, RelativeDelta(days=1))


    def test_diff(self):

        r = DateRange('2017-10-13', '2017-10-16')
        self.assertEqual(r.diff(), TimeDelta(days=3))
        self.assertEqual(r.diff().days, 3)

        r = DateRange('2017-10-16 12:00', '2017-10-13')
        self.assertEqual(r.diff(), TimeDelta(days=3, hours=12))


    def test_compare(self):

        r = DateRange('2017-10-01', '2017-10-08')

        cases = [

            # strings
            ('2017-09-30', 0, BEFORE),
            ('2017-10-01', 0, BETWEEN),
            ('2017-10-05', 0, BETWEEN),
            ('2017-10-08', 0, BETWEEN),
            ('2017-10-08 00:00:01', 0, AFTER),
            ('2017-10-09', 0, AFTER),

            # boundary exclusions
            ('2017-10-01', EXCLUDE_START_DATE, BEFORE),
            ('2017-10-08', EXCLUDE_START_DATE, BETWEEN),
            ('2017-10-08', EXCLUDE_END_DATE, AFTER),
            ('2017-10-01', EXCLUDE_END_DATE, BETWEEN),
            ('2017-10-01', Exclude.BOTH, BEFORE),
            ('2017-10-08', Exclude.BOTH, AFTER),
            ('2017-10-05', Exclude.BOTH, BETWEEN),
            ('2017-10-01', EXCLUDE_START_DATE | EXCLUDE_END_DATE, BEFORE),
            ('2017-10-01', None, BETWEEN),

            # other date types
            (_utc(2017, 10, 1), 0, BETWEEN),
            (_chicago(2017, 9, 30, 19), 0, BETWEEN),
            (_chicago(2017, 9, 30, 18, 59), 0, BEFORE),
            (Date(2017, 10, 3), 0, BETWEEN),
            (1506816000, 0, BETWEEN),
            ('1506815999', 0, BEFORE),

        ]

        for date, exclude, expected in cases:
            actual = r.compare(date, exclude)
            self.assertIsInstance(actual, Comparison)
            self.assertEqual(actual, expected)


    def test_compare_constants(self):
        self.assertEqual(BEFORE, -1)
        self.assertEqual(BETWEEN, 0)
        self.assertEqual(AFTER, 1)
        self.assertEqual(EXCLUDE_START_DATE, 0b0001)
        self.assertEqual(EXCLUDE_END_DATE, 0b0010)
        self.assertEqual(DateRange.BETWEEN, BETWEEN)
        self.assertEqual(DateRange.EXCLUDE_END_DATE, EXCLUDE_END_DATE)


    def test_compare_with_time_zones(self):

        previous_day = DateTime.combine(
            DateTime.now(_CHICAGO).date() - TimeDelta(days=1), Time(),
            tzinfo=_CHICAGO)
        start = previous_day + TimeDelta(days=1)
        end = start + TimeDelta(days=1)

        r = DateRange(start, end)

        self.assertEqual(r.compare(previous_day.strftime('%Y-%m-%d')), BEFORE)
        self.assertEqual(r.compare(previous_day), BEFORE)
        self.assertEqual(r.compare(start), BETWEEN)
        self.assertEqual(r.compare(end), BETWEEN)
        self.assertEqual(r.compare(start, EXCLUDE_START_DATE), BEFORE)
        self.assertEqual(r.compare(end, EXCLUDE_END_DATE), AFTER)

        # Strings are interpreted in the time zone of the range.
        r = DateRange('2017-10-01', '2017-10-08', _CHICAGO)
        self.assertEqual(r.compare('2017-10-01 00:00:00'), BETWEEN)
        self.assertEqual(r.compare('2017-10-01T04:59:59Z'), BEFORE)


    def test_compare_errors(self):

        r = DateRange('2017-10-01', '2017-10-08')

        self.assert_raises(InvalidInputError, r.compare, '⛄')
        self.assert_raises(InvalidInputError, r.compare, None)

        for exclude in (4, 0b0111, -1, 'start', 1.0):
            self.assert_raises(
                InvalidInputError, r.compare, '2017-10-01', exclude)


    def test_contains(self):
        r = DateRange('2017-10-01', '2017-10-08')
        self.assertIn('2017-10-01', r)
        self.assertIn(Date(2017, 10, 8), r)
        self.assertNotIn('2017-10-09', r)


    def test_get_date_period(self):

        r = DateRange('2017-10-01', '2017-10-03')

        d1 = _utc(2017, 10, 1)
        d2 = _utc(2017, 10, 2)
        d3 = _utc(2017, 10, 3)

        cases = [
            (None, 0, [d1, d2, d3]),
            (None, EXCLUDE_START_DATE, [d2, d3]),
            (None, EXCLUDE_END_DATE, [d1, d2]),
            (None, EXCLUDE_START_DATE | EXCLUDE_END_DATE, [d2]),
            ('P2D', 0, [d1, d3]),
            ('P2D', EXCLUDE_END_DATE, [d1]),
            ('P3D', 0, [d1]),
            ('P3D', EXCLUDE_START_DATE, []),
            (TimeDelta(hours=12), EXCLUDE_END_DATE, [
                d1, d1 + TimeDelta(hours=12), d2, d2 + TimeDelta(hours=12)]),
        ]

        for interval, exclude, expected in cases:
            dates = r.get_date_period(interval, exclude)
            self.assertEqual(list(dates), expected)


    def test_get_date_period_is_restartable(self):

        r = DateRange('2017-10-01', '2017-10-04')

        period = r.get_date_period()
        self.assertEqual(next(period), _utc(2017, 10, 1))

        # A new period starts over.
        self.assertEqual(len(list(r.get_date_period())), 4)

        # Iterating over the range itself also starts over each time.
        self.assertEqual(list(r), list(r))
        self.assertEqual(len(list(r)), 4)


    def test_get_date_period_with_times(self):

        r = DateRange('2017-10-01 12:00', '2017-10-04 11:00')

        expected = [_utc(2017, 10, d, 12) for d in (1, 2, 3)]
        self.assertEqual(list(r), expected)


    def test_get_date_period_with_month_interval(self):

        r = DateRange('2017-01-31', '2017-05-31', interval='P1M')

        expected = [
            _utc(2017, 1, 31),
            _utc(2017, 2, 28),
            _utc(2017, 3, 31),
            _utc(2017, 4, 30),
            _utc(2017, 5, 31),
        ]

        self.assertEqual(list(r), expected)


    def test_get_date_period_across_dst_transition(self):

        # Daylight saving time ended in Chicago at 2 AM on 2017-11-05.
        # Dates stay at midnight local time across the transition.

        for time_zone in (_CHICAGO, pytz.timezone('America/Chicago')):

            r = DateRange('2017-11-04', '2017-11-06', time_zone)
            dates = list(r)

            self.assertEqual(len(dates), 3)
            self.assertEqual([d.hour for d in dates], [0, 0, 0])
            self.assertEqual(
                [d.utcoffset() for d in dates],
                [TimeDelta(hours=h) for h in (-5, -5, -6)])


    def test_get_date_period_at_end_of_calendar(self):

        r = DateRange('9999-12-30', '9999-12-31')
        self.assertEqual(
            list(r), [_utc(9999, 12, 30), _utc(9999, 12, 31)])

        r = DateRange('9999-12-31', '9999-12-31 23:00', interval='PT10H')
        self.assertEqual(
            list(r),
            [_utc(9999, 12, 31, h) for h in (0, 10, 20)])

        r = DateRange('9999-01-01', '9999-12-31', interval='P1M')
        self.assertEqual(len(list(r)), 12)


    def test_out_of_range_dates(self):

        # default end date past the end of the calendar
        e = self.assert_raises(InvalidInputError, DateRange, '9999-12-31')
        self.assertIsInstance(e.__cause__, (OverflowError, ValueError))

        # intervals too large for any date
        for interval in ('P99999Y', TimeDelta(days=999999999)):

            self.assert_raises(
                InvalidInputError, DateRange, '2017-10-01', '2017-10-08',
                None, interval)

            r = DateRange('2017-10-01', '2017-10-08')
            self.assert_raises(InvalidInputError, r.set_interval, interval)
            self.assert_raises(
                InvalidInputError, r.get_date_period, interval)


    def test_get_date_period_errors(self):

        r = DateRange('2017-10-01', '2017-10-03')

        # Errors are raised by `get_date_period` itself rather than
        # when the returned iterator is first advanced.
        self.assert_raises(InvalidInputError, r.get_date_period, 'P0D')
        self.assert_raises(InvalidInputError, r.get_date_period, '🎈')
        self.assert_raises(
            InvalidInputError, r.get_date_period, TimeDelta(days=-1))
        self.assert_raises(InvalidInputError, r.get_date_period, None, 8)


    def test_to_list(self):

        r = DateRange('October 1 2017', 'October 4 2017', _CHICAGO)

        self.assertEqual(
            r.to_list('%A'), ['Sunday', 'Monday', 'Tuesday', 'Wednesday'])

        expected = [_chicago(2017, 10, d) for d in range(1, 5)]
        self.assertEqual(r.to_list(), expected)

        self.assertEqual(
            r.to_list('%m-%d-%Y', True), ['10-01-2017', '10-04-2017'])

        self.assertEqual(
            r.to_list('%d', interval='P2D', exclude=EXCLUDE_START_DATE),
            ['03'])

        # Short lists ignore the interval and exclusions.
        self.assertEqual(
            r.to_list(short=True, interval='P2D', exclude=Exclude.BOTH),
            [r.start_date, r.end_date])

        # Iteration yields the same dates.
        self.assertEqual([d for d in r], expected)


    def test_to_list_in_utc(self):
        r = DateRange('2017-10-01', '2017-10-04')
        self.assertEqual(
            r.to_list('%A'), ['Sunday', 'Monday', 'Tuesday', 'Wednesday'])


    def test_to_list_with_fractional_seconds(self):
        r = DateRange('2017-10-01 12:34:56.789', None, None, 'PT0.5S')
        self.assertEqual(
            r.to_list('%H:%M:%S.%3f'), ['12:34:56.789', '12:34:57.289'])


    def test_to_list_errors(self):

        r = DateRange('2017-10-01', '2017-10-04')

        for date_format in ('%Q', '%', 'Y-m-d %', 5):
            self.assert_raises(InvalidInputError, r.to_list, date_format)


    def test_to_string(self):

        r = DateRange('2017-10-01', '2017-10-31')

        self.assertEqual(
            r.to_string('%m-%d-%Y', '%Y.%m.%d', '%s to %s'),
            '10-01-2017 to 2017.10.31')

        self.assertEqual(str(r), '2017-10-01 - 2017-10-31')

        self.assertEqual(r.to_string('%b %d'), 'Oct 01 - Oct 31')

        self.assertEqual(
            r.to_string('%Y-%m-%d %H:%M:%S', None, '["%s", "%s"]'),
            '["2017-10-01 00:00:00", "2017-10-31 00:00:00"]')

        self.assertEqual(
            r.to_string(combine_format='%s %% %s'),
            '2017-10-01 % 2017-10-31')


    def test_to_string_errors(self):

        r = DateRange('2017-10-01', '2017-10-31')

        for combine_format in ('%s', '%s %s %s', '%d to %d', '%(start)s'):
            self.assert_raises(
                InvalidInputError, r.to_string, None, None, combine_format)

        self.assert_raises(InvalidInputError, r.to_string, '%Q')
        self.assert_raises(InvalidInputError, r.to_string, '%Y', '%Q')


    def test_repr(self):
        r = DateRange('2017-10-01', '2017-10-04', interval='PT12H')
        self.assertEqual(
            repr(r),
            "DateRange('2017-10-01T00:00:00+00:00', "
            "'2017-10-04T00:00:00+00:00', interval='PT12H')")

"""
Tests für die Datums-Helfer.

Testet:
- Überschneidung geschlossener Zeiträume (inklusive Randtage)
- Kürzen auf den Kalendertag
- Wiederholungs-Hinweis (nur lesend)
"""
import pytest
from datetime import date, datetime

from app.utils.dates import overlaps, truncate_to_day, is_active_on


D = date(2030, 3, 10)


class TestOverlaps:

    @pytest.mark.parametrize("a, b", [
        ((date(2030, 3, 10), date(2030, 3, 12)), (date(2030, 3, 12), date(2030, 3, 14))),
        ((date(2030, 3, 10), date(2030, 3, 12)), (date(2030, 3, 13), date(2030, 3, 14))),
        ((date(2030, 3, 1), date(2030, 3, 31)), (date(2030, 3, 5), date(2030, 3, 6))),
        ((date(2030, 3, 10), date(2030, 3, 10)), (date(2030, 3, 9), date(2030, 3, 9))),
    ])
    def test_symmetric(self, a, b):
        assert overlaps(a, b) == overlaps(b, a)

    def test_reflexive(self):
        assert overlaps((D, D), (D, D))
        assert overlaps((D, date(2030, 3, 20)), (D, date(2030, 3, 20)))

    def test_shared_boundary_day_overlaps(self):
        """03-12 liegt in beiden Zeiträumen"""
        assert overlaps(
            (date(2030, 3, 10), date(2030, 3, 12)),
            (date(2030, 3, 12), date(2030, 3, 14))
        )

    def test_adjacent_days_do_not_overlap(self):
        assert not overlaps(
            (date(2030, 3, 10), date(2030, 3, 12)),
            (date(2030, 3, 13), date(2030, 3, 14))
        )

    def test_contained_interval_overlaps(self):
        assert overlaps(
            (date(2030, 3, 1), date(2030, 3, 31)),
            (date(2030, 3, 5), date(2030, 3, 6))
        )


class TestTruncateToDay:

    def test_datetime_loses_time(self):
        assert truncate_to_day(datetime(2030, 3, 10, 17, 45)) == D

    def test_date_unchanged(self):
        assert truncate_to_day(D) == D

    def test_iso_string(self):
        assert truncate_to_day("2030-03-10") == D
        assert truncate_to_day("2030-03-10T23:59:00") == D


class TestIsActiveOn:

    def test_inside_range(self):
        assert is_active_on(D, date(2030, 3, 12), None, date(2030, 3, 11))

    def test_outside_range_without_repeat(self):
        assert not is_active_on(D, date(2030, 3, 12), None, date(2030, 3, 17))

    def test_weekly_repeat(self):
        """Drei Tage, wöchentlich wiederholt: dieselben drei Tage der Folgewoche sind aktiv"""
        start, end = D, date(2030, 3, 12)
        assert is_active_on(start, end, 7, date(2030, 3, 17))
        assert is_active_on(start, end, 7, date(2030, 3, 19))
        assert not is_active_on(start, end, 7, date(2030, 3, 20))

    def test_before_start_never_active(self):
        assert not is_active_on(D, date(2030, 3, 12), 7, date(2030, 3, 3))

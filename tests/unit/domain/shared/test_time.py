"""Unit tests for the domain clock helpers."""

from datetime import datetime, timedelta, timezone

from ecobazaar.domain.shared.time import as_utc, utc_now


def test_utc_now_is_aware():
    assert utc_now().tzinfo is timezone.utc


def test_as_utc_marks_naive_datetime_as_utc():
    naive = datetime(2024, 5, 1, 12, 30)

    result = as_utc(naive)

    assert result.tzinfo is timezone.utc
    assert result.replace(tzinfo=None) == naive


def test_as_utc_leaves_aware_datetime_alone():
    plus_two = timezone(timedelta(hours=2))
    aware = datetime(2024, 5, 1, 12, 30, tzinfo=plus_two)

    assert as_utc(aware) is aware

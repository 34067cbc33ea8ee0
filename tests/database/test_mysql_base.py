from datetime import date, datetime, time, timedelta

import pytest

from src.masjid_rota.masjid_rota.database.mysql_base import normalize_mysql_date, normalize_mysql_time, placeholders


@pytest.mark.parametrize(
    "raw, expected",
    [
        (time(9, 15), time(9, 15)),
        (timedelta(hours=9, minutes=15, seconds=30), time(9, 15, 30)),
        ("09:15", time(9, 15)),
        ("09:15:30", time(9, 15, 30)),
        (None, None),
    ],
)
def test_normalize_mysql_time(raw, expected):
    assert normalize_mysql_time(raw) == expected


def test_normalize_mysql_time_rejects_other_types():
    with pytest.raises(TypeError):
        normalize_mysql_time(915)


def test_normalize_mysql_date():
    assert normalize_mysql_date(datetime(2026, 6, 1, 9, 0)) == date(2026, 6, 1)
    assert normalize_mysql_date("2026-06-01") == date(2026, 6, 1)


def test_placeholders():
    assert placeholders(3) == "%s,%s,%s"

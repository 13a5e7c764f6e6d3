"""Shared test fixtures for all test modules."""

from datetime import datetime, timedelta, timezone

import pytest

CEST = timezone(timedelta(hours=2))


@pytest.fixture
def cest_date_time() -> datetime:
    """Provide the date stamp 2017-09-07T09:00:12.795+02:00."""
    return datetime(2017, 9, 7, 9, 0, 12, 795000, tzinfo=CEST)


@pytest.fixture
def utc_date_time():
    """Factory fixture for UTC date stamps.

    Usage:
        def test_something(utc_date_time):
            dt = utc_date_time(2021, 1, 1, second=30)
    """

    def _date_time(
        year: int = 2021,
        month: int = 1,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> datetime:
        return datetime(
            year, month, day, hour, minute, second, microsecond, tzinfo=timezone.utc
        )

    return _date_time


@pytest.fixture
def mixed_gc_log_lines() -> list[str]:
    """GC log lines in both prefix dialects, plus lines without a prefix."""
    return [
        "OpenJDK 64-Bit Server VM (25.292-b10) for linux-amd64 JRE\n",
        "2017-09-07T09:00:12.795+0200: 0.716: [GC (Allocation Failure) "
        "[PSYoungGen: 65536K->10720K(76288K)] 65536K->10728K(251392K), "
        "0.0141139 secs]\n",
        "2017-09-07T09:00:13.101+0200: 1.022: [GC (Allocation Failure) "
        "[PSYoungGen: 76256K->10736K(141824K)] 76264K->17204K(316928K), "
        "0.0168461 secs]\n",
        "[info][gc] Using G1\n",
        "[3.500s][info][gc] GC(0) Pause Young (Normal) (G1 Evacuation Pause) "
        "24M->4M(256M) 3.141ms\n",
    ]

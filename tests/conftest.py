from __future__ import annotations

import time
from collections.abc import Callable, Generator
from datetime import datetime

import pytest

# POSIX TZ strings work without a system tz database
TZ_UTC = "UTC0"
TZ_BRASILIA = "<-03>3"
TZ_US_EASTERN = "EST5EDT,M3.2.0,M11.1.0"


@pytest.fixture
def local_tz(monkeypatch: pytest.MonkeyPatch) -> Generator[Callable[[str], None], None, None]:
    """
    Switch the process-local timezone for the duration of one test.

    Usage: ``local_tz(TZ_BRASILIA)``. The original TZ is restored (and
    re-applied with tzset) on teardown.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def frozen_now(monkeypatch: pytest.MonkeyPatch) -> Callable[[datetime], datetime]:
    """
    Pin the clock seen by rotina.

    Every module reads the time through rotina.utils.time.local_now, so this
    single patch covers dates, day periods and the CLI.

    Accepts a naive datetime (interpreted in the current local timezone) or an
    aware one, and returns the aware local datetime that local_now() will yield.
    Set the timezone with ``local_tz`` before freezing.
    """

    def _freeze(moment: datetime) -> datetime:
        pinned = moment.astimezone()
        monkeypatch.setattr("rotina.utils.time.local_now", lambda: pinned)
        return pinned

    return _freeze

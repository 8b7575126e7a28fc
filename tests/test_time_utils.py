"""Tests for timestamps and ISO-8601 durations."""
from datetime import datetime, timezone

import numpy as np
import pandas as pd
import pytest

from sassie_nc.time_utils import (
    datetimes_to_days,
    format_now,
    iso8601_duration,
    iso_timestamp,
)


def test_duration_days_hours_minutes_seconds():
    days = 29 + (10 * 3600 + 5 * 60 + 3) / 86400.0
    assert iso8601_duration(days) == "P29DT10H5M3S"


@pytest.mark.parametrize("days, expected", [
    (2.0, "P2D"),
    (0.5, "PT12H"),
    (3 / 86400.0, "PT3S"),
    (1 + 1 / 1440.0, "P1DT1M"),
    (0.0, "PT0S"),
    (400.25, "P400DT6H"),
])
def test_duration_omits_zero_components(days, expected):
    assert iso8601_duration(days) == expected


def test_duration_rounds_to_seconds():
    assert iso8601_duration(0.4 / 86400.0) == "PT0S"
    assert iso8601_duration(59.6 / 86400.0) == "PT1M"


def test_duration_rejects_negative_and_nan():
    with pytest.raises(ValueError):
        iso8601_duration(-1.0)
    with pytest.raises(ValueError):
        iso8601_duration(np.nan)


def test_iso_timestamp():
    assert iso_timestamp(0.0) == "1950-01-01T00:00:00Z"
    assert iso_timestamp(1.5) == "1950-01-02T12:00:00Z"
    # 2022-09-01 00:00:00
    assert iso_timestamp(26541.0) == "2022-09-01T00:00:00Z"


def test_format_now():
    now = datetime(2023, 1, 15, 12, 30, 45, tzinfo=timezone.utc)
    assert format_now(now) == "2023-01-15T12:30:45Z"
    assert format_now().endswith("Z")


def test_datetimes_to_days():
    times = pd.to_datetime(["1950-01-01 00:00", "1950-01-02 12:00", "2022-09-01 00:00"])
    np.testing.assert_allclose(datetimes_to_days(times), [0.0, 1.5, 26541.0])

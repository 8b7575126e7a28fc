# sassie_nc/time_utils.py
from datetime import datetime, timezone

import numpy as np
import pandas as pd

from sassie_nc.constants import EPOCH, ISO_FORMAT


def days_to_timestamp(days):
    """Days since 1950-01-01 -> pandas Timestamp, rounded to the second."""
    return (EPOCH + pd.to_timedelta(float(days), unit="D")).round("s")


def iso_timestamp(days):
    return days_to_timestamp(days).strftime(ISO_FORMAT)


def utc_now():
    return datetime.now(timezone.utc)


def format_now(now=None):
    if now is None:
        now = utc_now()
    return now.strftime(ISO_FORMAT)


def datetimes_to_days(times):
    """
    Convert datetimes to days since 1950-01-01.

    Parameters
    ----------
    times : array-like of datetime64 / Timestamp / datetime

    Returns
    -------
    numpy.ndarray
        float64 days since the epoch
    """
    index = pd.DatetimeIndex(np.atleast_1d(times))
    if index.tz is not None:
        index = index.tz_convert("UTC").tz_localize(None)
    return ((index - EPOCH) / pd.Timedelta(days=1)).to_numpy(dtype=np.float64)


def iso8601_duration(days):
    """
    Format a time span as an ISO-8601 duration.

    The span is rounded to whole seconds and split into days, hours,
    minutes and seconds. Zero components are left out together with their
    designator and no component is zero padded, e.g. 29 days 10 hours
    5 minutes 3 seconds -> ``P29DT10H5M3S``. Years and months are never
    used; long spans are given in days (``P400D``).

    Parameters
    ----------
    days : float
        Length of the span in days

    Returns
    -------
    str
    """
    if not np.isfinite(days):
        raise ValueError(f"duration must be finite, got {days}")

    total_seconds = int(round(float(days) * 86400.0))
    if total_seconds < 0:
        raise ValueError(f"duration must not be negative, got {days} days")
    if total_seconds == 0:
        return "PT0S"

    n_days, rem = divmod(total_seconds, 86400)
    hours, rem = divmod(rem, 3600)
    minutes, seconds = divmod(rem, 60)

    out = "P"
    if n_days:
        out += f"{n_days}D"

    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if seconds:
        time_part += f"{seconds}S"
    if time_part:
        out += "T" + time_part

    return out

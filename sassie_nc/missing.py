# sassie_nc/missing.py
import numpy as np


def fill_missing(values, fill_value):
    """
    Replace undefined entries with the fill sentinel.

    NaN entries and masked entries of a masked array both count as
    undefined. The input is never modified.

    Parameters
    ----------
    values : array-like
        1-D or 2-D numeric data
    fill_value : float
        Sentinel written in place of missing data

    Returns
    -------
    numpy.ndarray
        float64 copy with no NaN left
    """
    if np.ma.isMaskedArray(values):
        data = np.ma.filled(values.astype(np.float64), np.nan)
    else:
        data = np.array(values, dtype=np.float64, copy=True)

    data[np.isnan(data)] = fill_value
    return data


def count_missing(values):
    if np.ma.isMaskedArray(values):
        values = np.ma.filled(values.astype(np.float64), np.nan)
    return int(np.count_nonzero(np.isnan(np.asarray(values, dtype=np.float64))))

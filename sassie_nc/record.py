"""
Observation records.

A record maps field names (time, depth, lon, lat, T, S, ...) to numeric
arrays. time is in days since 1950-01-01. 1-D fields are indexed by time,
2-D fields by (time, depth).
"""

import logging
import numbers

import numpy as np
import scipy.io

from sassie_nc.constants import DATENUM_1950, DEPTH_DIM, TIME_DIM
from sassie_nc.time_utils import datetimes_to_days

LOGGER = logging.getLogger(__name__)


def datenum_to_days_since_1950(datenum):
    """MATLAB serial date number -> days since 1950-01-01."""
    return np.asarray(datenum, dtype=np.float64) - DATENUM_1950


def _is_datetime_like(values):
    values = np.asarray(values)
    if np.issubdtype(values.dtype, np.datetime64):
        return True
    if values.dtype == object and values.size > 0:
        first = values.flat[0]
        return hasattr(first, "year") and hasattr(first, "month")
    return False


def _is_numeric(values):
    values = np.asarray(values)
    if values.dtype.kind in "biuf":
        return True
    if values.dtype == object:
        return all(v is None or isinstance(v, numbers.Number) for v in values.flat)
    return False


def normalize_record(record):
    """
    Return a copy of the record with float64 arrays.

    Datetime ``time`` values are converted to days since 1950-01-01 and
    scalars are made 1-D, so that a single observation is a valid record.
    Non-numeric fields (text, nested structs) are dropped.
    """
    out = {}
    for name, values in record.items():
        if name == TIME_DIM and _is_datetime_like(values):
            out[name] = datetimes_to_days(values)
        elif not _is_numeric(values):
            LOGGER.debug("Skipping non-numeric field %r", name)
        elif np.ma.isMaskedArray(values):
            out[name] = np.ma.masked_array(values, dtype=np.float64)
        else:
            out[name] = np.asarray(values, dtype=np.float64)

    # scalars come from single observations or single depth levels
    for name, values in out.items():
        if np.ndim(values) == 0:
            out[name] = np.atleast_1d(values)

    return out


def check_record(record, descriptors):
    """
    Validate the record shape against the variable descriptors.

    Raises
    ------
    ValueError
        if a dimension axis or a source field is missing, or a field does
        not have shape (time,) or (time, depth)
    """
    for dim in (TIME_DIM, DEPTH_DIM):
        if dim not in record:
            raise ValueError(f"record has no {dim!r} axis")
        if np.ndim(record[dim]) != 1:
            raise ValueError(f"{dim!r} axis must be 1-D, got shape {np.shape(record[dim])}")

    n_time = len(record[TIME_DIM])
    n_depth = len(record[DEPTH_DIM])

    for descriptor in descriptors:
        if descriptor.source not in record:
            raise ValueError(
                f"record has no field {descriptor.source!r} for variable {descriptor.name!r}"
            )
        if descriptor.name in (TIME_DIM, DEPTH_DIM):
            continue

        shape = np.shape(record[descriptor.source])
        if len(shape) == 1:
            if shape[0] != n_time:
                raise ValueError(
                    f"{descriptor.source!r} has length {shape[0]}, expected {n_time} (time)"
                )
        elif len(shape) == 2:
            if shape != (n_time, n_depth):
                raise ValueError(
                    f"{descriptor.source!r} has shape {shape}, "
                    f"expected ({n_time}, {n_depth}) (time, depth)"
                )
        else:
            raise ValueError(
                f"{descriptor.source!r} must be 1-D or 2-D, got shape {shape}"
            )


def _from_matlab(values, n_time, n_depth):
    """MATLAB arrays are at least 2-D: vectors become 1-D, (time, depth) matrices stay 2-D."""
    values = np.asarray(values)
    if values.dtype.kind not in "biuf":
        return values
    if values.shape == (n_time, n_depth) and n_depth > 1:
        return values
    if sum(dim > 1 for dim in values.shape) <= 1:
        return values.ravel()
    return values


def load_record_mat(path, struct_name="data"):
    """
    Load an observation record from a MATLAB .mat file.

    The file must hold a struct (``data`` by default) with a ``time`` field
    in MATLAB datenum and any number of numeric fields (depth, lon, lat,
    T, S, ...). Row and column vectors become 1-D. A field shaped
    (time, depth) stays 2-D, a single profile of shape (1, depth) too.
    Text fields are ignored.

    Returns
    -------
    dict
        normalized record with time in days since 1950-01-01
    """
    mat = scipy.io.loadmat(path, squeeze_me=False, struct_as_record=False)
    if struct_name not in mat:
        raise KeyError(f"{path}: no struct named {struct_name!r}")

    struct = mat[struct_name]
    if isinstance(struct, np.ndarray):
        if struct.size != 1:
            raise ValueError(f"{path}: {struct_name!r} must be a single struct, got size {struct.size}")
        struct = struct.flat[0]
    if not hasattr(struct, "_fieldnames"):
        raise ValueError(f"{path}: {struct_name!r} is not a struct")

    fields = {name: getattr(struct, name) for name in struct._fieldnames}
    if TIME_DIM not in fields:
        raise KeyError(f"{path}: struct {struct_name!r} has no time field")

    record = {TIME_DIM: datenum_to_days_since_1950(np.ravel(fields.pop(TIME_DIM)))}
    if DEPTH_DIM in fields:
        record[DEPTH_DIM] = np.ravel(fields.pop(DEPTH_DIM))

    n_time = record[TIME_DIM].size
    n_depth = record[DEPTH_DIM].size if DEPTH_DIM in record else 0
    for name, values in fields.items():
        record[name] = _from_matlab(values, n_time, n_depth)

    LOGGER.info("Loaded %s.%s with fields: %s", path, struct_name, ", ".join(record))

    return normalize_record(record)

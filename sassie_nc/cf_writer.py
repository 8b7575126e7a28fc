# sassie_nc/cf_writer.py
import logging

import numpy as np
from netCDF4 import Dataset

from sassie_nc.constants import (
    COORDINATES_1D,
    COORDINATES_2D,
    DEPTH_DIM,
    FILL_VALUE,
    TIME_DIM,
)
from sassie_nc.missing import count_missing, fill_missing
from sassie_nc.record import check_record
from sassie_nc.variables import axis_for

LOGGER = logging.getLogger(__name__)


def variable_attributes(descriptor, ndim):
    """
    Per-variable attributes, in the order they are written.

    _FillValue is not part of the result: netCDF4 takes it when the
    variable is created.
    """
    attrs = {}

    axis = axis_for(descriptor)
    if axis is not None:
        attrs["axis"] = axis

    attrs["units"] = descriptor.units
    attrs["standard_name"] = descriptor.standard_name
    attrs["long_name"] = descriptor.long_name
    attrs["coverage_content_type"] = descriptor.coverage_content_type

    if descriptor.is_measurement:
        attrs["valid_min"] = np.float64(descriptor.valid_min)
        attrs["valid_max"] = np.float64(descriptor.valid_max)
        attrs["coordinates"] = COORDINATES_2D if ndim == 2 else COORDINATES_1D

    if descriptor.comment:
        attrs["comment"] = descriptor.comment

    return attrs


def write_variables(filepath, record, descriptors, fill_value=FILL_VALUE):
    """
    Write dimensions, variables and data of an observation record.

    All variables and their attributes are defined first; data is written
    only after the whole schema exists. The file is closed on return.

    Parameters
    ----------
    filepath : str
        output path, must not exist yet
    record : dict
        normalized observation record
    descriptors : sequence of VariableDescriptor
        output variables, in file order
    fill_value : float
        sentinel for missing data in physical measurements
    """
    check_record(record, descriptors)

    names = [descriptor.name for descriptor in descriptors]
    for dim in (TIME_DIM, DEPTH_DIM):
        if dim not in names:
            raise ValueError(f"no variable descriptor for the {dim!r} axis")
    if len(set(names)) != len(names):
        raise ValueError(f"duplicate variable names: {names}")

    n_time = len(record[TIME_DIM])
    n_depth = len(record[DEPTH_DIM])

    with Dataset(filepath, "w", format="NETCDF4") as nc:
        LOGGER.info("Creating %s (time=%d, depth=%d)", filepath, n_time, n_depth)

        # -------------------------
        # Dimensions
        # -------------------------
        nc.createDimension(TIME_DIM, n_time)
        nc.createDimension(DEPTH_DIM, n_depth)

        time_var = nc.createVariable(TIME_DIM, "f8", (TIME_DIM,))
        depth_var = nc.createVariable(DEPTH_DIM, "f8", (DEPTH_DIM,))

        # -------------------------
        # Variables and attributes
        # -------------------------
        handles = []
        for descriptor in descriptors:
            ndim = np.ndim(record[descriptor.source])

            if descriptor.name == TIME_DIM:
                var = time_var
            elif descriptor.name == DEPTH_DIM:
                var = depth_var
            else:
                dims = (TIME_DIM,) if ndim == 1 else (TIME_DIM, DEPTH_DIM)
                var = nc.createVariable(
                    descriptor.name,
                    "f8",
                    dims,
                    fill_value=fill_value if descriptor.is_measurement else None,
                )

            var.setncatts(variable_attributes(descriptor, ndim))
            LOGGER.debug("Defined %s%s", descriptor.name, var.dimensions)
            handles.append((descriptor, var))

        # -------------------------
        # Data
        # -------------------------
        for descriptor, var in handles:
            values = record[descriptor.source]
            n_missing = count_missing(values)
            if n_missing:
                LOGGER.debug("%s: %d missing values set to %s", descriptor.name, n_missing, fill_value)
            var[...] = fill_missing(values, fill_value)

    LOGGER.info("Closed %s", filepath)

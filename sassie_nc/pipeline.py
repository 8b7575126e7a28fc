# sassie_nc/pipeline.py
import logging
import os

from sassie_nc.cf_writer import write_variables
from sassie_nc.constants import FILL_VALUE
from sassie_nc.global_attrs import add_global_attributes, build_global_attributes
from sassie_nc.record import normalize_record
from sassie_nc.variables import SASSIE_VARIABLES

LOGGER = logging.getLogger(__name__)


def make_netcdf_file(
    savename,
    record,
    table,
    dataset,
    overrides,
    descriptors=SASSIE_VARIABLES,
    fill_value=FILL_VALUE,
    now=None,
):
    """
    Write one dataset to a CF/ACDD netCDF file.

    1. remove any existing file at ``savename``
    2. define and write all variables, close the file
    3. reopen it and add the global attributes of ``dataset``

    An error in step 3 leaves a file with data but without global
    attributes.

    Parameters
    ----------
    savename : str
    record : dict
        observation record (time in days since 1950-01-01)
    table : AttributeTable
    dataset : str or int
        key or spreadsheet row of the dataset in ``table``
    overrides : DatasetOverrides
    descriptors : sequence of VariableDescriptor
    fill_value : float
    now : datetime, optional
        timestamp for date_created/date_modified (default: current UTC time)

    Returns
    -------
    str
        ``savename``
    """
    record = normalize_record(record)

    if os.path.exists(savename):
        LOGGER.warning("Removing existing file %s", savename)
        os.remove(savename)

    LOGGER.info("Saving netCDF file %s", savename)
    write_variables(savename, record, descriptors, fill_value=fill_value)

    attrs = build_global_attributes(table, dataset, record, descriptors, overrides, now=now)
    add_global_attributes(savename, attrs)

    return savename

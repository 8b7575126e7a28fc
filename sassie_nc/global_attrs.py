"""
Global (file-level) attributes.

The attribute table is a spreadsheet whose first row names the global
attributes and whose other rows hold one dataset each. A dataset's row is
merged with values computed from the observation record and with the
operator's freeform text, then written onto an already closed file.
"""

import logging
import os
import uuid
from collections import Counter
from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd
from netCDF4 import Dataset

from sassie_nc.constants import TIME_DIM
from sassie_nc.time_utils import format_now, iso8601_duration, iso_timestamp
from sassie_nc.variables import find_by_standard_name

LOGGER = logging.getLogger(__name__)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")


class AttributeTableError(ValueError):
    """The attribute table cannot be read or is malformed."""


class UnknownDatasetError(KeyError):
    """No row of the attribute table belongs to the requested dataset."""


class AttributeLookupError(KeyError):
    """An attribute name is not a column of the attribute table."""


@dataclass(frozen=True)
class DatasetOverrides:
    """Freeform global attributes written by the operator for one dataset."""
    title: str
    summary: str
    comment: str
    history: str
    product_version: str
    references: str
    acknowledgement: str


class AttributeTable:
    """Global attribute names and one row of values per dataset."""

    def __init__(self, names, rows, key_column=None, source=None):
        self.names = list(names)
        self.rows = rows
        self.key_column = key_column
        self.source = source
        self._validate()

    def _validate(self):
        if not self.names:
            raise AttributeTableError(f"{self.source}: empty header row")

        blank = [i + 1 for i, name in enumerate(self.names) if not name]
        if blank:
            raise AttributeTableError(f"{self.source}: blank attribute name in column(s) {blank}")

        duplicated = sorted(name for name, n in Counter(self.names).items() if n > 1)
        if duplicated:
            raise AttributeTableError(f"{self.source}: duplicate attribute names {duplicated}")

        if self.key_column is None:
            return

        if self.key_column not in self.names:
            raise AttributeTableError(
                f"{self.source}: key column {self.key_column!r} is not in the header"
            )
        keys = [row[self.names.index(self.key_column)] for row in self.rows]
        if any(not key for key in keys):
            raise AttributeTableError(f"{self.source}: blank value in key column {self.key_column!r}")
        duplicated = sorted(key for key, n in Counter(keys).items() if n > 1)
        if duplicated:
            raise AttributeTableError(f"{self.source}: duplicate dataset keys {duplicated}")

    @property
    def keys(self):
        if self.key_column is None:
            return []
        col = self.names.index(self.key_column)
        return [row[col] for row in self.rows]

    def select(self, dataset):
        """
        Return the attributes of one dataset as an ordered dict.

        Parameters
        ----------
        dataset : str or int
            a value of the key column, or a spreadsheet row number
            (row 1 is the header, so the first dataset is row 2)
        """
        if isinstance(dataset, (int, np.integer)) and not isinstance(dataset, bool):
            index = int(dataset) - 2
            if index < 0 or index >= len(self.rows):
                raise UnknownDatasetError(
                    f"{self.source}: row {dataset} is not a dataset row "
                    f"(rows 2..{len(self.rows) + 1})"
                )
            row = self.rows[index]
        else:
            if self.key_column is None:
                raise UnknownDatasetError(
                    f"{self.source}: cannot look up {dataset!r} without a key column"
                )
            keys = self.keys
            if dataset not in keys:
                raise UnknownDatasetError(
                    f"{self.source}: unknown dataset {dataset!r}, known: {', '.join(keys)}"
                )
            row = self.rows[keys.index(dataset)]

        return dict(zip(self.names, row))


def load_attribute_table(path, key_column=None):
    """
    Read the global attribute spreadsheet (.xlsx/.xlsm or .csv).

    Every cell is read as text and blank cells become "".

    Raises
    ------
    AttributeTableError
        if the file cannot be read or its header is malformed
    """
    path = str(path)
    if path.lower().endswith(".xls"):
        raise AttributeTableError(f"{path}: legacy .xls workbooks are not supported, save as .xlsx")
    try:
        if path.lower().endswith(EXCEL_SUFFIXES):
            df = pd.read_excel(path, header=None, dtype=str)
        else:
            df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False)
    except Exception as e:
        raise AttributeTableError(f"{path}: cannot read attribute table: {e}") from e

    if df.empty:
        raise AttributeTableError(f"{path}: attribute table is empty")

    df = df.fillna("")
    cells = [[str(value).strip() for value in row] for row in df.itertuples(index=False)]

    names = cells[0]
    # trailing blank header cells are spreadsheet padding
    while names and not names[-1]:
        names = names[:-1]
    rows = [row[:len(names)] for row in cells[1:]]

    table = AttributeTable(names, rows, key_column=key_column, source=path)
    LOGGER.info("Loaded %d attribute names and %d dataset rows from %s", len(names), len(rows), path)

    return table


def computed_attributes(record, descriptors, now=None):
    """Global attributes derived from the record and the current time."""
    lat = np.asarray(record[find_by_standard_name(descriptors, "latitude").source], dtype=np.float64)
    lon = np.asarray(record[find_by_standard_name(descriptors, "longitude").source], dtype=np.float64)
    time = np.asarray(record[TIME_DIM], dtype=np.float64)

    stamp = format_now(now)

    return {
        "date_created": stamp,
        "date_modified": stamp,
        "geospatial_lat_min": float(np.nanmin(lat)),
        "geospatial_lat_max": float(np.nanmax(lat)),
        "geospatial_lon_min": float(np.nanmin(lon)),
        "geospatial_lon_max": float(np.nanmax(lon)),
        "time_coverage_start": iso_timestamp(np.nanmin(time)),
        "time_coverage_end": iso_timestamp(np.nanmax(time)),
    }


def build_global_attributes(table, dataset, record, descriptors, overrides, now=None):
    """
    Assemble the global attributes of one dataset.

    Starts from the dataset's row of the table (blank cells dropped),
    replaces computed and freeform fields, and appends ``uuid`` and
    ``time_coverage_duration``.

    Raises
    ------
    UnknownDatasetError
        if the table has no row for ``dataset``
    AttributeLookupError
        if a replaced field is not a column of the table
    """
    row = table.select(dataset)
    attrs = {name: value for name, value in row.items() if value != ""}

    replaced = dict(computed_attributes(record, descriptors, now))
    replaced.update(asdict(overrides))

    for name, value in replaced.items():
        if name not in row:
            raise AttributeLookupError(f"{table.source}: no column named {name!r}")
        attrs[name] = value

    time = np.asarray(record[TIME_DIM], dtype=np.float64)
    attrs["uuid"] = str(uuid.uuid4())
    attrs["time_coverage_duration"] = iso8601_duration(np.nanmax(time) - np.nanmin(time))

    return attrs


def add_global_attributes(filepath, attrs):
    """Write global attributes onto an existing, closed netCDF file."""
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"{filepath}: netCDF file does not exist")
    if not os.access(filepath, os.W_OK):
        raise PermissionError(f"{filepath}: netCDF file is not writable")

    with Dataset(filepath, "a") as nc:
        for name, value in attrs.items():
            nc.setncattr(name, value)

    LOGGER.info("Wrote %d global attributes to %s", len(attrs), filepath)

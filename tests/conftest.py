"""Fixtures shared by the test modules."""
from datetime import datetime, timezone

import numpy as np
import pandas as pd
import pytest

from sassie_nc.global_attrs import DatasetOverrides

NOW = datetime(2023, 1, 15, 12, 30, 45, tzinfo=timezone.utc)

ATTRIBUTE_NAMES = [
    "dataset_id",
    "Conventions",
    "title",
    "summary",
    "comment",
    "history",
    "product_version",
    "references",
    "acknowledgement",
    "creator_name",
    "keywords",
    "date_created",
    "date_modified",
    "geospatial_lat_min",
    "geospatial_lat_max",
    "geospatial_lon_min",
    "geospatial_lon_max",
    "time_coverage_start",
    "time_coverage_end",
]

ATTRIBUTE_ROWS = [
    {
        "dataset_id": "TSG",
        "Conventions": "CF-1.8, ACDD-1.3",
        "title": "<title>",
        "summary": "<summary>",
        "creator_name": "TSG team",
        "keywords": "",
    },
    {
        "dataset_id": "CTD",
        "Conventions": "CF-1.8, ACDD-1.3",
        "title": "<title>",
        "summary": "<summary>",
        "creator_name": "CTD team",
        "keywords": "EARTH SCIENCE > OCEANS > SALINITY/DENSITY",
    },
]


def _table_cells(names=ATTRIBUTE_NAMES, rows=ATTRIBUTE_ROWS):
    return [list(names)] + [[row.get(name, "") for name in names] for row in rows]


def write_attribute_csv(path, names=ATTRIBUTE_NAMES, rows=ATTRIBUTE_ROWS):
    pd.DataFrame(_table_cells(names, rows)).to_csv(path, header=False, index=False)
    return path


@pytest.fixture
def record():
    return {
        "time": np.array([0.0, 1.0, 2.0]),
        "depth": np.array([0.0, 10.0]),
        "lat": np.array([70.0, 70.5, 71.0]),
        "lon": np.array([-150.0, -149.0, -148.0]),
        "T": np.array([[1.5, 1.2], [np.nan, 0.9], [1.1, 0.8]]),
        "S": np.array([[27.1, 28.3], [27.4, 28.5], [27.0, 28.9]]),
    }


@pytest.fixture
def attributes_csv(tmp_path):
    return write_attribute_csv(tmp_path / "SASSIE_attributes.csv")


@pytest.fixture
def attributes_xlsx(tmp_path):
    path = tmp_path / "SASSIE_attributes.xlsx"
    pd.DataFrame(_table_cells()).to_excel(path, header=False, index=False)
    return path


@pytest.fixture
def tsg_overrides():
    return DatasetOverrides(
        title="SASSIE Shipboard Thermosalinograph Data Fall 2022",
        summary="Shipboard TSG data from R/V Woldstad.",
        comment="SBE21 SeaCAT TSG with SBE38.",
        history="none",
        product_version="1.0",
        references="none",
        acknowledgement="SASSIE was funded by NASA.",
    )


@pytest.fixture
def ctd_overrides():
    return DatasetOverrides(
        title="SASSIE CTD Casts Fall 2022",
        summary="CTD casts from R/V Woldstad.",
        comment="SBE 911plus.",
        history="2023-02-01 despiked",
        product_version="2.0",
        references="doi:10.0000/example",
        acknowledgement="Thanks to the crew.",
    )

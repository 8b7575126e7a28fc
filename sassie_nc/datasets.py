"""
Per-dataset configuration.

Each dataset has a row in the attribute spreadsheet and a handful of
freeform global attributes that cannot be derived from the data. Add an
entry to DATASETS for every dataset that is converted.
"""

from dataclasses import dataclass
from typing import Optional, Union

from sassie_nc.file_naming import build_filename
from sassie_nc.global_attrs import DatasetOverrides

CAMPAIGN = "SASSIE_Fall_2022"
ACKNOWLEDGEMENT = "SASSIE was funded by NASA under grant #80NSSC21K0832."


@dataclass(frozen=True)
class DatasetConfig:
    # key column value or spreadsheet row number in the attribute table
    table_row: Union[str, int]
    instrument: str
    overrides: DatasetOverrides
    shipboard: bool = False
    identifier: Optional[str] = None

    def filename(self, campaign=CAMPAIGN):
        return build_filename(
            campaign,
            self.instrument,
            identifier=self.identifier,
            shipboard=self.shipboard,
        )


DATASETS = {
    "TSG": DatasetConfig(
        table_row="TSG",
        instrument="TSG",
        shipboard=True,
        overrides=DatasetOverrides(
            title="SASSIE Arctic Field Campaign Shipboard Thermosalinograph Data Fall 2022",
            summary=(
                "Shipboard thermosalinograph (TSG) data collected continuously from "
                "R/V Woldstad during the 2022 SASSIE field campaign."
            ),
            comment=(
                "The Seabird thermosalinograph (TSG) system consisted of a SBE21 SeaCAT "
                "TSG, a SBE38 temperature sensor, and a debubbler. Data were logged every "
                "minute using SeaSave software and included GPS position data."
            ),
            history="none",
            product_version="1.0",
            references="none",
            acknowledgement=ACKNOWLEDGEMENT,
        ),
    ),
}


def get_dataset(name):
    try:
        return DATASETS[name]
    except KeyError:
        raise KeyError(f"unknown dataset {name!r}, configured: {', '.join(sorted(DATASETS))}") from None

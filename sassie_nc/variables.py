"""
Variable definitions for SASSIE netCDF files.

Each output variable is described by one VariableDescriptor carrying its
output name, the record field it is read from, and all CF/ACDD attributes.
No I/O happens in this module.
"""

from dataclasses import dataclass
from typing import Optional

from sassie_nc.constants import (
    COORDINATE,
    CONTENT_TYPES,
    DEPTH_DIM,
    PHYSICAL_MEASUREMENT,
    TIME_DIM,
    TIME_UNITS,
)


@dataclass(frozen=True)
class VariableDescriptor:
    """One output variable and its per-variable attributes."""
    # name in the netCDF file
    name: str
    # field name in the observation record
    source: str
    standard_name: str
    long_name: str
    units: str
    coverage_content_type: str
    valid_min: Optional[float] = None
    valid_max: Optional[float] = None
    comment: Optional[str] = None

    def __post_init__(self):
        if self.coverage_content_type not in CONTENT_TYPES:
            raise ValueError(
                f"{self.name}: coverage_content_type must be one of "
                f"{', '.join(CONTENT_TYPES)}, got {self.coverage_content_type!r}"
            )

        has_range = self.valid_min is not None or self.valid_max is not None
        if self.coverage_content_type == COORDINATE and has_range:
            raise ValueError(f"{self.name}: coordinate variables take no valid range")

        if self.coverage_content_type == PHYSICAL_MEASUREMENT:
            if self.valid_min is None or self.valid_max is None:
                raise ValueError(f"{self.name}: valid_min and valid_max are required")
            if self.valid_min > self.valid_max:
                raise ValueError(
                    f"{self.name}: valid_min {self.valid_min} > valid_max {self.valid_max}"
                )

    @property
    def is_measurement(self):
        return self.coverage_content_type == PHYSICAL_MEASUREMENT


def axis_for(descriptor):
    """Return the CF axis letter for a descriptor, or None."""
    if descriptor.name == TIME_DIM:
        return "T"
    if descriptor.name == DEPTH_DIM:
        return "Z"
    if descriptor.standard_name == "longitude":
        return "X"
    if descriptor.standard_name == "latitude":
        return "Y"
    return None


def find_by_standard_name(descriptors, standard_name):
    for descriptor in descriptors:
        if descriptor.standard_name == standard_name:
            return descriptor
    raise KeyError(f"no variable with standard_name {standard_name!r}")


# ==========================================================
# Default SASSIE variable set
# ==========================================================
SASSIE_VARIABLES = (
    VariableDescriptor(
        name="time",
        source="time",
        standard_name="time",
        long_name="time",
        units=TIME_UNITS,
        coverage_content_type=COORDINATE,
    ),
    VariableDescriptor(
        name="depth",
        source="depth",
        standard_name="depth",
        long_name="depth",
        units="m",
        coverage_content_type=COORDINATE,
    ),
    VariableDescriptor(
        name="longitude",
        source="lon",
        standard_name="longitude",
        long_name="longitude",
        units="degree_east",
        coverage_content_type=COORDINATE,
    ),
    VariableDescriptor(
        name="latitude",
        source="lat",
        standard_name="latitude",
        long_name="latitude",
        units="degree_north",
        coverage_content_type=COORDINATE,
    ),
    VariableDescriptor(
        name="temperature",
        source="T",
        standard_name="sea_water_temperature",
        long_name="sea water temperature",
        units="degree_C",
        coverage_content_type=PHYSICAL_MEASUREMENT,
        valid_min=-2.0,
        valid_max=30.0,
    ),
    VariableDescriptor(
        name="salinity",
        source="S",
        standard_name="sea_water_practical_salinity",
        long_name="sea water practical salinity",
        units="1",
        coverage_content_type=PHYSICAL_MEASUREMENT,
        valid_min=2.0,
        valid_max=42.0,
    ),
)

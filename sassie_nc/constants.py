# sassie_nc/constants.py
import numpy as np
import pandas as pd

FILL_VALUE = np.float64(-9999.0)

# time is stored as days since this epoch
EPOCH = pd.Timestamp("1950-01-01")
TIME_UNITS = "days since 1950-01-01"

# MATLAB datenum(1950, 1, 1)
DATENUM_1950 = 712224.0

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

COORDINATE = "coordinate"
PHYSICAL_MEASUREMENT = "physicalMeasurement"
CONTENT_TYPES = (COORDINATE, PHYSICAL_MEASUREMENT)

TIME_DIM = "time"
DEPTH_DIM = "depth"

COORDINATES_1D = "time latitude longitude"
COORDINATES_2D = "time latitude longitude depth"

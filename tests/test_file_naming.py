"""Tests for the file naming convention."""
import pytest

from sassie_nc.datasets import DATASETS, get_dataset
from sassie_nc.file_naming import build_filename


def test_build_filename():
    assert build_filename("SASSIE_Fall_2022", "JetSSP") == "SASSIE_Fall_2022_JetSSP.nc"
    assert build_filename("SASSIE_Fall_2022", "TSG", shipboard=True) == \
        "SASSIE_Fall_2022_shipboard_TSG.nc"
    assert build_filename("SASSIE_Fall_2022", "SWIFT_aquaDopp", identifier="SN1234") == \
        "SASSIE_Fall_2022_SWIFT_aquaDopp_SN1234.nc"


def test_build_filename_rejects_bad_parts():
    with pytest.raises(ValueError):
        build_filename("SASSIE_Fall_2022", "TSG", ext=".nc4")
    with pytest.raises(ValueError):
        build_filename("SASSIE Fall 2022", "TSG")
    with pytest.raises(ValueError):
        build_filename("SASSIE_Fall_2022", "")


def test_dataset_config():
    tsg = get_dataset("TSG")
    assert tsg.filename() == "SASSIE_Fall_2022_shipboard_TSG.nc"
    assert tsg.overrides.product_version == "1.0"
    assert set(DATASETS) >= {"TSG"}
    with pytest.raises(KeyError, match="unknown dataset"):
        get_dataset("ADCP")

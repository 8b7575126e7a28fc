"""Tests for the command line."""
import os

import numpy as np
import scipy.io
from netCDF4 import Dataset

from sassie_nc.cli import describe_file, main
from sassie_nc.datasets import get_dataset


def write_mat(path, record):
    data = dict(record)
    data["time"] = record["time"] + 712224.0
    scipy.io.savemat(path, {"data": data})
    return str(path)


def test_make(tmp_path, record, attributes_csv):
    mat = write_mat(tmp_path / "data.mat", record)
    out_dir = tmp_path / "out"

    status = main(["make", mat, "--attributes", str(attributes_csv),
                   "--dataset", "TSG", "--output-dir", str(out_dir)])

    assert status == 0
    path = out_dir / "SASSIE_Fall_2022_shipboard_TSG.nc"
    assert path.exists()
    assert (out_dir / "sassie_nc.log").exists()
    with Dataset(str(path)) as ds:
        ds.set_auto_mask(False)
        assert ds.title == get_dataset("TSG").overrides.title
        assert ds.creator_name == "TSG team"
        assert ds.time_coverage_duration == "P2D"
        assert ds["temperature"][1, 0] == -9999.0


def test_make_by_row(tmp_path, record, attributes_csv):
    mat = write_mat(tmp_path / "data.mat", record)
    out = tmp_path / "ctd_row.nc"
    status = main(["make", mat, "-a", str(attributes_csv), "-d", "TSG",
                   "--row", "3", "-o", str(out)])
    assert status == 0
    with Dataset(str(out)) as ds:
        assert ds.creator_name == "CTD team"


def test_make_failure_returns_1(tmp_path, record):
    mat = write_mat(tmp_path / "data.mat", record)
    status = main(["make", mat, "-a", str(tmp_path / "missing.xlsx"), "-d", "TSG",
                   "-o", str(tmp_path / "x.nc")])
    assert status == 1
    assert not os.path.exists(tmp_path / "x.nc")


def test_describe(tmp_path, record, attributes_csv, capsys):
    mat = write_mat(tmp_path / "data.mat", record)
    out = str(tmp_path / "d.nc")
    assert main(["make", mat, "-a", str(attributes_csv), "-d", "TSG", "-o", out]) == 0

    text = describe_file(out)
    assert "temperature" in text
    assert "time_coverage_duration" in text

    assert main(["describe", out]) == 0
    assert "salinity" in capsys.readouterr().out

#!/usr/bin/env python3
"""
Command line for SASSIE netCDF files.

    sassie-nc make data.mat --attributes SASSIE_attributes.xlsx --dataset TSG
    sassie-nc describe SASSIE_Fall_2022_shipboard_TSG.nc

``make`` reads an observation record from a MATLAB struct, writes the
variables, then adds the dataset's global attributes from the spreadsheet.
``describe`` prints the structure and attributes of a written file.
"""

import argparse
import logging
import os
import sys

import xarray as xr

from sassie_nc.datasets import DATASETS, get_dataset
from sassie_nc.global_attrs import load_attribute_table
from sassie_nc.pipeline import make_netcdf_file
from sassie_nc.record import load_record_mat

LOGGER = logging.getLogger("sassie_nc")

DEFAULT_ATTRIBUTES_FILE = "SASSIE_attributes.xlsx"
DEFAULT_KEY_COLUMN = "dataset_id"


def setup_logging(output_dir, log_name="sassie_nc.log"):
    """
    Log to a file in output_dir (DEBUG) and to the console (INFO).
    """
    os.makedirs(output_dir, exist_ok=True)
    LOGGER.setLevel(logging.DEBUG)
    LOGGER.handlers.clear()

    log_path = os.path.join(output_dir, log_name)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    fh = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    LOGGER.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    LOGGER.addHandler(ch)

    LOGGER.debug("Log file: %s", log_path)
    return log_path


def describe_file(filepath):
    """Text summary of a netCDF file, values as stored (no decoding)."""
    with xr.open_dataset(filepath, mask_and_scale=False, decode_times=False) as ds:
        return str(ds)


def run_make(args):
    config = get_dataset(args.dataset)

    output = args.output or os.path.join(args.output_dir, config.filename())
    setup_logging(os.path.dirname(os.path.abspath(output)))

    LOGGER.info("Dataset: %s", args.dataset)
    LOGGER.info("Record file: %s", args.record)
    LOGGER.info("Attribute table: %s", args.attributes)

    record = load_record_mat(args.record, struct_name=args.struct)
    if args.row is not None:
        table = load_attribute_table(args.attributes)
        table_row = args.row
    else:
        table = load_attribute_table(args.attributes, key_column=args.key_column)
        table_row = config.table_row

    make_netcdf_file(output, record, table, table_row, config.overrides)
    LOGGER.info("Finished %s", output)
    return output


def run_describe(args):
    print(describe_file(args.file))


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sassie-nc",
        description="Write SASSIE observations to CF/ACDD netCDF files.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    make = sub.add_parser("make", help="write a netCDF file for one dataset")
    make.add_argument("record", help="MATLAB .mat file holding the observation struct")
    make.add_argument("--dataset", "-d", required=True, choices=sorted(DATASETS),
                      help="dataset to write")
    make.add_argument("--attributes", "-a", default=DEFAULT_ATTRIBUTES_FILE,
                      help="global attribute spreadsheet (.xlsx or .csv)")
    make.add_argument("--key-column", "-k", default=DEFAULT_KEY_COLUMN,
                      help="spreadsheet column identifying the dataset rows")
    make.add_argument("--row", "-r", type=int, default=None,
                      help="select the spreadsheet row by number instead of by key")
    make.add_argument("--struct", default="data",
                      help="name of the struct in the .mat file")
    make.add_argument("--output", "-o", default=None,
                      help="output file (default: conventional name in --output-dir)")
    make.add_argument("--output-dir", default=".",
                      help="directory for the output file and log")
    make.set_defaults(func=run_make)

    describe = sub.add_parser("describe", help="print the contents of a netCDF file")
    describe.add_argument("file")
    describe.set_defaults(func=run_describe)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except Exception as e:
        LOGGER.exception("Failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# -*- coding: utf-8 -*-
"""Reads delimited text files with coordinate columns into point layers.

GTFS feeds are the common case: `stops.txt` is a plain CSV with `stop_lat` and `stop_lon` in WGS84.
"""

import os

import pandas as pd

from ..core.points import points_from_records
from .download import find_file

GTFS_STOPS_FILE = "stops.txt"
GTFS_CRS = "EPSG:4326"
# ids and codes look numeric in many feeds but must stay strings to keep leading zeros
GTFS_STRING_COLUMNS = ["stop_id", "stop_code", "parent_station", "zone_id", "platform_code"]


def read_csv_points(csv_path, x, y, crs="EPSG:4326", dtype=None, layer_manager=None, layer_name=None):
    """Read a CSV file into a point layer.

    Parameters:
    -----------
    csv_path : str
        Path to the CSV file
    x, y : str
        Names of the coordinate columns
    crs : str, int or pyproj.CRS
        Coordinate reference system of the coordinates
    dtype : dict, optional
        Column dtypes passed to pandas.read_csv
    layer_manager : LayerManager, optional
        Layer manager to add the result layer to
    layer_name : str, optional
        Name for the result layer, defaults to the file name without extension

    Returns:
    --------
    layer : Layer
        Point layer; rows with a missing coordinate are dropped
    """
    df = pd.read_csv(csv_path, dtype=dtype)

    missing = [col for col in (x, y) if col not in df.columns]
    if missing:
        raise ValueError(f"Coordinate column(s) {missing} not found in {csv_path}")

    total_rows = len(df)
    df = df.dropna(subset=[x, y]).reset_index(drop=True)

    if not layer_name:
        layer_name = os.path.splitext(os.path.basename(csv_path))[0]

    layer = points_from_records(df, x=x, y=y, crs=crs, layer_manager=layer_manager, layer_name=layer_name)
    layer.source = csv_path
    layer.metadata["dropped_rows"] = total_rows - len(df)

    return layer


def read_gtfs_stops(path, layer_manager=None, layer_name="stops"):
    """Read the stops of a GTFS feed into a point layer.

    Parameters:
    -----------
    path : str
        Either the stops.txt file itself or a directory containing it (searched recursively)

    Returns:
    --------
    layer : Layer
        Stop points in WGS84
    """
    stops_path = find_file(path, GTFS_STOPS_FILE) if os.path.isdir(path) else path

    header = pd.read_csv(stops_path, nrows=0).columns
    dtype = {col: str for col in GTFS_STRING_COLUMNS if col in header}

    return read_csv_points(
        stops_path,
        x="stop_lon",
        y="stop_lat",
        crs=GTFS_CRS,
        dtype=dtype,
        layer_manager=layer_manager,
        layer_name=layer_name,
    )

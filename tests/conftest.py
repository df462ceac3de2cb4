# -*- coding: utf-8 -*-
"""Shared fixtures: small synthetic datasets shaped like the real ones the guide uses.

Polygons stand in for a Natural Earth countries shapefile, and a stops.txt file stands in for a GTFS feed.
Nothing here touches the network.
"""

import io
import os
import zipfile

import geopandas as gpd
import matplotlib
import pytest
from shapely.geometry import box

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from geoprimer import LayerManager, read_vector  # noqa: E402

COUNTRIES = [
    ("Guinea", "Africa", 13_000_000, box(-15, 7, -8, 12)),
    ("Equatorial Guinea", "Africa", 1_400_000, box(9, 1, 11, 3)),
    ("Papua New Guinea", "Oceania", 9_000_000, box(141, -10, 150, -2)),
    ("Finland", "Europe", 5_500_000, box(20, 60, 31, 70)),
    ("Guinea-Bissau", "Africa", 2_000_000, box(-17, 12.5, -15.5, 13)),
    (None, "Antarctica", 0, box(0, -80, 10, -70)),
]

STOPS_TXT = """stop_id,stop_name,stop_lat,stop_lon,location_type
0001,Rautatientori,60.1699,24.9384,0
0002,Tampere asema,61.4978,23.7610,0
0003,Conakry,9.5092,-13.7122,0
0004,Ghost stop,,24.9,0
"""


@pytest.fixture(autouse=True)
def close_figures():
    """Fixture to close matplotlib figures after each test."""
    yield
    plt.close("all")


@pytest.fixture
def countries_gdf():
    """Fixture to provide the synthetic countries as a GeoDataFrame in WGS84."""
    names, continents, populations, geometries = zip(*COUNTRIES)
    return gpd.GeoDataFrame(
        {"NAME": list(names), "CONTINENT": list(continents), "POP_EST": list(populations)},
        geometry=list(geometries),
        crs="EPSG:4326",
    )


@pytest.fixture
def countries_dir(tmp_path, countries_gdf):
    """Fixture to provide an extracted-archive directory holding countries.shp and stops.txt."""
    data_dir = tmp_path / "data" / "countries"
    (data_dir / "gtfs").mkdir(parents=True)
    countries_gdf.to_file(data_dir / "countries.shp")
    (data_dir / "gtfs" / "stops.txt").write_text(STOPS_TXT, encoding="utf-8")
    return str(data_dir)


@pytest.fixture
def countries_layer(countries_dir):
    """Fixture to provide the countries shapefile read back as a Layer."""
    return read_vector(os.path.join(countries_dir, "countries.shp"), layer_name="Countries")


@pytest.fixture
def stops_path(countries_dir):
    """Fixture to provide the path to the GTFS stops file."""
    return os.path.join(countries_dir, "gtfs", "stops.txt")


@pytest.fixture
def archive_bytes(countries_dir):
    """Fixture to provide the extracted data zipped up again, as served by a download URL."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for root, _, filenames in os.walk(countries_dir):
            for filename in filenames:
                path = os.path.join(root, filename)
                archive.write(path, os.path.relpath(path, countries_dir))
    return buffer.getvalue()


@pytest.fixture
def manager():
    """Fixture to provide an empty LayerManager."""
    return LayerManager()

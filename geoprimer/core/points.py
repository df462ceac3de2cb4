# -*- coding: utf-8 -*-
"""Point construction and coordinate reference system handling.

Covers the first steps of any vector workflow: making a single point, making a named collection of points,
telling geopandas which CRS the coordinates are in, and reprojecting into another CRS.
In R these are `st_point`, `st_as_sf(..., coords = , crs = )`, `st_crs<-` and `st_transform`.
"""

import geopandas as gpd
import pandas as pd
from pyproj import CRS
from shapely.geometry import Point

from .layer import Layer


def create_point(x, y):
    """Create a single point geometry.

    Parameters:
    -----------
    x : float
        X coordinate (longitude for geographic CRSs)
    y : float
        Y coordinate (latitude for geographic CRSs)

    Returns:
    --------
    point : shapely.geometry.Point
        Point with the given coordinates
    """
    return Point(float(x), float(y))


def create_points(names, xs, ys, crs="EPSG:4326", layer_manager=None, layer_name=None):
    """Create a layer of named points.

    Parameters:
    -----------
    names : sequence of str
        Name of each point
    xs, ys : sequence of float
        Coordinates of each point
    crs : str, int or pyproj.CRS, optional
        Coordinate reference system of the coordinates
    layer_manager : LayerManager, optional
        Layer manager to add the result layer to
    layer_name : str, optional
        Name for the result layer

    Returns:
    --------
    result_layer : Layer
        Layer with one point feature per name
    """
    names, xs, ys = list(names), list(xs), list(ys)
    if not len(names) == len(xs) == len(ys):
        raise ValueError(f"names, xs and ys must have the same length, got {len(names)}, {len(xs)} and {len(ys)}")

    df = pd.DataFrame({"name": names, "x": xs, "y": ys})
    return points_from_records(df, crs=crs, layer_manager=layer_manager, layer_name=layer_name)


def points_from_records(records, x="x", y="y", crs="EPSG:4326", layer_manager=None, layer_name=None):
    """Create a point layer from a DataFrame or a list of dicts with coordinate columns.

    Parameters:
    -----------
    records : pandas.DataFrame or list of dict
        Tabular data holding the coordinates
    x, y : str
        Names of the coordinate columns
    crs : str, int or pyproj.CRS, optional
        Coordinate reference system of the coordinates

    Returns:
    --------
    result_layer : Layer
        Layer with point geometries and all other columns kept as attributes
    """
    df = records.copy() if isinstance(records, pd.DataFrame) else pd.DataFrame(list(records))

    missing = [col for col in (x, y) if col not in df.columns]
    if missing:
        raise ValueError(f"Coordinate column(s) {missing} not found in records")

    gdf = gpd.GeoDataFrame(df, geometry=gpd.points_from_xy(df[x], df[y]), crs=crs)

    result_layer = Layer(name=layer_name if layer_name else "points", type="points")
    result_layer.set_objects(gdf)
    result_layer.metadata = {"x_column": x, "y_column": y, "crs": gdf.crs.to_string() if gdf.crs else None}

    if layer_manager:
        layer_manager.add_layer(result_layer)

    return result_layer


def set_crs(layer, crs, allow_override=False):
    """Assign a CRS to a layer without touching its coordinates.

    Parameters:
    -----------
    layer : Layer
        Layer whose features are already in `crs`
    crs : str, int or pyproj.CRS
        Coordinate reference system to declare
    allow_override : bool
        Replace an existing, different CRS instead of raising

    Returns:
    --------
    layer : Layer
        The same layer, for chaining
    """
    if layer.objects is None:
        raise ValueError("Layer has no vector objects")

    layer.set_objects(layer.objects.set_crs(crs, allow_override=allow_override))
    return layer


def to_crs(source_layer, crs, layer_manager=None, layer_name=None):
    """Reproject a layer into another CRS.

    Parameters:
    -----------
    source_layer : Layer
        Layer to reproject, must have a CRS
    crs : str, int or pyproj.CRS
        Target coordinate reference system
    layer_manager : LayerManager, optional
        Layer manager to add the result layer to
    layer_name : str, optional
        Name for the result layer

    Returns:
    --------
    result_layer : Layer
        New layer with transformed coordinates
    """
    if source_layer.objects is None:
        raise ValueError("Layer has no vector objects")
    if source_layer.objects.crs is None:
        raise ValueError(f"Layer '{source_layer.name}' has no CRS; use set_crs() before reprojecting")

    target = CRS.from_user_input(crs)
    if not layer_name:
        layer_name = f"{source_layer.name}_{target.to_epsg() or 'reprojected'}"

    result_layer = Layer(name=layer_name, parent=source_layer, type="reprojected")
    result_layer.set_objects(source_layer.objects.to_crs(target))
    result_layer.source = source_layer.source
    result_layer.metadata = {
        "from_crs": source_layer.objects.crs.to_string(),
        "to_crs": target.to_string(),
    }

    if layer_manager:
        layer_manager.add_layer(result_layer)

    return result_layer


def describe_crs(crs):
    """Summarize a CRS the way `st_crs()` prints it.

    Parameters:
    -----------
    crs : str, int or pyproj.CRS

    Returns:
    --------
    info : dict
        Name, EPSG code (or None), whether it is geographic, and axis units
    """
    crs = CRS.from_user_input(crs)
    units = crs.axis_info[0].unit_name if crs.axis_info else None

    return {
        "name": crs.name,
        "epsg": crs.to_epsg(),
        "is_geographic": crs.is_geographic,
        "units": units,
    }

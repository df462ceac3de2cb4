# -*- coding: utf-8 -*-
"""Manages vector data I/O, supporting formats like Shapefile, GeoJSON and GeoPackage.

Reading wraps `geopandas.read_file` (R: `sf::st_read`) into a Layer, writing picks the driver from the extension.
"""

import os
import warnings

import geopandas as gpd

from ..core.layer import Layer
from .download import find_file

DRIVERS = {
    ".shp": "ESRI Shapefile",
    ".geojson": "GeoJSON",
    ".gpkg": "GPKG",
}


def read_vector(vector_path, layer_manager=None, layer_name=None, columns=None):
    """Read a vector file into a Layer.

    Parameters:
    -----------
    vector_path : str
        Path to the vector file
    layer_manager : LayerManager, optional
        Layer manager to add the result layer to
    layer_name : str, optional
        Name for the result layer, defaults to the file name without extension
    columns : list of str, optional
        Attribute columns to load; all columns when None

    Returns:
    --------
    layer : Layer
        Layer holding the features as a GeoDataFrame
    """
    if not os.path.exists(vector_path):
        raise FileNotFoundError(f"Vector file not found: {vector_path}")

    gdf = gpd.read_file(vector_path, columns=columns) if columns else gpd.read_file(vector_path)
    if gdf.crs is None:
        warnings.warn(f"{vector_path} has no CRS; assign one with set_crs()", stacklevel=2)

    if not layer_name:
        layer_name = os.path.splitext(os.path.basename(vector_path))[0]

    layer = Layer(name=layer_name, type="vector")
    layer.set_objects(gdf)
    layer.source = vector_path
    layer.metadata = {
        "driver": DRIVERS.get(os.path.splitext(vector_path)[1].lower()),
        "geometry_types": sorted(gdf.geom_type.dropna().unique().tolist()),
    }

    if layer_manager:
        layer_manager.add_layer(layer)

    return layer


def read_shapefile(directory, name, layer_manager=None, layer_name=None):
    """Read a shapefile from an extracted archive by its name.

    Parameters:
    -----------
    directory : str
        Directory to search (recursively)
    name : str
        Shapefile name, with or without the .shp extension

    Returns:
    --------
    layer : Layer
    """
    if not name.lower().endswith(".shp"):
        name = f"{name}.shp"

    return read_vector(find_file(directory, name), layer_manager=layer_manager, layer_name=layer_name)


def write_vector(gdf, output_path):
    """Write a GeoDataFrame to a vector file.

    Parameters:
    -----------
    gdf : geopandas.GeoDataFrame
        GeoDataFrame to write
    output_path : str
        Path to the output vector file
    """
    file_extension = os.path.splitext(output_path)[1].lower()
    if file_extension not in DRIVERS:
        raise ValueError(f"Unsupported vector format: {file_extension}")

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    gdf.to_file(output_path, driver=DRIVERS[file_extension])


def layer_to_vector(layer, output_path):
    """Save a layer's objects to a vector file.

    Parameters:
    -----------
    layer : Layer
        Layer to save
    output_path : str
        Path to the output vector file
    """
    if layer.objects is None:
        raise ValueError("Layer has no vector objects")

    write_vector(layer.objects, output_path)

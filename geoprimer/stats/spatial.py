# -*- coding: utf-8 -*-
"""Spatial statistics for layers in geoprimer."""

import pandas as pd

EQUAL_AREA_CRS = "EPSG:6933"


def attach_area_stats(layer, equal_area_crs=EQUAL_AREA_CRS, by=None, area_column="area_km2"):
    """Calculate polygon areas in square kilometres and summarize them.

    Areas are measured in an equal-area projection so that layers in degrees give sensible numbers.
    An `area_km2` column is added to the layer objects.

    Parameters:
    -----------
    layer : Layer
        Polygon layer with a CRS
    equal_area_crs : str
        Projection used for measuring
    by : str, optional
        Column to group by (e.g. 'continent'); features with a missing value form their own NaN group
    area_column : str
        Name of the column receiving the areas

    Returns:
    --------
    stats : dict
        Dictionary with area statistics
    """
    if layer.objects is None:
        return {}

    if len(layer.objects) == 0:
        layer.objects[area_column] = pd.Series(dtype="float64", index=layer.objects.index)
        if by:
            return {"total_area": 0.0, "group_areas": {}, "group_percentages": {}}
        return {"total_area": 0.0, "min_area": 0.0, "max_area": 0.0, "mean_area": 0.0, "median_area": 0.0}

    if layer.objects.crs is None:
        raise ValueError(f"Layer '{layer.name}' has no CRS; areas cannot be measured")

    areas = layer.objects.geometry.to_crs(equal_area_crs).area / 1e6
    layer.objects[area_column] = areas.values

    total_area = float(areas.sum())

    if by and by in layer.objects.columns:
        group_areas = {}
        group_percentages = {}

        for group_value, group in layer.objects.groupby(by, dropna=False):
            group_area = float(group[area_column].sum())
            group_areas[group_value] = group_area
            group_percentages[group_value] = round(group_area / total_area * 100, 2) if total_area else 0.0

        return {
            "total_area": total_area,
            "group_areas": group_areas,
            "group_percentages": group_percentages,
        }

    values = layer.objects[area_column]
    return {
        "total_area": total_area,
        "min_area": float(values.min()),
        "max_area": float(values.max()),
        "mean_area": float(values.mean()),
        "median_area": float(values.median()),
    }


def attach_label_points(layer, prefix="label"):
    """Attach a point inside each feature, useful for placing labels.

    `representative_point` always lies within the polygon, unlike the centroid of a concave shape.
    Coordinates are stored as plain `<prefix>_x` / `<prefix>_y` columns so the layer can still be written to a shapefile.

    Returns:
    --------
    points : geopandas.GeoSeries
        One point per feature
    """
    if layer.objects is None:
        return None

    points = layer.objects.geometry.representative_point()
    layer.objects[f"{prefix}_x"] = points.x.values
    layer.objects[f"{prefix}_y"] = points.y.values
    return points

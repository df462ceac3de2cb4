# -*- coding: utf-8 -*-
"""Basic statistics for layers in geoprimer."""


def attach_count(layer, column=None, value=None):
    """Count features in a layer, optionally only those with a given attribute value.

    Parameters:
    -----------
    layer : Layer
        Layer to count features in
    column : str, optional
        Column to compare against `value`
    value : any, optional
        Value to count

    Returns:
    --------
    count : int
        Number of features
    """
    if layer.objects is None:
        return 0

    if column is not None and value is not None:
        if column not in layer.objects.columns:
            raise ValueError(f"Column '{column}' not found in layer objects")
        return int((layer.objects[column] == value).sum())

    return int(layer.objects.shape[0])


def attach_value_counts(layer, column):
    """Calculate how often each value of an attribute occurs.

    Parameters:
    -----------
    layer : Layer
        Layer to analyze
    column : str
        Attribute column

    Returns:
    --------
    distribution : dict
        Dictionary with counts, percentages and the total
    """
    if layer.objects is None or column not in layer.objects.columns:
        raise ValueError(f"Column '{column}' not found in layer objects")

    counts = layer.objects[column].value_counts()
    total_count = len(layer.objects)
    percentages = (counts / total_count * 100).round(2) if total_count else counts.astype(float)

    return {
        "counts": {str(k): int(v) for k, v in counts.items()},
        "percentages": {str(k): float(v) for k, v in percentages.items()},
        "total": total_count,
    }


def attach_bounds(layer):
    """Bounding box of a layer, like `st_bbox()`.

    Returns:
    --------
    bounds : dict
        minx, miny, maxx, maxy in layer units, empty for an empty layer
    """
    if layer.objects is None or len(layer.objects) == 0:
        return {}

    minx, miny, maxx, maxy = layer.objects.total_bounds
    return {"minx": float(minx), "miny": float(miny), "maxx": float(maxx), "maxy": float(maxy)}

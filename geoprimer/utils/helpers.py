# -*- coding: utf-8 -*-
"""Helpers , Aren't they useful ?"""

import json
import os


def calculate_statistics_summary(layer_manager, output_file=None):
    """Calculate summary statistics for all layers in a layer manager.

    Parameters:
    -----------
    layer_manager : LayerManager
        Layer manager containing layers
    output_file : str, optional
        Path to save the summary to (as JSON)

    Returns:
    --------
    summary : dict
        Dictionary with summary statistics
    """
    summary = {}

    for layer in layer_manager.layers.values():
        layer_summary = {
            "type": layer.type,
            "created_at": str(layer.created_at),
            "parent": layer.parent.name if layer.parent else None,
            "lineage": layer_manager.get_lineage(layer.id),
            "source": layer.source,
            "crs": layer.crs.to_string() if layer.crs is not None else None,
        }

        if layer.objects is not None:
            layer_summary["feature_count"] = len(layer.objects)
            layer_summary["geometry_types"] = sorted(str(t) for t in layer.objects.geom_type.dropna().unique())

            if "area_km2" in layer.objects.columns:
                layer_summary["total_area_km2"] = float(layer.objects["area_km2"].sum())

        if layer.attached_functions:
            layer_summary["functions"] = list(layer.attached_functions.keys())

        summary[layer.name] = layer_summary

    if output_file:
        output_dir = os.path.dirname(output_file)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output_file, "w") as f:
            json.dump(summary, f, indent=2)

    return summary


def memory_usage(layer):
    """Estimate memory usage of a layer in MB.

    Parameters:
    -----------
    layer : Layer
        Layer to calculate memory usage for

    Returns:
    --------
    memory_mb : float
        Estimated memory usage in MB
    """
    if layer.objects is None:
        return 0.0

    memory = int(layer.objects.drop(columns=layer.objects.geometry.name).memory_usage(deep=True).sum())
    # shapely does not report geometry sizes; count coordinates instead
    memory += int(layer.objects.geometry.count_coordinates().sum()) * 16

    return memory / (1024 * 1024)

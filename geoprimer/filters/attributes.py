# -*- coding: utf-8 -*-
"""Subsetting layers by attribute values or by location.

Every filter returns a new layer of type "filter" whose parent is the source layer, so a chain of subsets
can be traced back to the file it came from. The R counterparts are `dplyr::filter()` with `grepl()`,
`%in%` or a logical expression, and `x[mask, ]` for spatial subsetting.
"""

import warnings

import numexpr as ne
import pandas as pd

from ..core.layer import Layer


def _require_column(layer, column):
    if layer.objects is None:
        raise ValueError(f"Layer '{layer.name}' has no vector objects")
    if column not in layer.objects.columns:
        raise ValueError(f"Column '{column}' not found in layer objects")


def _filtered_layer(source_layer, mask, layer_name, metadata, layer_manager):
    result_layer = Layer(name=layer_name, parent=source_layer, type="filter")
    result_layer.set_objects(source_layer.objects[mask.to_numpy()].copy())
    result_layer.source = source_layer.source
    result_layer.metadata = dict(metadata, input_count=len(source_layer), output_count=len(result_layer))

    if len(result_layer) == 0:
        warnings.warn(f"Filter '{metadata['filter_type']}' on layer '{source_layer.name}' selected no features", stacklevel=3)

    if layer_manager:
        layer_manager.add_layer(result_layer)

    return result_layer


def filter_by_substring(source_layer, column, pattern, case=True, regex=False, layer_manager=None, layer_name=None):
    """Keep the features whose attribute contains a substring.

    Parameters:
    -----------
    source_layer : Layer
        Layer to filter
    column : str
        Attribute column to search, non-string columns are compared on their string form
    pattern : str
        Substring (or regular expression when `regex` is True) to look for
    case : bool
        Whether the match is case sensitive
    regex : bool
        Treat `pattern` as a regular expression
    layer_manager : LayerManager, optional
        Layer manager to add the result layer to
    layer_name : str, optional
        Name for the result layer

    Returns:
    --------
    result_layer : Layer
        Layer with the matching features; missing values never match
    """
    _require_column(source_layer, column)

    values = source_layer.objects[column].astype("string")
    mask = values.str.contains(pattern, case=case, regex=regex, na=False).astype(bool)

    if not layer_name:
        layer_name = f"{source_layer.name}_{column}_contains_{pattern}"

    metadata = {
        "filter_type": "substring",
        "column": column,
        "pattern": pattern,
        "case": case,
        "regex": regex,
    }
    return _filtered_layer(source_layer, mask, layer_name, metadata, layer_manager)


def filter_by_value(source_layer, column, values, layer_manager=None, layer_name=None):
    """Keep the features whose attribute equals a value or is one of several values.

    Parameters:
    -----------
    source_layer : Layer
        Layer to filter
    column : str
        Attribute column to compare
    values : scalar or list
        Value, or list of accepted values

    Returns:
    --------
    result_layer : Layer
    """
    _require_column(source_layer, column)

    if isinstance(values, (list, tuple, set)):
        values = list(values)
    else:
        values = [values]

    mask = source_layer.objects[column].isin(values)

    if not layer_name:
        layer_name = f"{source_layer.name}_{column}_in_selection"

    metadata = {"filter_type": "value", "column": column, "values": values}
    return _filtered_layer(source_layer, mask, layer_name, metadata, layer_manager)


def select_by_expression(source_layer, expression, layer_manager=None, layer_name=None):
    """Keep the features for which a boolean expression over their attributes holds.

    Parameters:
    -----------
    source_layer : Layer
        Layer to filter
    expression : str
        Condition such as "pop_est > 1e7" or "(area_km2 < 500) & (pop_est > 1000)"

    Returns:
    --------
    result_layer : Layer
    """
    if source_layer.objects is None:
        raise ValueError(f"Layer '{source_layer.name}' has no vector objects")

    objects = source_layer.objects
    try:
        local_dict = {col: objects[col].values for col in objects.columns if col != objects.geometry.name}
        mask = ne.evaluate(expression, local_dict=local_dict)
        mask = pd.Series(mask, index=objects.index).fillna(False)
    except Exception:
        # numexpr only handles numeric arrays; string comparisons go through pandas
        try:
            mask = objects.eval(expression, engine="python")
        except Exception as e:
            raise ValueError(f"Error evaluating expression '{expression}': {str(e)}") from e

    if not layer_name:
        layer_name = f"{source_layer.name}_selected"

    metadata = {"filter_type": "expression", "expression": expression}
    return _filtered_layer(source_layer, mask.astype(bool), layer_name, metadata, layer_manager)


def select_within(source_layer, mask_layer, layer_manager=None, layer_name=None):
    """Keep the features that intersect any feature of a mask layer.

    Parameters:
    -----------
    source_layer : Layer
        Layer to subset, e.g. stop points
    mask_layer : Layer
        Layer whose geometries define the area of interest, e.g. a filtered set of polygons

    Returns:
    --------
    result_layer : Layer
    """
    if source_layer.objects is None or mask_layer.objects is None:
        raise ValueError("Both layers must have vector objects")

    mask_objects = mask_layer.objects
    if source_layer.objects.crs is not None and mask_objects.crs is not None and mask_objects.crs != source_layer.objects.crs:
        mask_objects = mask_objects.to_crs(source_layer.objects.crs)

    mask = source_layer.objects.intersects(mask_objects.union_all())

    if not layer_name:
        layer_name = f"{source_layer.name}_within_{mask_layer.name}"

    metadata = {"filter_type": "within", "mask_layer": mask_layer.name}
    return _filtered_layer(source_layer, mask, layer_name, metadata, layer_manager)

# -*- coding: utf-8 -*-
"""Functions to create maps and visualize layers."""

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

OVERLAY_COLORS = ["#de1421", "#3437c2", "#0f6b2f", "#ff9f1c", "#cc32cf"]


def _axis_labels(ax, layer):
    if layer.crs is not None and layer.crs.is_geographic:
        ax.set_xlabel("Longitude")
        ax.set_ylabel("Latitude")
    else:
        ax.set_xlabel("X Coordinate")
        ax.set_ylabel("Y Coordinate")


def plot_layer(
    layer,
    attribute=None,
    title=None,
    figsize=(12, 8),
    cmap="viridis",
    color=None,
    edgecolor="black",
    markersize=20,
    ax=None,
):
    """Plot a layer, optionally colored by an attribute.

    Parameters:
    -----------
    layer : Layer
        Layer to plot
    attribute : str, optional
        Column used to color the features; plain geometry plot when None
    title : str, optional
        Plot title
    ax : matplotlib.axes.Axes, optional
        Axes to draw into; a new figure is created when None

    Returns:
    --------
    fig : matplotlib.figure.Figure
    """
    if layer.objects is None:
        raise ValueError("Layer has no vector objects")

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    if title:
        ax.set_title(title)
    elif attribute:
        ax.set_title(f"{attribute} by Feature")
    else:
        ax.set_title(layer.name)

    if attribute:
        if attribute not in layer.objects.columns:
            raise ValueError(f"Attribute '{attribute}' not found in layer objects")
        layer.objects.plot(column=attribute, cmap=cmap, ax=ax, legend=True, edgecolor=edgecolor, markersize=markersize)
    else:
        layer.objects.plot(ax=ax, color=color, edgecolor=edgecolor, markersize=markersize)

    _axis_labels(ax, layer)
    ax.grid(alpha=0.3)
    return fig


def plot_overlay(base_layer, overlay_layers, title=None, figsize=(12, 8), base_color="lightgray", colors=None, legend=True):
    """Plot a base layer in grey with one or more layers drawn on top.

    Overlays in a different CRS are reprojected to the base layer's CRS before drawing.

    Parameters:
    -----------
    base_layer : Layer
        Background layer, e.g. all polygons read from a shapefile
    overlay_layers : Layer or list of Layer
        Layers to highlight, e.g. a filtered subset and a set of points
    colors : list of str, optional
        One color per overlay layer

    Returns:
    --------
    fig : matplotlib.figure.Figure
    """
    if not isinstance(overlay_layers, (list, tuple)):
        overlay_layers = [overlay_layers]
    if not colors:
        colors = OVERLAY_COLORS

    fig, ax = plt.subplots(figsize=figsize)

    base_layer.objects.plot(ax=ax, color=base_color, edgecolor="white", linewidth=0.5)

    patches = []
    for idx, overlay in enumerate(overlay_layers):
        color = colors[idx % len(colors)]
        objects = overlay.objects
        if objects.crs is not None and base_layer.objects.crs is not None and objects.crs != base_layer.objects.crs:
            objects = objects.to_crs(base_layer.objects.crs)

        objects.plot(ax=ax, color=color, edgecolor="black", linewidth=0.5, markersize=25)
        patches.append(mpatches.Patch(color=color, label=f"{overlay.name} ({len(objects)})"))

    if legend and patches:
        ax.legend(handles=patches, loc="lower left")

    ax.set_title(title if title else base_layer.name)
    _axis_labels(ax, base_layer)
    return fig


def plot_categories(layer, column, figsize=(12, 8), legend=True, class_color=None, title=None):
    """Plot features with one color per value of a categorical attribute.

    Parameters:
    -----------
    layer : Layer
        Layer to plot
    column : str
        Categorical attribute column
    class_color : dict, optional
        Mapping of value to hex color; missing values get colors assigned and are added to the dict

    Returns:
    --------
    fig : matplotlib.figure.Figure
    """
    if layer.objects is None or column not in layer.objects.columns:
        raise ValueError(f"Column '{column}' not found in layer objects")
    if class_color is None:
        class_color = {}

    fig, ax = plt.subplots(figsize=figsize)

    class_values = [v for v in layer.objects[column].unique() if v is not None]

    base_colors = plt.cm.tab20(np.linspace(0, 1, max(len(class_values), 1)))

    colors_list = []
    for idx, class_value in enumerate(class_values):
        if class_value in class_color:
            color_hex = class_color[class_value]
        else:
            rgb = base_colors[idx][:3]
            color_hex = "#{:02x}{:02x}{:02x}".format(int(rgb[0] * 255), int(rgb[1] * 255), int(rgb[2] * 255))
            class_color[class_value] = color_hex

        rgb_tuple = tuple(int(color_hex[i : i + 2], 16) / 255 for i in (1, 3, 5))
        colors_list.append(rgb_tuple)

    cmap = ListedColormap(colors_list if colors_list else ["#cccccc"])

    # plot from a copy so the layer objects never carry the helper column
    objects = layer.objects.copy()
    class_map = {value: i for i, value in enumerate(class_values)}
    objects["_class_id"] = objects[column].map(class_map)

    objects.plot(
        column="_class_id",
        cmap=cmap,
        ax=ax,
        edgecolor="black",
        linewidth=0.5,
        legend=False,
        vmin=0,
        vmax=max(len(class_values) - 1, 0),
    )

    if legend and len(class_values) > 0:
        patches = [mpatches.Patch(color=class_color[value], label=str(value)) for value in class_values]
        ax.legend(handles=patches, loc="upper right", title=column)

    ax.set_title(title if title else f"{layer.name} by {column}")
    _axis_labels(ax, layer)
    return fig


def plot_comparison(before_layer, after_layer, attribute=None, figsize=(16, 8), title=None):
    """Plot two layers side by side, e.g. a layer before and after filtering.

    Returns:
    --------
    fig : matplotlib.figure.Figure
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=figsize)

    if title:
        fig.suptitle(title)

    for ax, layer, label in ((ax1, before_layer, "Before"), (ax2, after_layer, "After")):
        if attribute and attribute in layer.objects.columns:
            layer.objects.plot(column=attribute, ax=ax, legend=True)
            ax.set_title(f"{label}: {attribute} ({len(layer)} features)")
        else:
            layer.objects.plot(ax=ax, edgecolor="black", linewidth=0.5)
            ax.set_title(f"{label}: {layer.name} ({len(layer)} features)")
        _axis_labels(ax, layer)

    return fig

# -*- coding: utf-8 -*-
"""Visualization functions for plotting attribute distributions."""

import matplotlib.pyplot as plt
import seaborn as sns


def plot_histogram(layer, attribute, bins=20, figsize=(10, 6), by=None, log_scale=False):
    """Plot a histogram of attribute values.

    Parameters:
    -----------
    layer : Layer
        Layer containing data
    attribute : str
        Attribute to plot
    bins : int
        Number of bins
    figsize : tuple
        Figure size
    by : str, optional
        Column to group by (e.g. 'continent')
    log_scale : bool
        Use a logarithmic x axis, handy for populations and areas

    Returns:
    --------
    fig : matplotlib.figure.Figure
        Figure object
    """
    if layer.objects is None or attribute not in layer.objects.columns:
        raise ValueError(f"Attribute '{attribute}' not found in layer objects")

    fig, ax = plt.subplots(figsize=figsize)

    data = layer.objects.drop(columns=layer.objects.geometry.name)

    if by and by in data.columns:
        sns.histplot(data=data, x=attribute, hue=by, bins=bins, alpha=0.6, log_scale=log_scale, ax=ax)
    else:
        sns.histplot(data=data, x=attribute, bins=bins, log_scale=log_scale, ax=ax)

    ax.set_title(f"Histogram of {attribute}")
    ax.set_xlabel(attribute)
    ax.set_ylabel("Count")

    return fig


def plot_value_counts(distribution, figsize=(10, 6), title=None, top=20):
    """Plot a bar chart from the result of attach_value_counts.

    Returns:
    --------
    fig : matplotlib.figure.Figure
    """
    counts = sorted(distribution.get("counts", {}).items(), key=lambda item: item[1], reverse=True)[:top]
    if not counts:
        raise ValueError("No counts to plot")

    fig, ax = plt.subplots(figsize=figsize)
    labels, values = zip(*counts)
    sns.barplot(x=list(values), y=list(labels), orient="h", ax=ax)

    ax.set_title(title if title else "Value Counts")
    ax.set_xlabel("Count")

    return fig

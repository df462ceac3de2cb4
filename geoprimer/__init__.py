# -*- coding: utf-8 -*-
# geoprimer/__init__.py

"""
geoprimer: Vector data basics in Python, side by side with R
=========================================================================

geoprimer walks through the first steps of working with geographic vector data,
pairing every geopandas/shapely call with its sf counterpart in R.

Key features:
- Point and point-collection construction with a CRS
- One-shot download and extraction of zipped datasets
- Shapefile and CSV (GTFS stops) reading
- Attribute and spatial filtering
- Maps and charts
- A renderable R/Python comparison guide
"""

__version__ = "0.1.0"

from .config import DatasetConfig, load_config

from .core.layer import Layer, LayerManager
from .core.points import create_point, create_points, describe_crs, points_from_records, set_crs, to_crs

from .filters.attributes import filter_by_substring, filter_by_value, select_by_expression, select_within

from .io.download import download_archive, find_file, list_archive_files
from .io.tables import read_csv_points, read_gtfs_stops
from .io.vector import layer_to_vector, read_shapefile, read_vector, write_vector

from .stats.basic import attach_bounds, attach_count, attach_value_counts
from .stats.spatial import attach_area_stats, attach_label_points

from .guide.recipes import Recipe, get_recipe, get_recipes, render_markdown, write_guide

from .utils.helpers import calculate_statistics_summary, memory_usage
from .viz.charts import plot_histogram, plot_value_counts

from .viz.maps import plot_categories, plot_comparison, plot_layer, plot_overlay

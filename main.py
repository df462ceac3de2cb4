# -*- coding: utf-8 -*-
"""Example Workflow!

Runs every step of the R/Python vector data guide against a real dataset and saves the figures.
Pass a YAML config path as the only argument to use another dataset.
"""

import os
import sys

import matplotlib

matplotlib.use("Agg")

from geoprimer import (  # noqa: E402
    DatasetConfig,
    LayerManager,
    attach_area_stats,
    attach_count,
    calculate_statistics_summary,
    create_point,
    create_points,
    describe_crs,
    download_archive,
    filter_by_substring,
    layer_to_vector,
    load_config,
    plot_comparison,
    plot_layer,
    plot_overlay,
    read_gtfs_stops,
    read_shapefile,
    select_within,
    to_crs,
    write_guide,
)


def run_example(config=None):
    """Run Example."""
    if config is None:
        config = DatasetConfig()
    output_dir = config.output_dir
    os.makedirs(output_dir, exist_ok=True)

    manager = LayerManager()

    print("Creating a point...")
    point = create_point(24.9384, 60.1699)
    print(f"Point: {point.wkt}")

    print("\nCreating named points...")
    cities = create_points(
        names=["Helsinki", "Tampere", "Turku"],
        xs=[24.9384, 23.7610, 22.2666],
        ys=[60.1699, 61.4978, 60.4518],
        crs=config.crs,
        layer_manager=manager,
        layer_name="Cities",
    )
    print(cities)
    print(f"CRS: {describe_crs(cities.crs)}")

    cities_tm35 = to_crs(cities, "EPSG:3067", layer_manager=manager, layer_name="Cities_TM35FIN")
    print(cities_tm35.objects[["name", "geometry"]])

    print(f"\nFetching {config.archive_url}...")
    data_dir = download_archive(config.archive_url, config.data_dir, timeout=config.timeout)
    print(f"Data directory: {data_dir}")

    print("\nReading shapefile...")
    polygons = read_shapefile(data_dir, config.shapefile, layer_manager=manager, layer_name="Polygons")
    print(polygons)
    print(polygons.objects.head())

    print(f"\nFiltering {config.name_column} containing '{config.pattern}'...")
    subset = filter_by_substring(
        polygons,
        column=config.name_column,
        pattern=config.pattern,
        layer_manager=manager,
        layer_name="Subset",
    )
    subset.attach_function(attach_count, name="count")
    subset.attach_function(attach_area_stats, name="area_stats")
    print(f"Matching features: {subset.get_function_result('count')}")
    print(subset.objects[[config.name_column, "area_km2"]])

    overlays = [subset]
    if config.stops_file:
        print("\nReading GTFS stops...")
        stops = read_gtfs_stops(os.path.join(data_dir, config.stops_file), layer_manager=manager)
        stops_in_subset = select_within(stops, subset, layer_manager=manager, layer_name="Stops_in_subset")
        print(f"Stops: {len(stops)}, inside subset: {len(stops_in_subset)}")
        overlays.append(stops_in_subset)

    print("\nPlotting...")
    fig1 = plot_layer(polygons, title=polygons.name)
    fig1.savefig(os.path.join(output_dir, "1_polygons.png"))

    fig2 = plot_overlay(polygons, overlays, title=f"{config.name_column} contains '{config.pattern}'")
    fig2.savefig(os.path.join(output_dir, "2_subset.png"))

    fig3 = plot_comparison(polygons, subset, title="Before and after filtering")
    fig3.savefig(os.path.join(output_dir, "3_comparison.png"))

    layer_to_vector(subset, os.path.join(output_dir, "subset.geojson"))
    write_guide(os.path.join(output_dir, "guide.md"))

    summary = calculate_statistics_summary(manager, output_file=os.path.join(output_dir, "summary.json"))
    print(f"\nLayers: {', '.join(summary)}")
    print(f"Subset lineage: {' -> '.join(manager.get_lineage(subset.id))}")
    print(f"Results saved to {output_dir}/")


if __name__ == "__main__":
    run_example(load_config(sys.argv[1]) if len(sys.argv) > 1 else None)

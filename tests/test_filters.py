# -*- coding: utf-8 -*-
"""Tests for attribute and spatial filters."""

import pytest

from geoprimer import filter_by_substring, filter_by_value, read_gtfs_stops, select_by_expression, select_within


def test_filter_by_substring_matches_grepl(countries_layer, manager):
    """Substring filtering keeps exactly the names containing the pattern, like grepl()."""
    guinea = filter_by_substring(countries_layer, "NAME", "Guinea", layer_manager=manager)

    assert sorted(guinea.objects["NAME"]) == ["Equatorial Guinea", "Guinea", "Guinea-Bissau", "Papua New Guinea"]
    assert len(guinea) == 4
    assert guinea.type == "filter"
    assert guinea.parent is countries_layer
    assert guinea.crs == countries_layer.crs
    assert guinea.metadata["input_count"] == 6
    assert guinea.metadata["output_count"] == 4
    assert manager.active_layer is guinea


def test_filter_by_substring_does_not_modify_source(countries_layer):
    """The source layer keeps all its features."""
    filter_by_substring(countries_layer, "NAME", "Guinea")
    assert len(countries_layer) == 6


def test_filter_by_substring_case(countries_layer):
    """Case sensitivity can be switched off."""
    assert len(filter_by_substring(countries_layer, "NAME", "guinea", case=False)) == 4

    with pytest.warns(UserWarning, match="selected no features"):
        result = filter_by_substring(countries_layer, "NAME", "guinea")
    assert len(result) == 0


def test_filter_by_substring_regex(countries_layer):
    """Regular expressions are used only when asked for."""
    assert len(filter_by_substring(countries_layer, "NAME", "^Guinea", regex=True)) == 2

    with pytest.warns(UserWarning):
        assert len(filter_by_substring(countries_layer, "NAME", "^Guinea")) == 0


def test_filter_by_substring_missing_values_never_match(countries_layer):
    """The feature without a name is never selected."""
    result = filter_by_substring(countries_layer, "NAME", "", layer_name="all_named")
    assert len(result) == 5
    assert result.name == "all_named"


def test_filter_by_substring_unknown_column(countries_layer):
    """Unknown columns are rejected."""
    with pytest.raises(ValueError, match="ISO_A3"):
        filter_by_substring(countries_layer, "ISO_A3", "GIN")


def test_filter_by_value(countries_layer):
    """Equality and membership filters."""
    assert len(filter_by_value(countries_layer, "CONTINENT", "Africa")) == 3
    assert len(filter_by_value(countries_layer, "CONTINENT", ["Europe", "Oceania"])) == 2


def test_select_by_expression_numeric(countries_layer):
    """Numeric expressions go through numexpr."""
    large = select_by_expression(countries_layer, "POP_EST > 5000000")
    assert sorted(large.objects["NAME"]) == ["Finland", "Guinea", "Papua New Guinea"]

    combined = select_by_expression(countries_layer, "(POP_EST > 1000000) & (POP_EST < 5000000)")
    assert sorted(combined.objects["NAME"]) == ["Equatorial Guinea", "Guinea-Bissau"]
    assert combined.metadata["expression"] == "(POP_EST > 1000000) & (POP_EST < 5000000)"


def test_select_by_expression_strings(countries_layer):
    """String comparisons fall back to pandas."""
    africa = select_by_expression(countries_layer, "CONTINENT == 'Africa'")
    assert len(africa) == 3


def test_select_by_expression_invalid(countries_layer):
    """Expressions over unknown columns are reported."""
    with pytest.raises(ValueError, match="Error evaluating expression"):
        select_by_expression(countries_layer, "GDP > 10")


def test_select_within(countries_layer, countries_dir):
    """Stops inside the filtered polygons are selected."""
    stops = read_gtfs_stops(countries_dir)
    guinea = filter_by_substring(countries_layer, "NAME", "Guinea")

    inside = select_within(stops, guinea)

    assert list(inside.objects["stop_name"]) == ["Conakry"]
    assert inside.parent is stops
    assert inside.metadata["mask_layer"] == guinea.name


def test_select_within_reprojects_mask(countries_layer, countries_dir):
    """A mask in another CRS is brought into the source CRS first."""
    from geoprimer import to_crs

    stops = read_gtfs_stops(countries_dir)
    finland = to_crs(filter_by_value(countries_layer, "NAME", "Finland"), "EPSG:3067")

    inside = select_within(stops, finland)

    assert sorted(inside.objects["stop_name"]) == ["Rautatientori", "Tampere asema"]

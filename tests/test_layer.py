# -*- coding: utf-8 -*-
"""Tests for the Layer container and the LayerManager."""

import pytest

from geoprimer import Layer, LayerManager, attach_count, filter_by_substring, to_crs


def test_copy_is_independent(countries_layer):
    """A copy has its own features and metadata but keeps CRS, source and lineage."""
    countries_layer.metadata["notes"] = {"checked": False}
    clone = countries_layer.copy()

    assert clone.name == "Countries_copy"
    assert clone.id != countries_layer.id
    assert clone.crs == countries_layer.crs
    assert clone.source == countries_layer.source
    assert clone.parent is countries_layer.parent
    assert len(clone) == len(countries_layer)

    clone.objects.loc[clone.objects.index[0], "NAME"] = "Renamed"
    clone.metadata["notes"]["checked"] = True

    assert countries_layer.objects["NAME"].iloc[0] == "Guinea"
    assert countries_layer.metadata["notes"] == {"checked": False}


def test_copy_of_empty_layer():
    """Copying a layer without features works."""
    clone = Layer(name="empty").copy()
    assert clone.objects is None
    assert len(clone) == 0


def test_function_results(countries_layer):
    """Attached results are looked up by name; unknown names are reported."""
    countries_layer.attach_function(attach_count)
    assert countries_layer.get_function_result("attach_count") == 6

    with pytest.raises(ValueError, match="not attached"):
        countries_layer.get_function_result("area")


def test_str(countries_layer):
    """String form shows type, parent, feature count and CRS."""
    guinea = filter_by_substring(countries_layer, "NAME", "Guinea", layer_name="Guinea")

    assert str(guinea) == "Layer 'Guinea' (type: filter, parent: Countries, features: 4, crs: EPSG:4326)"
    assert str(Layer(name="blank")) == "Layer 'blank' (type: generic, parent: None, features: 0, crs: None)"


def test_get_layer_by_id_and_name(manager, countries_layer):
    """Layers are found by id or name; unknown keys raise ValueError."""
    manager.add_layer(countries_layer)

    assert manager.get_layer(countries_layer.id) is countries_layer
    assert manager.get_layer("Countries") is countries_layer

    with pytest.raises(ValueError, match="Oceans"):
        manager.get_layer("Oceans")
    with pytest.raises(ValueError):
        manager.remove_layer("Oceans")


def test_add_layer_without_activating(manager, countries_layer):
    """Layers can be registered without becoming active."""
    manager.add_layer(countries_layer)
    manager.add_layer(Layer(name="scratch"), set_active=False)

    assert manager.active_layer is countries_layer
    assert manager.get_layer_names() == ["Countries", "scratch"]


def test_remove_active_layer_falls_back(manager, countries_layer):
    """Removing the active layer activates the most recently added remaining one."""
    manager.add_layer(countries_layer)
    guinea = filter_by_substring(countries_layer, "NAME", "Guinea", layer_manager=manager, layer_name="Guinea")
    finland = filter_by_substring(countries_layer, "NAME", "Finland", layer_manager=manager, layer_name="Finland")
    assert manager.active_layer is finland

    manager.remove_layer("Finland")
    assert manager.active_layer is guinea
    assert manager.get_layer_names() == ["Countries", "Guinea"]

    manager.remove_layer(countries_layer.id)
    assert manager.active_layer is guinea
    assert guinea.parent is countries_layer

    manager.remove_layer("Guinea")
    assert manager.active_layer is None
    assert manager.layers == {}


def test_get_layer_names_by_type(manager, countries_layer):
    """Names can be listed for one layer type."""
    manager.add_layer(countries_layer)
    filter_by_substring(countries_layer, "NAME", "Guinea", layer_manager=manager, layer_name="Guinea")

    assert manager.get_layer_names(type="filter") == ["Guinea"]
    assert manager.get_layer_names(type="vector") == ["Countries"]


def test_get_lineage(countries_layer):
    """Lineage runs from the file that was read to the derived layer, registered or not."""
    manager = LayerManager()
    guinea = filter_by_substring(countries_layer, "NAME", "Guinea", layer_manager=manager, layer_name="Guinea")
    projected = to_crs(guinea, "EPSG:3857", layer_manager=manager)

    assert manager.get_lineage(projected.id) == ["Countries", "Guinea", "Guinea_3857"]
    assert manager.get_lineage("Guinea") == ["Countries", "Guinea"]


def test_empty_manager_still_receives_layers(countries_layer):
    """A fresh manager registers the first derived layer."""
    manager = LayerManager()
    guinea = filter_by_substring(countries_layer, "NAME", "Guinea", layer_manager=manager)
    assert manager.active_layer is guinea

# -*- coding: utf-8 -*-
"""Defines the Layer class and related functionality for organizing vector data.

A layer is a light container around a GeoDataFrame: the features themselves plus the bits of bookkeeping a
tutorial step needs to explain where they came from (source file, parent layer, what was done to them).
This module provides the Layer and LayerManager classes. Layers can be created, copied and chained, and they
support attaching functions to calculate additional properties.
"""

import copy
import uuid

import pandas as pd


class Layer:
    """A Layer represents a set of vector features (points or polygons) with associated properties.

    Layers can be read from files, built from coordinates, or derived from filters.
    Each layer can have functions attached to calculate additional properties.
    """

    def __init__(self, name=None, parent=None, type="generic"):
        """Initialize a Layer.

        Parameters:
        -----------
        name : str, optional
            Name of the layer. If None, a unique name will be generated.
        parent : Layer, optional
            Parent layer that this layer is derived from.
        type : str
            Type of layer: "points", "vector", "filter", "reprojected" or "generic"
        """
        self.id = str(uuid.uuid4())
        self.name = name if name else f"Layer_{self.id[:8]}"
        self.parent = parent
        self.type = type
        self.created_at = pd.Timestamp.now()

        self.objects = None
        self.metadata = {}
        self.crs = None
        self.source = None

        self.attached_functions = {}

    def set_objects(self, gdf):
        """Store a GeoDataFrame on the layer and keep the layer CRS in sync with it.

        Returns:
        --------
        self : Layer
            Returns self for chaining
        """
        self.objects = gdf
        self.crs = gdf.crs if gdf is not None else None
        return self

    def attach_function(self, function, name=None, **kwargs):
        """Attach a function to this layer and execute it.

        Parameters:
        -----------
        function : callable
            Function to attach and execute
        name : str, optional
            Name for this function. If None, uses function.__name__
        **kwargs : dict
            Arguments to pass to the function

        Returns:
        --------
        self : Layer
            Returns self for chaining
        """
        func_name = name if name else function.__name__

        result = function(self, **kwargs)

        self.attached_functions[func_name] = {
            "function": function,
            "args": kwargs,
            "result": result,
        }

        return self

    def get_function_result(self, function_name):
        """Get the result of an attached function.

        Parameters:
        -----------
        function_name : str
            Name of the attached function

        Returns:
        --------
        result : any
            Result of the function
        """
        if function_name not in self.attached_functions:
            raise ValueError(f"Function '{function_name}' not attached to this layer")

        return self.attached_functions[function_name]["result"]

    def copy(self):
        """Create a copy of this layer with its own features and metadata.

        Attached function results are not carried over.

        Returns:
        --------
        layer_copy : Layer
            Copy of this layer
        """
        new_layer = Layer(name=f"{self.name}_copy", parent=self.parent, type=self.type)

        if self.objects is not None:
            new_layer.set_objects(self.objects.copy())
        else:
            new_layer.crs = self.crs

        new_layer.metadata = copy.deepcopy(self.metadata)
        new_layer.source = self.source

        return new_layer

    def __len__(self):
        """Number of features in the layer."""
        if self.objects is None:
            return 0
        return len(self.objects)

    def __str__(self):
        """String representation of the layer."""
        parent_name = self.parent.name if self.parent else "None"
        crs = self.crs.to_string() if self.crs is not None else "None"

        return f"Layer '{self.name}' (type: {self.type}, parent: {parent_name}, features: {len(self)}, crs: {crs})"


class LayerManager:
    """Keeps the layers of one session by id and tracks which one was produced last.

    Every reader, filter and reprojection accepts a `layer_manager` argument and registers its result here,
    so the manager doubles as a record of how each layer was derived.
    """

    def __init__(self):
        """Initialize the layer manager."""
        self.layers = {}
        self.active_layer = None

    def add_layer(self, layer, set_active=True):
        """Register a layer.

        Parameters:
        -----------
        layer : Layer
            Layer to add; a layer with the same id is replaced
        set_active : bool
            Whether to make it the active layer

        Returns:
        --------
        layer : Layer
            The added layer
        """
        self.layers[layer.id] = layer

        if set_active:
            self.active_layer = layer

        return layer

    def get_layer(self, layer_id_or_name):
        """Get a layer by id or, failing that, by name (first registered wins)."""
        if layer_id_or_name in self.layers:
            return self.layers[layer_id_or_name]

        for layer in self.layers.values():
            if layer.name == layer_id_or_name:
                return layer

        raise ValueError(f"Layer '{layer_id_or_name}' not found")

    def get_layer_names(self, type=None):
        """Names of the registered layers in registration order, optionally only those of one layer type."""
        return [layer.name for layer in self.layers.values() if type is None or layer.type == type]

    def get_lineage(self, layer_id_or_name):
        """Names from the original layer down to the given one, e.g. ["countries", "Guinea", "Guinea_3067"].

        Parents that were never registered still appear, since the chain follows `Layer.parent`.
        """
        layer = self.get_layer(layer_id_or_name)

        lineage = []
        while layer is not None:
            lineage.append(layer.name)
            layer = layer.parent

        return lineage[::-1]

    def remove_layer(self, layer_id_or_name):
        """Unregister a layer.

        When the removed layer was active, the most recently added remaining layer becomes active.
        Layers derived from it keep their `parent` reference.
        """
        layer = self.get_layer(layer_id_or_name)
        del self.layers[layer.id]

        if self.active_layer is not None and self.active_layer.id == layer.id:
            self.active_layer = list(self.layers.values())[-1] if self.layers else None

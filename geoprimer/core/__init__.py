# -*- coding: utf-8 -*-
"""The core package holds the layer container and the point/CRS building blocks.

Everything else in geoprimer produces or consumes Layer objects.
"""

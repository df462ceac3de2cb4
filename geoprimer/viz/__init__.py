# -*- coding: utf-8 -*-
"""Maps and charts built on matplotlib, geopandas plotting and seaborn."""

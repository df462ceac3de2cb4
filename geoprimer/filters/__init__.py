# -*- coding: utf-8 -*-
"""The filters package subsets layers by attribute or location.

Filters never modify their input; each one returns a derived layer.
"""

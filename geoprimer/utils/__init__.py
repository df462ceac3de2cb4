# -*- coding: utf-8 -*-
"""Small utilities shared by the example script and the tests."""

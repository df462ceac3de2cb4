# -*- coding: utf-8 -*-
"""Statistics that can be attached to layers with Layer.attach_function."""

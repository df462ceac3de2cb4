# -*- coding: utf-8 -*-
"""The guide package holds the paired R and Python snippets and renders them as a markdown document."""

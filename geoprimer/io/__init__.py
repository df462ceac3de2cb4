# -*- coding: utf-8 -*-
"""The io package contains modules for downloading datasets and reading and writing vector and tabular data.

It abstracts file operations and coordinate system handling to facilitate I/O tasks.
"""

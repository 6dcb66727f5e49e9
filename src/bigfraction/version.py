# -*- coding: utf-8 -*-
"""Version of package 'bigfraction'."""

version = '1.0.0'
version_tuple = (1, 0, 0)

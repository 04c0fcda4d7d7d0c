# -*- coding: utf-8 -*-
"""
    Setup file for datatable_filters.
    Use setup.cfg to configure your project.
"""

import sys

from setuptools import setup

if sys.version_info < (3, 8):
    sys.stderr.write("Error: datatable_filters requires Python 3.8 or newer\n")
    sys.exit(1)


if __name__ == "__main__":
    setup()

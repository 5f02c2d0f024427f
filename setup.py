# #!/usr/bin/env python

"""setup.py script for py_ballistics_engine library"""

from setuptools import setup

setup()

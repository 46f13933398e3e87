# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='tally',
  version='0.0.1',
  description='Tally is a library of keyed numeric accumulation, interval binning, and set algebra utilities for Python 3.',
  python_requires='>=3.10',
  packages=['tally', 'utest'],
)

#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

ROWDIFF_PATH = HERE / "rowdiff"


def get_version(path):
    "Read __version__ from a _version.py file without importing the package."
    ns = {}
    with open(path) as f:
        exec(f.read(), ns)
    return ns['__version__']


VERSION = get_version(ROWDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name='rowdiff',
      version=VERSION,
      description='Shortest edit scripts between sequences of records',
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      license='BSD',
      python_requires='>=3.7',
      packages=find_packages(include=['rowdiff', 'rowdiff.*']),
      package_data={
          'rowdiff': ['edit_script.schema.json'],
          'rowdiff.tests': ['files/*.json'],
      },
      install_requires=[
          'colorama',
          'jupyter_core',
          'tabulate',
          'traitlets>=5',
      ],
      extras_require={
          'test': [
              'jsonschema',
              'pytest>=6.0',
          ],
      },
      entry_points={
          'console_scripts': [
              'rowdiff = rowdiff.__main__:main_dispatch',
              'rowdiff-diff = rowdiff.rowdiffapp:main',
              'rowdiff-patch = rowdiff.rowpatchapp:main',
              'rowdiff-show = rowdiff.rowshowapp:main',
          ],
      },
      classifiers=[
          'Intended Audience :: Developers',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
      ],
    )

#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib

HERE = pathlib.Path(__file__).parent.absolute()

MERGEPATCH_PATH = HERE / "mergepatch"


def get_version(path):
    ns = {}
    with open(path) as f:
        exec(f.read(), ns)
    return ns["__version__"]


VERSION = get_version(MERGEPATCH_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="mergepatch",
      version=VERSION,
      description="JSON Merge Patch (RFC 7386): apply, create and compose merge patches",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD-3-Clause",
      packages=find_packages(include=["mergepatch", "mergepatch.*"]),
      python_requires=">=3.8",
      install_requires=[
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
              "pytest-timeout",
          ],
      },
      classifiers=[
          "License :: OSI Approved :: BSD License",
          "Programming Language :: Python :: 3",
      ],
    )

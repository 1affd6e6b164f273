# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .comparing import values_equal
from .generic import diff, create_merge_patch

__all__ = ["diff", "create_merge_patch", "values_equal"]

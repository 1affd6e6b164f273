# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import merge_patches, merge_merge_patches

__all__ = ["merge_patches", "merge_merge_patches"]

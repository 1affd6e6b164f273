# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .config import ApplyOptions, DiffConfig, MergeConfig
from .diffing import diff, create_merge_patch, values_equal
from .errors import (
    MergePatchError, ParseError, TypeMismatchError,
    LengthMismatchError, NestingDepthError)
from .merging import merge_patches, merge_merge_patches
from .patching import patch, apply, apply_with_options
from .utils import resembles_array


__all__ = [
    "__version__",
    "apply", "apply_with_options", "patch", "ApplyOptions",
    "create_merge_patch", "diff", "DiffConfig",
    "merge_merge_patches", "merge_patches", "MergeConfig",
    "values_equal", "resembles_array",
    "MergePatchError", "ParseError", "TypeMismatchError",
    "LengthMismatchError", "NestingDepthError",
    ]

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import mergepatch.log
from ..config import MergeConfig
from ..utils import check_depth, depth_guard, read_json, write_json, value_kind

__all__ = ["merge_patches", "merge_merge_patches"]


def merge_patch_dicts(p1, p2):
    "Combine two dict merge patches, keeping null members of both."
    merged = {}

    # Members of p1 untouched by p2, deletions included
    for key, v1 in p1.items():
        if key not in p2:
            merged[key] = copy.deepcopy(v1)

    for key, v2 in p2.items():
        v1 = p1.get(key)
        if isinstance(v1, dict) and isinstance(v2, dict):
            merged[key] = merge_patch_dicts(v1, v2)
        else:
            # p2 wins, also when either side is a deletion
            merged[key] = copy.deepcopy(v2)

    return merged


def _merge_patches(p1, p2):
    if isinstance(p1, dict) and isinstance(p2, dict):
        return merge_patch_dicts(p1, p2)
    # A non-object p2 replaces whatever p1 produced, and after a
    # non-object p1 the object p2 is applied to an empty object
    return copy.deepcopy(p2)


def merge_patches(p1, p2, config=None):
    """Compose two merge patches into one.

    Applying the result has the same effect as applying p1
    and then p2, for the members the two patches describe.
    """
    if config is None:
        config = MergeConfig()
    check_depth(p1, config.max_depth)
    check_depth(p2, config.max_depth)
    with depth_guard("merge patch"):
        return _merge_patches(p1, p2)


def merge_merge_patches(patch1, patch2, config=None):
    """Compose two merge patch documents into one.

    Takes utf-8 bytes or str, returns the composed patch as
    compact utf-8 JSON with sorted keys.
    """
    if config is None:
        config = MergeConfig()
    p1 = read_json(patch1, "patch1", config.max_depth)
    p2 = read_json(patch2, "patch2", config.max_depth)

    with depth_guard("merge patch"):
        result = write_json(_merge_patches(p1, p2))
    mergepatch.log.debug("Merged %s and %s merge patches (%d bytes)",
                         value_kind(p1), value_kind(p2), len(result))
    return result

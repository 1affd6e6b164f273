# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import mergepatch.log
from ..config import DiffConfig
from ..errors import LengthMismatchError, TypeMismatchError
from ..utils import check_depth, depth_guard, read_json, write_json, value_kind

from .comparing import is_atomic, values_equal

__all__ = ["diff", "create_merge_patch"]


def diff(a, b, config=None):
    """Compute the merge patch that turns json-like value a into b.

    Both objects: the minimal patch of changed members, {} if none.
    Both arrays: a positional patch with one entry per index.
    Both scalars: {} if equal, otherwise b.

    Any other combination raises TypeMismatchError, and arrays
    of unequal length raise LengthMismatchError. Arrays that are
    object members are replaced by b's array instead, see diff_dicts.
    """
    if config is None:
        config = DiffConfig()
    check_depth(a, config.max_depth)
    check_depth(b, config.max_depth)

    if isinstance(a, dict) and isinstance(b, dict):
        with depth_guard("diff"):
            return diff_dicts(a, b)
    elif isinstance(a, list) and isinstance(b, list):
        with depth_guard("diff"):
            return diff_lists(a, b)
    elif is_atomic(a) and is_atomic(b):
        return {} if values_equal(a, b) else b
    raise TypeMismatchError(
        "Cannot create a merge patch from %s to %s" % (value_kind(a), value_kind(b)))


def diff_lists(a, b):
    """Diff two arrays of equal length position by position.

    No index is ever left out: unchanged objects become {}, and
    scalar items repeat the value from b.
    """
    if len(a) != len(b):
        raise LengthMismatchError(
            "Cannot create a merge patch between arrays of length %d and %d" % (len(a), len(b)))

    d = []
    for i, (avalue, bvalue) in enumerate(zip(a, b)):
        if isinstance(avalue, dict) and isinstance(bvalue, dict):
            d.append(diff_dicts(avalue, bvalue))
        elif isinstance(avalue, list) and isinstance(bvalue, list):
            d.append(diff_lists(avalue, bvalue))
        elif is_atomic(avalue) and is_atomic(bvalue):
            d.append(bvalue)
        else:
            raise TypeMismatchError(
                "Cannot create a merge patch from %s to %s at index %d" % (
                    value_kind(avalue), value_kind(bvalue), i))
    return d


def diff_dicts(a, b):
    """Compute the merge patch of two dicts.

    Keys only in a are set to null, keys only in b are copied
    from b, and keys in both are left out if the values are equal.
    Changed dicts are diffed recursively and changed arrays
    positionally. Unlike arrays at the top level or inside another
    array, a member array that differs in length or item shapes does
    not raise: the member becomes a copy of b's array, which is what
    applying a merge patch does with arrays anyway.
    """
    akeys = set(a.keys())
    bkeys = set(b.keys())

    d = {}

    # Sorting keys in loops to get a deterministic diff result
    for key in sorted(akeys - bkeys):
        d[key] = None

    for key in sorted(akeys & bkeys):
        avalue = a[key]
        bvalue = b[key]
        if isinstance(avalue, dict) and isinstance(bvalue, dict):
            dd = diff_dicts(avalue, bvalue)
            if dd:
                d[key] = dd
        elif values_equal(avalue, bvalue):
            continue
        elif isinstance(avalue, list) and isinstance(bvalue, list):
            try:
                d[key] = diff_lists(avalue, bvalue)
            except (LengthMismatchError, TypeMismatchError):
                # Arrays are replaced wholesale when patched anyway
                d[key] = copy.deepcopy(bvalue)
        else:
            d[key] = copy.deepcopy(bvalue)

    for key in sorted(bkeys - akeys):
        d[key] = copy.deepcopy(b[key])

    return d


def create_merge_patch(original, modified, config=None):
    """Create a merge patch between two JSON documents.

    Takes utf-8 bytes or str, returns the patch as compact utf-8
    JSON with sorted keys.
    """
    if config is None:
        config = DiffConfig()
    a = read_json(original, "original", config.max_depth)
    b = read_json(modified, "modified", config.max_depth)

    d = diff(a, b, config=config)

    with depth_guard("diff"):
        result = write_json(d)
    mergepatch.log.debug("Created merge patch from %s to %s (%d bytes)",
                         value_kind(a), value_kind(b), len(result))
    return result

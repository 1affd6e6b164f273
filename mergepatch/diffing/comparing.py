# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..utils import value_kind

__all__ = ["is_atomic", "values_equal"]


def is_atomic(x):
    "Return True for values that diff should treat as a single atomic value."
    return not isinstance(x, (list, dict))


def values_equal(a, b):
    """Deep equality of two decoded JSON values.

    Values of different JSON types are never equal, so unlike ==
    this keeps True and 1 apart. Numbers compare by value, objects
    compare by key set and values regardless of key order, and a
    key holding null is not the same as a missing key.

    Stops at the first mismatch.
    """
    if a is b:
        return True

    kind = value_kind(a)
    if kind != value_kind(b):
        return False

    if kind == "object":
        if len(a) != len(b):
            return False
        for key, avalue in a.items():
            if key not in b:
                return False
            if not values_equal(avalue, b[key]):
                return False
        return True

    elif kind == "array":
        if len(a) != len(b):
            return False
        for avalue, bvalue in zip(a, b):
            if not values_equal(avalue, bvalue):
                return False
        return True

    else:
        return a == b

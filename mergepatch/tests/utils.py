# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import sys
from contextlib import contextmanager

from mergepatch import values_equal


def compare_json(a, b):
    """Compare two JSON texts by value, ignoring formatting and key order."""
    return values_equal(json.loads(a), json.loads(b))


def assert_json_equal(a, b):
    assert compare_json(a, b), "%s != %s" % (a, b)


def create_nested_map(depth):
    """Create nested dicts with 2**(depth+1) - 1 dicts in total.

    Returns the root dict and the number of dicts.
    """
    root = {}
    count = 1
    level = [root]
    for _ in range(depth):
        next_level = []
        for m in level:
            for i in range(2):
                nested = {}
                m["key-%d" % i] = nested
                next_level.append(nested)
        count += len(next_level)
        level = next_level
    return root, count


def nest(value, depth):
    "Wrap value in depth levels of single item lists."
    for _ in range(depth):
        value = [value]
    return value


def _stack_depth():
    frame = sys._getframe(1)
    depth = 0
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


@contextmanager
def recursion_headroom(frames):
    "Lower the recursion limit to allow about `frames` more nested calls."
    old = sys.getrecursionlimit()
    sys.setrecursionlimit(_stack_depth() + frames)
    try:
        yield
    finally:
        sys.setrecursionlimit(old)

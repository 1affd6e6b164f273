# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import mergepatch.log
from .config import ApplyOptions, Global
from .utils import check_depth, depth_guard, read_json, write_json, value_kind


__all__ = ["patch", "apply", "apply_with_options"]


def patch_dict(obj, diff):
    """Merge the members of dict diff into obj.

    obj is treated as an empty dict if it is anything else.
    """
    if not isinstance(obj, dict):
        obj = {}

    newobj = {}
    for key, value in diff.items():
        if value is None:
            # Null deletes the key, absent keys are fine
            continue
        elif isinstance(value, dict):
            newobj[key] = patch_dict(obj.get(key), value)
        else:
            newobj[key] = copy.deepcopy(value)

    # Take items not mentioned in diff
    for key in obj:
        if key not in diff:
            newobj[key] = copy.deepcopy(obj[key])

    return newobj


def _patch(obj, diff):
    if isinstance(diff, dict):
        return patch_dict(obj, diff)
    # Anything but an object replaces the target wholesale
    return copy.deepcopy(diff)


def patch(obj, diff, config=None):
    """Produce a patched version of obj with the given merge patch.

    Object members of the patch are merged recursively into obj,
    null members delete keys. Any other patch value (including
    arrays, whose null items are kept) replaces obj entirely.

    Neither argument is modified.
    """
    if config is None:
        config = Global()
    check_depth(obj, config.max_depth)
    check_depth(diff, config.max_depth)
    with depth_guard("patch"):
        return _patch(obj, diff)


def apply_with_options(document, patch_document, options):
    """Apply a merge patch to a JSON document.

    Takes utf-8 bytes or str, returns the patched document as
    compact utf-8 JSON encoded according to options.
    """
    obj = read_json(document, "document", options.max_depth)
    diff = read_json(patch_document, "patch", options.max_depth)

    with depth_guard("patch"):
        result = write_json(_patch(obj, diff), escape_html=options.escape_html)
    mergepatch.log.debug("Applied %s merge patch to %s (%d bytes)",
                         value_kind(diff), value_kind(obj), len(result))
    return result


def apply(document, patch_document):
    "Apply a merge patch to a JSON document with default options."
    return apply_with_options(document, patch_document, ApplyOptions())

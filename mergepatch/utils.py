# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import math
import re
from contextlib import contextmanager

from .errors import ParseError, NestingDepthError


# Default limit on nesting of arrays and objects in a document
DEFAULT_MAX_DEPTH = 256

# Upper bound for a configured limit, well inside the interpreter's
# default recursion limit of 1000 frames
MAX_DEPTH_LIMIT = 300

# Bytes trimmed before sniffing the shape of a raw document
JSON_WHITESPACE = b" \t\n\r"

_html_escapes = {
    ord("&"): "\\u0026",
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
}

# Line/paragraph separators are valid in JSON strings but not in javascript,
# lone surrogates cannot be written as utf-8
_r_unsafe = re.compile("[\\u2028\\u2029\\ud800-\\udfff]")


def as_text(text):
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf8")
    if not isinstance(text, str):
        raise TypeError("Expected JSON text as bytes or str, got %s" % type(text).__name__)
    return text


def value_kind(value):
    """Name the JSON variant of a decoded value.

    bool is tested before numbers, as bool is a subclass of int.
    """
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "bool"
    elif isinstance(value, (int, float)):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, list):
        return "array"
    elif isinstance(value, dict):
        return "object"
    raise TypeError("Not a JSON value: %r" % (value,))


def check_depth(value, max_depth=DEFAULT_MAX_DEPTH):
    """Raise NestingDepthError if arrays/objects nest deeper than max_depth.

    Walks the value with an explicit stack, so this is safe to call
    on documents too deep for the recursive algorithms.
    """
    stack = [(value, 1)]
    while stack:
        obj, depth = stack.pop()
        if isinstance(obj, dict):
            children = obj.values()
        elif isinstance(obj, list):
            children = obj
        else:
            continue
        if depth > max_depth:
            raise NestingDepthError(
                "Document nesting exceeds the maximum depth of %d" % max_depth)
        stack.extend((child, depth + 1) for child in children)
    return value


@contextmanager
def depth_guard(what="document"):
    """Report a RecursionError in the enclosed block as NestingDepthError.

    Recursive walks use about two frames per level of nesting, so
    a document within max_depth can still exhaust the interpreter's
    recursion limit when called from an already deep stack.
    """
    try:
        yield
    except RecursionError as e:
        raise NestingDepthError(
            "Nesting of %s is too deep to process" % what) from e


def _reject_constant(name):
    raise ValueError("%s is not a valid JSON value" % name)


def _parse_float(text):
    value = float(text)
    if math.isinf(value):
        raise ValueError("Number %s is out of range" % text)
    return value


def read_json(raw, argument=None, max_depth=DEFAULT_MAX_DEPTH):
    """Decode JSON text (utf-8 bytes or str) into python values.

    Raises ParseError for anything that is not a single valid JSON
    document, and NestingDepthError for documents nested deeper
    than max_depth.
    """
    try:
        value = json.loads(
            as_text(raw), parse_float=_parse_float, parse_constant=_reject_constant)
    except RecursionError as e:
        raise NestingDepthError(
            "Document nesting in %s is too deep to decode" % (argument or "input")) from e
    except ValueError as e:
        # Covers json.JSONDecodeError and UnicodeDecodeError
        raise ParseError(
            "Invalid JSON in %s: %s" % (argument or "input", e), argument) from e
    return check_depth(value, max_depth)


def _escape_unsafe(match):
    return "\\u%04x" % ord(match.group())


def write_json(value, escape_html=True):
    """Encode python values as compact utf-8 JSON with sorted keys.

    With escape_html, the characters &, < and > are written as
    unicode escapes so the output is safe to embed in HTML.
    """
    text = json.dumps(
        value,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )
    if escape_html:
        text = text.translate(_html_escapes)
    text = _r_unsafe.sub(_escape_unsafe, text)
    return text.encode("utf8")


def resembles_array(raw):
    """Check whether raw JSON text looks like an array without decoding it.

    Only the first byte after trimming whitespace is inspected, so
    the content itself is not validated.
    """
    if isinstance(raw, str):
        raw = raw.encode("utf8")
    raw = raw.strip(JSON_WHITESPACE)
    return raw[:1] == b"["

# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging

import pytest

import mergepatch.log
from mergepatch import apply, create_merge_patch, merge_merge_patches, ParseError


def test_operations_log_debug_records(caplog):
    with caplog.at_level(logging.DEBUG, logger='mergepatch'):
        apply('{"a": 1}', '{"b": 2}')
        create_merge_patch('{"a": 1}', '{"b": 2}')
        merge_merge_patches('{"a": 1}', '[]')
    messages = [r.getMessage() for r in caplog.records if r.name == 'mergepatch']
    assert messages == [
        "Applied object merge patch to object (13 bytes)",
        "Created merge patch from object to object (16 bytes)",
        "Merged object and array merge patches (2 bytes)",
    ]


def test_errors_are_not_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger='mergepatch'):
        with pytest.raises(ParseError):
            apply('{"a": 1}', '{')
    assert not [r for r in caplog.records if r.name == 'mergepatch']


def test_set_log_level():
    logger = logging.getLogger('mergepatch')
    level = logger.level
    try:
        mergepatch.log.set_mergepatch_log_level(logging.WARNING)
        assert logger.getEffectiveLevel() == logging.WARNING
        mergepatch.log.init_logging(logging.DEBUG)
        assert logger.isEnabledFor(logging.DEBUG)
    finally:
        logger.setLevel(level)

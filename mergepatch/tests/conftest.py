# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from pytest import fixture, skip


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def config_dir(tmpdir, monkeypatch):
    """Fixture for an empty working directory to write config files to"""
    monkeypatch.delenv('MERGEPATCH_CONFIG_PATH', raising=False)
    monkeypatch.chdir(str(tmpdir))
    return tmpdir


@fixture
def write_config(config_dir):
    """Fixture returning a function that writes mergepatch_config.json"""
    def write(config, directory=None):
        target = config_dir if directory is None else directory
        target.join('mergepatch_config.json').write(json.dumps(config))
    return write

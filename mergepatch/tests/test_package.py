# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.


def test_pkg_exports():
    import mergepatch
    for name in mergepatch.__all__:
        assert hasattr(mergepatch, name)


def test_version_info():
    from mergepatch._version import __version__, version_info
    assert __version__.startswith('%d.%d.%d' % version_info[:3])

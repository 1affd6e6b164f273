# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel", "serial"])

version_info = VersionInfo(0, 3, 0, "final", 0)

_specifier_ = {"alpha": "a", "beta": "b", "candidate": "rc", "final": ""}

__version__ = "%d.%d.%d" % version_info[:3]
if version_info.releaselevel != "final":
    __version__ += "%s%d" % (_specifier_[version_info.releaselevel], version_info.serial)

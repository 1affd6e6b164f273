# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from traitlets import Bool, HasTraits, Integer
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .utils import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT


CONFIG_BASENAME = 'mergepatch_config'

# os.pathsep separated list of extra directories to search for config files
CONFIG_PATH_ENV = 'MERGEPATCH_CONFIG_PATH'


class MergePatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c

    @classmethod
    def from_config(cls, entrypoint=None):
        """Create an instance with defaults overridden by config files."""
        if entrypoint is None:
            entrypoint = _entrypoint_names[cls]
        return cls(**build_config(entrypoint))


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """List directories to search for config files, in descending priority."""
    path = [os.getcwd()]
    extra = os.environ.get(CONFIG_PATH_ENV)
    if extra:
        path.extend(p for p in extra.split(os.pathsep) if p)
    return path


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys, as in a merge patch.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if not isinstance(target.get(k), dict):
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, MergePatchConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


class Global(MergePatchConfigurable):

    max_depth = Integer(
        DEFAULT_MAX_DEPTH,
        min=1,
        max=MAX_DEPTH_LIMIT,
        help="Maximum nesting of arrays and objects accepted in a document.",
    ).tag(config=True)


class ApplyOptions(Global):
    """Options for applying a merge patch.

    Construct with defaults using `ApplyOptions()`.
    """

    escape_html = Bool(
        True,
        help="Escape &, < and > in the encoded result.",
    ).tag(config=True)


class DiffConfig(Global):
    pass


class MergeConfig(Global):
    pass


entrypoint_configurables = {
    'apply': ApplyOptions,
    'diff': DiffConfig,
    'merge': MergeConfig,
}

_entrypoint_names = {cls: name for name, cls in entrypoint_configurables.items()}

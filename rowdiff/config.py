import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, List, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


class RowdiffConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


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

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
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
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('rowdiff_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, RowdiffConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(RowdiffConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Comparing(RowdiffConfigurable):

    id_key = Unicode(
        None,
        allow_none=True,
        help="identify items by the value at this key. If unset, "
             "items are identified by comparing their whole value.",
    ).tag(config=True)

    compare_fields = List(
        Unicode(),
        default_value=[],
        help="compare the content of identified items on these keys only. "
             "If empty, the whole values are compared.",
    ).tag(config=True)

    strict = Bool(
        True,
        help="treat items lacking the id key as undiffable. If disabled, "
             "such items are considered different from all others.",
    ).tag(config=True)


class _Printing(RowdiffConfigurable):

    color = Bool(
        True,
        help="whether to use colors in terminal output.",
    ).tag(config=True)


class RowDiff(Global, _Comparing, _Printing):
    pass


class RowPatch(Global):
    pass


class RowShow(Global, _Printing):
    pass


entrypoint_configurables = {
    'rowdiff-diff': RowDiff,
    'rowdiff-patch': RowPatch,
    'rowdiff-show': RowShow,
}

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Enum, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .log import set_notedelta_log_level


OUT_OF_RANGE_POLICIES = ('clamp', 'reject')


class NotedeltaConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    """Return the shared instance of a configurable.

    A new instance picks up values from notedelta_config.json files on
    the config path.
    """
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    disk_config = load_disk_config()
    for c in reversed(cls.mro()):
        if issubclass(c, NotedeltaConfigurable) and c.__name__ in disk_config:
            for name, value in disk_config[c.__name__].items():
                setattr(instance, name, value)
    return instance


def reset_config():
    "Drop the process-wide configurable instances, restoring defaults."
    _config_cache.clear()


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


def config_path():
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def load_disk_config(path=None, include_none=False):
    "Merge all notedelta_config.json files on path into one dict."
    disk_config = {}
    if path is None:
        path = config_path()
    for c in _load_config_files('notedelta_config', path=path):
        recursive_update(disk_config, c, include_none)
    return disk_config


def build_config(section, include_none=False, path=None):
    if section not in section_configurables:
        raise ValueError('Config for section name %r is not defined! Accepted values are %r.' % (
            section, list(section_configurables.keys())
        ))

    disk_config = load_disk_config(path, include_none)

    config = {}
    configurable = section_configurables[section]
    for c in reversed(configurable.mro()):
        if issubclass(c, NotedeltaConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def load_config(path=None):
    """Push values from notedelta_config.json files onto the shared
    configurable instances."""
    for section, cls in section_configurables.items():
        instance = config_instance(cls)
        for name, value in build_config(section, path=path).items():
            setattr(instance, name, value)
    set_notedelta_log_level(config_instance(Global).log_level, set_main=False)


class Global(NotedeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Apply(NotedeltaConfigurable):

    out_of_range = Enum(
        OUT_OF_RANGE_POLICIES,
        'clamp',
        help="What applying a text delta does when a retain or remove runs "
             "past the end of the base string: 'clamp' stops at the end, "
             "'reject' raises OutOfRange.",
    ).tag(config=True)


class PrettyPrint(NotedeltaConfigurable):

    use_color = Bool(
        True,
        help="whether to color pretty-printed deltas.",
    ).tag(config=True)


section_configurables = {
    'global': Global,
    'apply': Apply,
    'prettyprint': PrettyPrint,
}

# coding= utf-8
import json
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

Config = namedtuple('Config', [
    'max_variables',
    'max_name_length',
    'max_program_lines',
    'line_base',
    'line_step',
    'default_save_file',
    'program_extensions',
    'prompt',
])

DEFAULTS = Config(
    max_variables=256,
    max_name_length=31,
    max_program_lines=100,
    line_base=10,
    line_step=10,
    default_save_file='mcl_state.sav',
    program_extensions=('.mcl', '.txt'),
    prompt='MCL> ',
)

_POSITIVE_INTS = ('max_variables', 'max_name_length', 'max_program_lines', 'line_step')


class ConfigError(ValueError): pass


def load_config(path=None):
    """
    Read overrides for :data:`DEFAULTS` from a JSON object in `path`.

    No path, or a path that doesn't exist, means plain defaults. Unknown keys
    are ignored; known keys with unusable values raise :exc:`ConfigError`.
    """
    if path is None:
        return DEFAULTS
    try:
        with open(path, encoding='utf-8') as f:
            raw = json.load(f)
    except FileNotFoundError:
        logger.debug('no config at %s, using defaults', path)
        return DEFAULTS
    except (OSError, ValueError) as e:
        raise ConfigError('cannot read config %s: %s' % (path, e))

    if not isinstance(raw, dict):
        raise ConfigError('config %s must be a JSON object' % path)

    overrides = {}
    for key, value in raw.items():
        if key not in Config._fields:
            logger.warning('ignoring unknown config key %r', key)
            continue
        overrides[key] = _check(key, value)
    return DEFAULTS._replace(**overrides)


def _check(key, value):
    if key in _POSITIVE_INTS or key == 'line_base':
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError('%s must be an integer' % key)
        if key in _POSITIVE_INTS and value < 1:
            raise ConfigError('%s must be at least 1' % key)
        return value
    if key == 'program_extensions':
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError('program_extensions must be a list of strings')
        return tuple(value)
    if not isinstance(value, str):
        raise ConfigError('%s must be a string' % key)
    return value

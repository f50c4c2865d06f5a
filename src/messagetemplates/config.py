'''
Settings for message templates, read from an INI file:

    [TEMPLATES]
    cache_size = 0
    unbound_policy = verbatim
    unbound_sentinel = <unbound>
    invalid_templates = raise

The file is `messagetemplates.ini` in the working directory, unless the MESSAGETEMPLATES_CONFIG environment variable points elsewhere.
A missing file or section simply means all defaults.
'''
import os
from configparser import ConfigParser
from enum import Enum
from typing import NamedTuple

from .core.renderer import UnboundPolicy

SECTION = 'TEMPLATES'
DEFAULT_PATH = 'messagetemplates.ini'
PATH_ENV_VAR = 'MESSAGETEMPLATES_CONFIG'


class InvalidTemplatePolicy(Enum):
    ''' What to do with a raw string that is not a valid template. '''
    RAISE = 'raise'
    LITERAL = 'literal'


class Settings(NamedTuple):
    cache_size: int = 0
    'Maximum number of cached Templates, 0 meaning unbounded.'
    unbound_policy: UnboundPolicy = UnboundPolicy.VERBATIM
    'Render unbound properties as their original `{...}` text, or as `unbound_sentinel`.'
    unbound_sentinel: str = '<unbound>'
    invalid_templates: InvalidTemplatePolicy = InvalidTemplatePolicy.RAISE
    'Propagate GrammarErrors, or fall back to rendering invalid templates as literal text.'

    @staticmethod
    def from_parser(config: ConfigParser) -> 'Settings':
        if SECTION not in config:
            return Settings()
        section = config[SECTION]
        defaults = Settings()

        try:
            cache_size = section.getint('cache_size', defaults.cache_size)
        except ValueError:
            raise ValueError(f'[{SECTION}] cache_size must be an integer, got {section["cache_size"]!r}')
        if cache_size < 0:
            raise ValueError(f'[{SECTION}] cache_size must be non-negative, got {cache_size}')

        return Settings(
            cache_size=cache_size,
            unbound_policy=_get_enum(section, 'unbound_policy', UnboundPolicy, defaults.unbound_policy),
            unbound_sentinel=section.get('unbound_sentinel', defaults.unbound_sentinel),
            invalid_templates=_get_enum(section, 'invalid_templates', InvalidTemplatePolicy, defaults.invalid_templates),
        )

    @staticmethod
    def from_file(path: str=None) -> 'Settings':
        path = path or os.environ.get(PATH_ENV_VAR) or DEFAULT_PATH
        config = ConfigParser(interpolation=None)
        config.read(path)
        return Settings.from_parser(config)


def _get_enum(section, key: str, enum: type[Enum], default: Enum):
    value = section.get(key)
    if value is None:
        return default
    try:
        return enum(value.strip().lower())
    except ValueError:
        options = ', '.join(e.value for e in enum)
        raise ValueError(f'[{SECTION}] {key} must be one of {options}, got {value!r}')

'''
Message templates: strings with named or indexed holes, e.g. "User {username} logged in from {ip}",
captured as structured events (template + bound properties) and rendered back to text on demand.

    >>> import messagetemplates
    >>> event = messagetemplates.capture('User {username} from {ip}', 'alice', '123.45.67.89')
    >>> event['username'].value
    'alice'
    >>> messagetemplates.render(event)
    'User alice from 123.45.67.89'
'''
import configparser
import logging
from typing import Any

from .core import (
    ErrorLog, GrammarError, Template, TextElement, PropertyElement, Operator, Name, Index,
    TemplateCache, CapturedEvent, CapturedProperty, Renderer, UnboundPolicy, Formatter,
    scan, bind, default_formatter, DEFAULT_CACHE,
)
from .config import Settings, InvalidTemplatePolicy
from .message_templates import MessageTemplates

__version__ = '1.0.0'

logger = logging.getLogger(__name__)


def load_default(path: str=None) -> MessageTemplates:
    ''' A MessageTemplates sharing the process-wide cache, configured from the settings file if it is usable. '''
    try:
        return MessageTemplates.from_config(path, cache=DEFAULT_CACHE)
    except (ValueError, configparser.Error) as e:
        logger.error('Invalid message template settings, using the defaults instead: %s', e)
        return MessageTemplates(cache=DEFAULT_CACHE)


DEFAULT = load_default()
'Configured from the settings file at import time, sharing the process-wide template cache.'


def parse(raw: str) -> Template:
    ''' Get the Template for the raw string from the process-wide cache. Raises GrammarError. '''
    return DEFAULT.parse(raw)


def capture(raw: str, *args: Any) -> CapturedEvent:
    return DEFAULT.capture(raw, *args)


def render(event: CapturedEvent, formatter: Formatter=None) -> str:
    return DEFAULT.render(event, formatter)


def format_message(raw: str, *args: Any) -> str:
    return DEFAULT.format(raw, *args)

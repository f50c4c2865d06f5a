'''
MessageTemplates bundles a TemplateCache and a Renderer configured from Settings,
as the one object a logging call-site API needs to capture and render events.
'''
import logging
from lru import LRU
from typing import Any

from .config import Settings, InvalidTemplatePolicy
from .core import Template, TemplateCache, GrammarError, CapturedEvent, Renderer, Formatter, bind, default_formatter

logger = logging.getLogger(__name__)


class MessageTemplates:
    '''
    Parses (with caching), captures and renders message templates according to the given Settings.

    Capturing and rendering never raise for unbound properties or argument-count mismatches.
    Invalid templates raise GrammarError, unless the settings ask to fall back to literal text instead.
    '''
    __slots__ = ('settings', 'cache', 'renderer', 'formatter', '_literals')

    def __init__(self, settings: Settings=None, cache: TemplateCache=None, formatter: Formatter=None):
        self.settings = settings or Settings()
        self.cache = cache if cache is not None else TemplateCache(self.settings.cache_size)
        self.renderer = Renderer(self.settings.unbound_policy, self.settings.unbound_sentinel)
        self.formatter = formatter or default_formatter
        # Literal fallbacks for invalid raw strings, kept apart from the cache which never holds failures
        self._literals: dict[str, Template] | LRU = LRU(self.settings.cache_size) if self.settings.cache_size else {}

    @staticmethod
    def from_config(path: str=None, **kwargs) -> 'MessageTemplates':
        return MessageTemplates(Settings.from_file(path), **kwargs)

    def __repr__(self):
        return f'MessageTemplates({self.settings!r}, {self.cache!r})'

    # ================ Operations

    def parse(self, raw: str) -> Template:
        ''' Get the Template for the raw string, applying the invalid template policy if it does not parse. '''
        if (literal := self._literals.get(raw)) is not None:
            return literal
        try:
            return self.cache.get_or_parse(raw)
        except GrammarError as e:
            if self.settings.invalid_templates is InvalidTemplatePolicy.RAISE:
                raise
            logger.warning('Invalid template %r, rendering it as literal text:\n%s', raw, e.errors)
            literal = self._literals[raw] = Template.literal(raw)
            return literal

    def capture(self, raw: str, *args: Any) -> CapturedEvent:
        ''' Parse the raw string and bind the arguments to it. '''
        return bind(self.parse(raw), args)

    def render(self, event: CapturedEvent, formatter: Formatter=None) -> str:
        return self.renderer.render(event, formatter or self.formatter)

    def format(self, raw: str, *args: Any) -> str:
        ''' Capture and immediately render, for when the structured event itself is not needed. '''
        return self.render(self.capture(raw, *args))

    def deserialize(self, values: dict) -> CapturedEvent:
        ''' Revive a serialized CapturedEvent, sharing this object's cache. '''
        return CapturedEvent.deserialize(values, self.cache)

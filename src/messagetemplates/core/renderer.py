'''
The Renderer substitutes a CapturedEvent's values back into its Template, yielding human-readable text.

Formatting of the values themselves is entirely up to a formatter function `(value, format) -> str`,
the Renderer only takes care of text, alignment and properties that were never bound.
'''
import builtins
import logging
from enum import Enum
from typing import Any, Callable

from .template import TextElement, PropertyElement
from .binder import CapturedEvent

logger = logging.getLogger(__name__)

Formatter = Callable[[Any, str | None], str]


def default_formatter(value: Any, format: str=None) -> str:
    '''
    Context-appropriate default stringification: `None` becomes "null",
    and a format string is applied as a Python format spec, if it applies to the value at all.
    Never raises on account of the format: whatever goes wrong, the value falls back to `str(value)`.
    '''
    if value is None:
        return 'null'
    if format is None:
        return str(value)
    try:
        return builtins.format(value, format)
    except Exception as e:
        logger.debug('Format %r does not apply to %r (%r), falling back to str()', format, value, e)
        return str(value)


class UnboundPolicy(Enum):
    ''' What to render in place of a property that has no bound value. '''
    VERBATIM = 'verbatim'
    SENTINEL = 'sentinel'


class Renderer:
    '''
    Class rendering CapturedEvents to text according to a fixed unbound-property policy.
    Stateless after construction: may be used any number of times, concurrently even.
    '''
    __slots__ = ('unbound_policy', 'sentinel')

    def __init__(self, unbound_policy: UnboundPolicy=UnboundPolicy.VERBATIM, sentinel: str='<unbound>'):
        self.unbound_policy = unbound_policy
        self.sentinel = sentinel

    def __repr__(self):
        return f'Renderer(unbound_policy={self.unbound_policy.value}, sentinel={self.sentinel!r})'

    def render(self, event: CapturedEvent, formatter: Formatter=None) -> str:
        ''' Render the event's Template, filling in its bound values using the formatter. '''
        formatter = formatter or default_formatter
        pieces = []
        for element in event.template.elements:
            if isinstance(element, TextElement):
                pieces.append(element.text)
            elif element.key in event:
                pieces.append(self.render_property(element, event[element.key].value, formatter))
            elif self.unbound_policy is UnboundPolicy.SENTINEL:
                pieces.append(self.sentinel)
            else:
                pieces.append(str(element))
        return ''.join(pieces)

    @staticmethod
    def render_property(prop: PropertyElement, value: Any, formatter: Formatter) -> str:
        text = formatter(value, prop.format)
        return align(text, prop.alignment)


def align(text: str, alignment: int | None) -> str:
    ''' Pad the text with spaces to a minimum width; right-justified for positive alignment, left-justified for negative. '''
    if alignment is None:
        return text
    if alignment < 0:
        return text.ljust(-alignment)
    return text.rjust(alignment)


DEFAULT_RENDERER = Renderer()


def render(event: CapturedEvent, formatter: Formatter=None) -> str:
    ''' Render the event using the default (verbatim) unbound-property policy. '''
    return DEFAULT_RENDERER.render(event, formatter)

'''
A Template is the parsed, immutable form of a raw message template string.
Its raw string doubles as the identity of the "event type" of every event captured with it.
'''

from .template_element import TextElement, PropertyElement, TemplateElement


class Template:
    '''
    Class representing a parsed message template: an ordered sequence of TextElements and PropertyElements.

    Templates are never modified after construction; two Templates parsed from the same raw string are equal.
    Use `Template.from_string` to parse a raw string directly, or go through a TemplateCache to avoid re-parsing.
    '''
    __slots__ = ('raw', 'elements', 'properties', 'is_index_mode')

    raw: str
    elements: tuple[TemplateElement, ...]
    properties: tuple[PropertyElement, ...]
    is_index_mode: bool

    def __init__(self, raw: str, elements: list[TemplateElement]):
        object.__setattr__(self, 'raw', raw)
        object.__setattr__(self, 'elements', tuple(elements))
        object.__setattr__(self, 'properties', tuple(e for e in self.elements if isinstance(e, PropertyElement)))
        # A template without any properties is considered index mode, it binds nothing either way
        object.__setattr__(self, 'is_index_mode', all(p.is_index for p in self.properties))

    @staticmethod
    def from_string(raw: str) -> 'Template':
        ''' Scans and parses the raw string, without consulting any cache. Raises GrammarError. '''
        return parser.parse(scanner.scan(raw), raw)

    @staticmethod
    def literal(raw: str) -> 'Template':
        ''' A Template rendering the entire raw string as-is, used as a fallback for invalid templates. '''
        return Template(raw, [TextElement(raw)] if raw else [])

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')
    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    # ================ Properties

    @property
    def property_names(self) -> list[str | int]:
        ''' The distinct keys of this Template's properties, in order of first appearance. '''
        return list(dict.fromkeys(p.key for p in self.properties))

    # ================ Representation

    def __repr__(self):
        return 'Template(%s)' % ', '.join(repr(x) for x in self.elements)
    def __str__(self):
        return self.raw
    def __eq__(self, other):
        if not isinstance(other, Template):
            return NotImplemented
        return self.raw == other.raw and self.elements == other.elements
    def __hash__(self):
        return hash(self.raw)


# Circular imports
from .. import scanner, parser

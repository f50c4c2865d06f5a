'''
The Capture Binder pairs a Template's properties with the arguments given at a call site, yielding a CapturedEvent.

Binding is either by index (`{0}`, `{1}`, ... pick `args[0]`, `args[1]`, ...),
or by name (`{user}`, `{ip}`, ... pick `args[0]`, `args[1]`, ... in order of appearance, regardless of their names).
Too few arguments leave properties unbound, too many are ignored; neither is an error.
'''
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, NamedTuple

from .template import Template, Operator
from .template_cache import TemplateCache, DEFAULT_CACHE


class CapturedProperty(NamedTuple):
    '''
    A captured value, tagged with the capture intent of the property's operator.
    The binder does not act on the intent, that is up to whoever formats or serializes the value.
    '''
    value: Any
    operator: Operator = Operator.NONE

    @property
    def preserve_structure(self) -> bool:
        return self.operator is Operator.STRUCTURE

    @property
    def stringify(self) -> bool:
        return self.operator is Operator.STRINGIFY


class CapturedEvent(Mapping):
    '''
    Class representing a Template together with the values bound to its properties at a single call site.

    Acts as a read-only ordered mapping of property key (name or index) to CapturedProperty,
    containing only the properties that were actually bound.
    '''
    CURRENT_VERSION = 1
    __slots__ = ('template', '_properties')

    template: Template
    _properties: dict[str | int, CapturedProperty]

    def __init__(self, template: Template, properties: dict[str | int, CapturedProperty]):
        object.__setattr__(self, 'template', template)
        object.__setattr__(self, '_properties', dict(properties))

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    # ================ Mapping

    def __getitem__(self, key: str | int) -> CapturedProperty:
        return self._properties[key]
    def __iter__(self) -> Iterator[str | int]:
        return iter(self._properties)
    def __len__(self):
        return len(self._properties)

    @property
    def values_by_key(self) -> dict[str | int, Any]:
        ''' The plain captured values, without operator tags. '''
        return {key: prop.value for key, prop in self._properties.items()}

    def __repr__(self):
        return 'CapturedEvent(%r, {%s})' % (self.template.raw, ', '.join(f'{k!r}: {p.value!r}' for k, p in self._properties.items()))
    def __eq__(self, other):
        if not isinstance(other, CapturedEvent):
            return NotImplemented
        return self.template == other.template and self._properties == other._properties
    def __hash__(self):
        return hash(self.template)

    # ================ Serialization ================

    def serialize(self) -> dict:
        ''' The (template string, property map) pair as a JSON-friendly dict, index keys written as strings. '''
        return {
            '_version': CapturedEvent.CURRENT_VERSION,
            'template': self.template.raw,
            'properties': {str(key): prop.value for key, prop in self._properties.items()},
        }

    @classmethod
    def deserialize(cls, values: dict, cache: TemplateCache=None) -> 'CapturedEvent':
        ''' Revive a serialized CapturedEvent, re-parsing its template through the given (or the default) cache. '''
        version = values.get('_version', cls.CURRENT_VERSION)
        if version > cls.CURRENT_VERSION:
            raise ValueError(f'Cannot deserialize CapturedEvent of version {version}, newest known version is {cls.CURRENT_VERSION}')

        template = (cache if cache is not None else DEFAULT_CACHE).get_or_parse(values['template'])
        serialized: dict = values.get('properties', {})

        properties = {}
        for prop in template.properties:
            if prop.key in properties:
                continue
            if (str_key := str(prop.key)) in serialized:
                properties[prop.key] = CapturedProperty(serialized[str_key], prop.operator)
        return cls(template, properties)


def bind(template: Template, args: Sequence[Any]) -> CapturedEvent:
    ''' Bind the given argument list to the Template's properties. '''
    properties: dict[str | int, CapturedProperty] = {}

    if template.is_index_mode:
        for prop in template.properties:
            index = prop.key
            if index < len(args) and index not in properties:
                properties[index] = CapturedProperty(args[index], prop.operator)
    else:
        # Names are unique in a valid template, so zip pairs each one with its positional argument
        for prop, arg in zip(template.properties, args):
            properties[prop.key] = CapturedProperty(arg, prop.operator)

    return CapturedEvent(template, properties)

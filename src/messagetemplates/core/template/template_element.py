'''
There are two types of Template Elements:

    * Text: e.g. `User `, ` from `, `{literal}` (written as `{{literal}}`)
        Literal runs of text, rendered verbatim.

    * Property: e.g. {0}, {username}, {@user}, {$user}, {count,5}, {elapsed:0.00}, {@order,-20:g}
        Holes which are filled in by the bound value of the property with the given designator,
        optionally tagged with a capture operator, aligned to a minimum width and formatted with an opaque format string.
'''

from enum import Enum
from typing import NamedTuple, TypeAlias
from pyparsing import ParseResults


class TextElement(NamedTuple):
    ''' A literal run of text inside a Template, with escaped braces already unescaped. '''
    text: str

    def __repr__(self):
        return 'Text(%s)' % repr(self.text)
    def __str__(self):
        return self.text.replace('{', '{{').replace('}', '}}')


class Operator(Enum):
    ''' Capture operator of a property, telling the sink how to capture its value. '''
    NONE = ''
    STRUCTURE = '@'
    STRINGIFY = '$'


class Name(NamedTuple):
    ''' Designates a property by its name, e.g. {username} '''
    name: str

    @property
    def key(self) -> str:
        return self.name
    def __str__(self):
        return self.name


class Index(NamedTuple):
    ''' Designates a property by its index into the argument list, e.g. {0} '''
    index: int

    @property
    def key(self) -> int:
        return self.index
    def __str__(self):
        return str(self.index)


Designator: TypeAlias = Name | Index


class PropertyElement(NamedTuple):
    ''' A single parsed `{...}` hole inside a Template. '''
    designator: Designator
    operator: Operator = Operator.NONE
    alignment: int | None = None
    format: str | None = None
    source: str | None = None

    @staticmethod
    def from_parsed(result: ParseResults, source: str=None):
        designator = result['designator']
        return PropertyElement(
            designator=Index(int(designator)) if designator.isdigit() else Name(designator),
            operator=Operator(result.get('operator', '')),
            alignment=int(a) if (a := result.get('alignment')) is not None else None,
            format=result.get('format'),
            source=source,
        )

    @property
    def key(self) -> str | int:
        ''' The key this property is bound under in a CapturedEvent. '''
        return self.designator.key

    @property
    def is_index(self) -> bool:
        return isinstance(self.designator, Index)

    def __repr__(self):
        fields = [repr(self.designator)]
        if self.operator is not Operator.NONE: fields.append(f'operator={self.operator.value}')
        if self.alignment is not None: fields.append(f'alignment={self.alignment}')
        if self.format is not None: fields.append(f'format={self.format!r}')
        return 'Property(%s)' % ', '.join(fields)
    def __str__(self):
        if self.source is not None:
            return self.source
        return '{%s%s%s%s}' % (
            self.operator.value,
            self.designator,
            ',%d' % self.alignment if self.alignment is not None else '',
            ':' + self.format if self.format is not None else '',
        )


TemplateElement: TypeAlias = TextElement | PropertyElement

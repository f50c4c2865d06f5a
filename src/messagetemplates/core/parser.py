'''
The Parser turns the Scanner's tokens into an immutable Template, validating the grammar of each hole
and the consistency of all holes together.
'''
import re
from pyparsing import ParseBaseException

from .state import ErrorLog, GrammarError
from .scanner import RawToken, TextRun, HoleToken
from . import grammar
from .template.template_element import TextElement, PropertyElement, TemplateElement
from .template.template import Template

# An optional operator directly followed by alignment, format or the end of the hole
EMPTY_DESIGNATOR_RE = re.compile(r'[@$]?(?:[,:]|\Z)')


def parse_hole(token: HoleToken, errors: ErrorLog, raw: str=None) -> PropertyElement | None:
    ''' Parse a single hole body into a PropertyElement, or log why it can't be and return None. '''
    # Position of the hole body inside the raw string, used for error messages
    offset = token.start + 1

    if not token.closed:
        if token.end < len(raw or '') and raw[token.end] == '{':
            errors.log(f'Bare `{{` inside property `{token}` at position {token.end}', True)
        else:
            errors.log(f'Unterminated property `{token}` starting at position {token.start}', True)
        return None

    body = token.body
    # Check for a designator ourselves, to give a more useful message than pyparsing would
    if EMPTY_DESIGNATOR_RE.match(body):
        errors.log(f'Empty property name in `{token}` at position {token.start}', True)
        return None

    try:
        parsed = grammar.property_body.parse_string(body, parse_all=True)
    except ParseBaseException as e:
        errors.log_parse_exception(e, offset=offset, line=raw)
        return None

    return PropertyElement.from_parsed(parsed, source=str(token))


def parse(tokens: list[RawToken], raw: str=None) -> Template:
    '''
    Parse the Scanner's tokens into a Template.
    Raises GrammarError listing every problem found, instead of just the first one.
    '''
    if raw is None:
        raw = ''.join(str(t) for t in tokens)

    errors = ErrorLog()
    elements: list[TemplateElement] = []

    for token in tokens:
        if isinstance(token, TextRun):
            if elements and isinstance(elements[-1], TextElement):
                elements[-1] = TextElement(elements[-1].text + token.text)
            else:
                elements.append(TextElement(token.text))
        elif (prop := parse_hole(token, errors, raw)) is not None:
            elements.append(prop)

    validate_designators([e for e in elements if isinstance(e, PropertyElement)], errors)

    if errors.terminal:
        raise GrammarError(errors, raw)
    return Template(raw, elements)


def validate_designators(properties: list[PropertyElement], errors: ErrorLog):
    ''' Make sure the properties are either all named or all indexed, and no name occurs twice. '''
    has_name = any(not p.is_index for p in properties)
    has_index = any(p.is_index for p in properties)
    if has_name and has_index:
        errors.log('Do not mix named properties with indexed properties!', True)

    seen = set()
    for prop in properties:
        if prop.is_index:
            continue
        if prop.key in seen:
            errors.log(f'Property name `{prop.key}` occurs more than once.', True)
        seen.add(prop.key)

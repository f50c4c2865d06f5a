import pytest

from messagetemplates.core import (
    GrammarError, Template, TextElement, PropertyElement, Operator, Name, Index, parse, scan,
)


# --- Elements ---


def test_escaped_text_is_a_single_text_element() -> None:
    template = Template.from_string('{{hi}}')
    assert template.elements == (TextElement('{hi}'),)
    assert template.properties == ()


def test_text_and_properties_in_order() -> None:
    template = Template.from_string('User {username} from {ip}')
    assert [type(e) for e in template.elements] == [TextElement, PropertyElement, TextElement, PropertyElement]
    assert template.elements[0] == TextElement('User ')
    assert template.elements[1].designator == Name('username')
    assert template.elements[2] == TextElement(' from ')
    assert template.elements[3].designator == Name('ip')


def test_full_property() -> None:
    (prop,) = Template.from_string('{@order,-20:g}').elements
    assert prop.designator == Name('order')
    assert prop.operator is Operator.STRUCTURE
    assert prop.alignment == -20
    assert prop.format == 'g'
    assert str(prop) == '{@order,-20:g}'


@pytest.mark.parametrize('raw, designator, operator, alignment, fmt', [
    ('{0}', Index(0), Operator.NONE, None, None),
    ('{$12}', Index(12), Operator.STRINGIFY, None, None),
    ('{007}', Index(7), Operator.NONE, None, None),
    ('{12ab}', Name('12ab'), Operator.NONE, None, None),
    ('{_x_1}', Name('_x_1'), Operator.NONE, None, None),
    ('{count,5}', Name('count'), Operator.NONE, 5, None),
    ('{elapsed:0.00}', Name('elapsed'), Operator.NONE, None, '0.00'),
    ('{a,5:0.00}', Name('a'), Operator.NONE, 5, '0.00'),
    ('{a:x,5}', Name('a'), Operator.NONE, None, 'x,5'),
    ('{a:HH:mm:ss}', Name('a'), Operator.NONE, None, 'HH:mm:ss'),
    ('{a: padded }', Name('a'), Operator.NONE, None, ' padded '),
])
def test_property_grammar(raw, designator, operator, alignment, fmt) -> None:
    (prop,) = Template.from_string(raw).properties
    assert prop.designator == designator
    assert prop.operator is operator
    assert prop.alignment == alignment
    assert prop.format == fmt


def test_str_gives_back_the_raw_string() -> None:
    raw = 'a}b {{c}} {007,05:x} {1}'
    assert str(Template.from_string(raw)) == raw


def test_parse_without_raw_string_reconstructs_it() -> None:
    template = parse(scan('Hi {{there}} {0,3}'))
    assert template.raw == 'Hi {{there}} {0,3}'


def test_parse_without_raw_string_keeps_lone_right_braces() -> None:
    template = parse(scan('a}b {0}}'))
    assert template.raw == 'a}b {0}}'
    assert template == Template.from_string('a}b {0}}')


# --- Designator modes ---


def test_index_mode() -> None:
    assert Template.from_string('{0} {1}').is_index_mode


def test_name_mode() -> None:
    assert not Template.from_string('{a} {b}').is_index_mode


def test_no_properties_is_index_mode() -> None:
    assert Template.from_string('just text').is_index_mode


def test_mixed_designators_are_rejected() -> None:
    with pytest.raises(GrammarError):
        Template.from_string('{0} {a}')


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(GrammarError):
        Template.from_string('{a} and {a}')


def test_duplicate_indices_are_fine() -> None:
    template = Template.from_string('{0} and {0}')
    assert template.property_names == [0]


def test_property_names_in_order() -> None:
    assert Template.from_string('{b} {a} {c}').property_names == ['b', 'a', 'c']


# --- Grammar errors ---


@pytest.mark.parametrize('raw', [
    '{}',           # empty designator
    '{@}',          # operator without designator
    '{,5}',         # alignment without designator
    '{:x}',         # format without designator
    'Hi {name',     # unterminated
    'Hi {',         # unterminated
    '{a{b}',        # bare left brace inside hole
    '{a b}',        # trailing characters
    '{ a}',         # leading whitespace
    '{a,}',         # empty alignment
    '{a,x}',        # non-numeric alignment
    '{a:}',         # empty format
    '{@@a}',        # double operator
    '{a-b}',        # invalid name character
    '{a }',         # trailing whitespace
    '{a,5 }',       # trailing whitespace after alignment
    '{0\t}',        # trailing tab
    '{a\n}',        # trailing newline
])
def test_grammar_errors(raw) -> None:
    with pytest.raises(GrammarError) as exc:
        Template.from_string(raw)
    assert exc.value.raw == raw
    assert exc.value.errors.terminal


def test_all_errors_are_reported_at_once() -> None:
    with pytest.raises(GrammarError) as exc:
        Template.from_string('{} then {a b} then {c')
    assert len(exc.value.errors) == 3


def test_error_messages() -> None:
    with pytest.raises(GrammarError, match='Unterminated property'):
        Template.from_string('Hi {name')
    with pytest.raises(GrammarError, match='Bare `{`'):
        Template.from_string('{a{b}')
    with pytest.raises(GrammarError, match='Empty property name'):
        Template.from_string('{}')
    with pytest.raises(GrammarError, match='more than once'):
        Template.from_string('{a}{a}')
    with pytest.raises(GrammarError, match='Do not mix'):
        Template.from_string('{0}{a}')


# --- Identity ---


def test_parsing_is_idempotent() -> None:
    raw = 'User {@user,-10:x} did {$thing} {{ok}}'
    assert Template.from_string(raw) == Template.from_string(raw)
    assert hash(Template.from_string(raw)) == hash(Template.from_string(raw))


def test_templates_are_immutable() -> None:
    template = Template.from_string('{a}')
    with pytest.raises(AttributeError):
        template.raw = '{b}'


def test_literal_template() -> None:
    template = Template.literal('Hi {name')
    assert template.elements == (TextElement('Hi {name'),)
    assert template.properties == ()

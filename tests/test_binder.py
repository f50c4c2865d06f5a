import pytest

from messagetemplates.core import (
    CapturedEvent, CapturedProperty, Operator, Template, TemplateCache, bind,
)


# --- Name mode ---


def test_name_mode_binds_positionally() -> None:
    event = bind(Template.from_string('User {username} from {ip}'), ['alice', '123.45.67.89'])
    assert dict(event.values_by_key) == {'username': 'alice', 'ip': '123.45.67.89'}
    assert list(event) == ['username', 'ip']


def test_name_mode_ignores_names() -> None:
    event = bind(Template.from_string('{zeta} {alpha}'), [1, 2])
    assert event['zeta'].value == 1
    assert event['alpha'].value == 2


def test_name_mode_excess_arguments_are_ignored() -> None:
    event = bind(Template.from_string('{a}'), [1, 2, 3])
    assert event.values_by_key == {'a': 1}


def test_name_mode_missing_arguments_leave_properties_unbound() -> None:
    event = bind(Template.from_string('{a} {b} {c}'), [1])
    assert event.values_by_key == {'a': 1}
    assert 'b' not in event
    assert 'c' not in event


# --- Index mode ---


def test_index_mode_binds_by_index() -> None:
    event = bind(Template.from_string('{1} before {0}'), ['a', 'b'])
    assert event[1].value == 'b'
    assert event[0].value == 'a'
    assert list(event) == [1, 0]


def test_index_mode_out_of_range_is_unbound() -> None:
    event = bind(Template.from_string('{0} {5}'), ['a'])
    assert event.values_by_key == {0: 'a'}


def test_index_mode_repeated_index_binds_once() -> None:
    event = bind(Template.from_string('{0} {0}'), ['a'])
    assert len(event) == 1


def test_no_properties_binds_nothing() -> None:
    event = bind(Template.from_string('just text'), ['ignored'])
    assert len(event) == 0


# --- Operators ---


def test_operator_intent_is_recorded_not_applied() -> None:
    value = {'id': 7}
    event = bind(Template.from_string('{@order} {$user} {plain}'), [value, ['x'], 3])
    assert event['order'] == CapturedProperty(value, Operator.STRUCTURE)
    assert event['order'].value is value
    assert event['order'].preserve_structure
    assert event['user'].stringify
    assert event['user'].value == ['x']
    assert event['plain'].operator is Operator.NONE


# --- Immutability ---


def test_events_are_immutable() -> None:
    event = bind(Template.from_string('{a}'), [1])
    with pytest.raises(AttributeError):
        event.template = None
    with pytest.raises(TypeError):
        event['a'] = CapturedProperty(2)


# --- Serialization ---


def test_serialize() -> None:
    event = bind(Template.from_string('{1} before {0}'), ['a', 'b'])
    assert event.serialize() == {
        '_version': 1,
        'template': '{1} before {0}',
        'properties': {'1': 'b', '0': 'a'},
    }


def test_deserialize_restores_operators() -> None:
    cache = TemplateCache()
    event = bind(cache.get_or_parse('{@order} by {$user}'), [{'id': 7}, 'bob'])
    revived = CapturedEvent.deserialize(event.serialize(), cache)
    assert revived == event
    assert revived.template is event.template
    assert revived['order'].preserve_structure


def test_deserialize_index_keys() -> None:
    revived = CapturedEvent.deserialize({'template': '{0} {1}', 'properties': {'1': 'b', '7': 'x'}}, TemplateCache())
    assert revived.values_by_key == {1: 'b'}


def test_deserialize_rejects_newer_versions() -> None:
    with pytest.raises(ValueError):
        CapturedEvent.deserialize({'_version': 99, 'template': '{a}', 'properties': {}}, TemplateCache())

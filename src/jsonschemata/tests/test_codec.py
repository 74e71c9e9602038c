import json
import logging

import hypothesis
import jsonschema
import pytest

from jsonschemata import *
from jsonschemata import codec, values
from jsonschemata.tests import strategies


@hypothesis.given(strategies.schemata)
@hypothesis.settings(suppress_health_check=[hypothesis.HealthCheck.too_slow])
def test_round_trip(schema):
    data = schema.json()
    assert loads(data) == schema
    assert json.loads(loads(data).json()) == json.loads(data)


@hypothesis.given(strategies.schemata)
@hypothesis.settings(suppress_health_check=[hypothesis.HealthCheck.too_slow])
def test_meta_schema(schema):
    jsonschema.Draft202012Validator.check_schema(schema.schema())


def test_boolean_shorthand():
    assert dumps(Any()) == b"true"
    assert dumps(Not(Any())) == b"false"
    assert loads("true") == Any()
    assert loads("false") == Not(Any())
    assert dumps(Not(String())) == b'{"not":{"type":"string"}}'
    assert loads('{"not": true}') == Not(Any())
    assert dumps(loads('{"not": true}')) == b"false"


def test_empty_and_any(caplog):
    assert loads("{}") == Empty()
    assert dumps(Empty()) == b"{}"
    with caplog.at_level(logging.DEBUG, logger="jsonschemata"):
        assert loads('{"x": 1}') == Any()
    assert "x" in caplog.text


def test_property_order():
    data = b"""{
        "type": "object",
        "properties": {"zebra": {}, "apple": {}, "middle": {}, "banana": {}}
    }"""
    order = extract_schema_property_order(data)
    assert order == ["zebra", "apple", "middle", "banana"]
    assert list(loads(data, property_order=order).properties) == order
    assert list(loads(data, property_order=["banana"]).properties) == [
        "banana",
        "zebra",
        "apple",
        "middle",
    ]
    options = DecodeOptions(property_order=["middle", "ghost"])
    assert list(loads(data, options).properties) == ["middle", "zebra", "apple", "banana"]


def test_property_order_is_applied_everywhere():
    data = {
        "type": "object",
        "properties": {
            "a": {"type": "object", "properties": {"x": {}, "y": {}}},
            "b": {},
        },
    }
    schema = load(data, property_order=["y", "b"])
    assert list(schema.properties) == ["b", "a"]
    assert list(schema.properties["a"].properties) == ["y", "x"]


def test_property_order_escapes():
    data = r'{"type": "object", "properties": {"a\"b": {}, "c": {}}}'
    order = extract_schema_property_order(data)
    assert order == [r"a\"b", "c"]
    assert list(loads(data, property_order=order[::-1]).properties) == ["c", 'a"b']


def test_decode_options():
    with pytest.raises(TypeError):
        DecodeOptions(property_order="abc")
    with pytest.raises(TypeError):
        loads("{}", DecodeOptions(), property_order=["a"])
    assert DecodeOptions(property_order=[r"\u0061b"]).property_names == [r"\u0061b", "ab"]


def test_primitive():
    schema = loads(
        """{
            "type": "string",
            "title": "name",
            "minLength": 1,
            "format": "date-time",
            "examples": ["2020-01-01T00:00:00Z"],
            "x-extension": true
        }"""
    )
    assert schema == String(
        title="name",
        min_length=1,
        format=Format.DATE_TIME,
        examples=["2020-01-01T00:00:00Z"],
    )
    assert not schema.format.is_custom


def test_numbers():
    assert loads('{"type": "integer", "minimum": 1.0}').minimum == 1
    assert loads('{"type": "number", "minimum": 1}').minimum == 1.0
    assert dumps(Number(minimum=1)) == b'{"type":"number","minimum":1.0}'
    assert loads('{"type": "integer", "default": 42}').default == values.Int(42)
    assert type(loads('{"type": "number", "default": 42.0}').default) is values.Double


def test_object():
    schema = loads(
        """{
            "type": "object",
            "properties": {"name": {"type": "string"}, "tags": {"type": "array", "items": {"type": "string"}}},
            "required": ["name"],
            "additionalProperties": false
        }"""
    )
    assert schema.required == ("name",)
    assert schema.additional_properties.boolean is False
    assert schema.properties["tags"].items == String()
    assert loads('{"type": "object", "additionalProperties": {"type": "integer"}}').additional_properties.subschema == Integer()


def test_empty_collections_are_omitted():
    assert Object().schema() == {"type": "object"}
    assert Object(properties={}, required=[]).schema() == {"type": "object"}
    assert Array().schema() == {"type": "array"}
    assert String(enum=[]).schema() == {"type": "string", "enum": []}


def test_composites():
    data = {"anyOf": [{"type": "string"}, {"$ref": "#/$defs/a"}, False]}
    schema = load(data)
    assert schema == AnyOf(String(), Reference("#/$defs/a"), Not(Any()))
    assert schema.schema() == data
    assert load({"allOf": []}) == AllOf()
    assert load({"oneOf": [True]}).schema() == {"oneOf": [True]}


def test_keyword_precedence():
    assert load({"$ref": "#", "type": "string"}) == Reference("#")
    assert load({"anyOf": [], "allOf": []}) == AnyOf()
    assert load({"not": {}, "type": "string"}) == Not(Empty())
    assert load({"type": "string", "properties": {"a": {}}}) == String()


@pytest.mark.parametrize(
    "data, pointer",
    [
        ('{"type": "unicorn"}', "/type"),
        ('{"type": 1}', "/type"),
        ('{"type": ["string", "null"]}', "/type"),
        ('{"type": "string", "minLength": "1"}', "/minLength"),
        ('{"type": "string", "minLength": 1.5}', "/minLength"),
        ('{"type": "integer", "maximum": true}', "/maximum"),
        ('{"type": "object", "required": ["a", 1]}', "/required/1"),
        ('{"type": "object", "properties": {"a": {"type": "nope"}}}', "/properties/a/type"),
        ('{"type": "object", "properties": []}', "/properties"),
        ('{"type": "array", "items": [{}]}', "/items"),
        ('{"anyOf": {}}', "/anyOf"),
        ('{"allOf": [{}, 1]}', "/allOf/1"),
        ('{"$ref": 1}', "/$ref"),
        ('{"type": "string", "format": 1}', "/format"),
        ('{"type": "string", "examples": 1}', "/examples"),
    ],
)
def test_decode_errors(data, pointer):
    with pytest.raises(DecodeError) as e:
        loads(data)
    assert e.value.pointer == pointer
    assert pointer in str(e.value)


def test_unknown_type_is_named():
    with pytest.raises(DecodeError, match="unicorn"):
        loads('{"type": "unicorn"}')


def test_invalid_json():
    with pytest.raises(DecodeError):
        loads("{")
    with pytest.raises(DecodeError):
        loads("1")
    with pytest.raises(SchemataError):
        loads("[]")


def test_max_depth():
    data = "true"
    for _ in range(20):
        data = f'{{"not": {data}}}'
    assert loads(data, max_depth=20)
    with pytest.raises(DecodeError, match="nesting"):
        loads(data, max_depth=10)


def test_encode():
    assert json.loads(dumps(Object(title="x"), indent=2)) == {"type": "object", "title": "x"}
    assert dumps(Object(title="x", description="y"), sort_keys=True) == b'{"description":"y","title":"x","type":"object"}'
    assert codec.dump(String(format=Format.custom("x-my-format"))) == {"type": "string", "format": "x-my-format"}
    with pytest.raises(EncodeError):
        dumps(Number(minimum=float("inf")))
    with pytest.raises(TypeError):
        codec.dump(1)


def test_keywords_are_case_sensitive():
    assert loads('{"type": "string", "Title": "x", "MinLength": 1, "Format": "uuid"}') == String()
    assert loads('{"type": "object", "Properties": {"a": {}}}').properties == {}


def test_number_range():
    with pytest.raises(DecodeError):
        loads('{"type": "number", "maximum": 1e400}')
    with pytest.raises(DecodeError):
        loads('{"type": "integer", "minimum": ' + "1" * 5000 + "}")

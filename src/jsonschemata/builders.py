"""build schema from json schema documents.

each builder visits the keywords of one json object and dispatches every
keyword to the method named after it (`minLength` -> `MinLength`). keywords
without a method are collected in `nah` and dropped.
"""
import logging

import jsonpointer

from . import schemas, utils, values
from .exceptions import DecodeError
from .formats import Format

logger = logging.getLogger(__name__)


def kind(object):
    """the json name for the type of a python object"""
    if isinstance(object, bool):
        return "boolean"
    if isinstance(object, (list, tuple)):
        return "array"
    for k, v in utils.JSONSCHEMA_PY_MAPPING.items():
        if isinstance(object, v):
            return k
    return type(object).__name__


class Builder:
    schema_type = None
    priority = ["title", "description"]
    ignore = ("type",)

    def __init__(self, schema, options, path=(), depth=0):
        self.schema = schema
        self.options = options
        self.path = path
        self.depth = depth
        self.data = {}
        self.nah = []

    def visit(self):
        priority = self.priority or []
        for k in sorted(self.schema, key=(priority + list(self.schema)).index):
            if k in self.ignore:
                continue
            munge = utils.munge(k)
            if munge != k and callable(getattr(self, munge, None)):
                getattr(self, munge)(k, self.schema[k])
            else:
                self.nah.append(k)
        return self

    def post(self):
        return self.schema_type(**self.data)

    def build(self):
        self.visit()
        if self.nah:
            logger.debug("dropping unsupported keywords %s @%s", self.nah, self.pointer)
        return self.post()

    @property
    def pointer(self):
        return jsonpointer.JsonPointer.from_parts(self.path).path

    def error(self, key, message):
        return DecodeError(message, self.path + (key,))

    def expect(self, key, value, *types):
        if isinstance(value, bool) and bool not in types:
            raise self.error(key, f"{key} must be {types[0].__name__}, found boolean")
        if not isinstance(value, types):
            raise self.error(key, f"{key} must be {types[0].__name__}, found {kind(value)}")
        return value

    def one_for_one(self, key, value):
        self.data[utils.normalize_py_key(key)] = value

    def child(self, key, value, *path):
        return build(value, self.options, self.path + (key,) + path, self.depth + 1)

    def text(self, key, value):
        self.one_for_one(key, self.expect(key, value, str))

    def integer(self, key, value):
        self.expect(key, value, int, float)
        if isinstance(value, float) and not value.is_integer():
            raise self.error(key, f"{key} must be an integer, found {value!r}")
        self.one_for_one(key, int(value))

    def number(self, key, value):
        self.one_for_one(key, float(self.expect(key, value, int, float)))

    def flag(self, key, value):
        self.one_for_one(key, self.expect(key, value, bool))

    def value(self, key, value):
        self.one_for_one(key, values.get_value(value))

    def value_list(self, key, value):
        self.one_for_one(key, values.get_value(self.expect(key, value, list)))


class MetaBuilder(Builder):
    """the annotations shared by every typed schema"""

    Title = Description = Builder.text
    Default = Const = Builder.value
    Examples = Enum = Builder.value_list


class ObjectBuilder(MetaBuilder):
    schema_type = schemas.Object

    def Properties(self, key, value):
        self.expect(key, value, dict)
        self.data["properties"] = schemas.Properties(
            (k, self.child(key, v, k)) for k, v in value.items()
        )

    def Required(self, key, value):
        for i, x in enumerate(self.expect(key, value, list)):
            if not isinstance(x, str):
                raise DecodeError(f"required names must be strings, found {kind(x)}", self.path + (key, i))
        self.one_for_one(key, tuple(value))

    def AdditionalProperties(self, key, value):
        if not isinstance(value, bool):
            value = self.child(key, value)
        self.one_for_one(key, schemas.AdditionalProperties(value))

    def post(self):
        order = self.options.property_names
        if order and "properties" in self.data:
            self.data["properties"] = self.data["properties"].ordered(order)
        return super().post()


class ArrayBuilder(MetaBuilder):
    schema_type = schemas.Array
    MinItems = MaxItems = Builder.integer
    UniqueItems = Builder.flag

    def Items(self, key, value):
        self.one_for_one(key, self.child(key, value))


class StringBuilder(MetaBuilder):
    schema_type = schemas.String
    MinLength = MaxLength = Builder.integer
    Pattern = Builder.text

    def Format(self, key, value):
        self.one_for_one(key, Format(self.expect(key, value, str)))


class NumberBuilder(MetaBuilder):
    schema_type = schemas.Number
    Minimum = Maximum = ExclusiveMinimum = ExclusiveMaximum = MultipleOf = Builder.number


class IntegerBuilder(MetaBuilder):
    schema_type = schemas.Integer
    Minimum = Maximum = ExclusiveMinimum = ExclusiveMaximum = MultipleOf = Builder.integer


class BooleanBuilder(MetaBuilder):
    schema_type = schemas.Boolean


class NullBuilder(Builder):
    schema_type = schemas.Null


BUILDERS = dict(
    object=ObjectBuilder,
    array=ArrayBuilder,
    string=StringBuilder,
    number=NumberBuilder,
    integer=IntegerBuilder,
    boolean=BooleanBuilder,
    null=NullBuilder,
)

# the un-typed keywords, checked in this order before `type`
COMPOSITES = ("$ref", "anyOf", "allOf", "oneOf", "not")


def build(object, options, path=(), depth=0):
    """build a schema from a json schema document given as python data"""
    if depth > options.max_depth:
        raise DecodeError(f"schema nesting exceeds {options.max_depth} levels", path)

    if isinstance(object, bool):
        return schemas.Any() if object else schemas.Not(schemas.Any())

    if not isinstance(object, dict):
        raise DecodeError(f"expected a schema, found {kind(object)}", path)

    for key in COMPOSITES:
        if key in object:
            return build_composite(key, object[key], options, path + (key,), depth + 1)

    if "type" not in object:
        if not object:
            return schemas.Empty()
        logger.debug("a schema without a type is unconstrained, dropping %s", list(object))
        return schemas.Any()

    type = object["type"]
    if not isinstance(type, str):
        raise DecodeError(f"type must be a string, found {kind(type)}", path + ("type",))
    if type not in BUILDERS:
        raise DecodeError(f"unknown schema type: {type!r}", path + ("type",))
    return BUILDERS[type](object, options, path, depth).build()


def build_composite(key, value, options, path, depth):
    if key == "$ref":
        if not isinstance(value, str):
            raise DecodeError(f"$ref must be a string, found {kind(value)}", path)
        return schemas.Reference(value)

    if key == "not":
        return schemas.Not(build(value, options, path, depth))

    if not isinstance(value, list):
        raise DecodeError(f"{key} must be an array, found {kind(value)}", path)
    cls = dict(anyOf=schemas.AnyOf, allOf=schemas.AllOf, oneOf=schemas.OneOf)[key]
    return cls([build(x, options, path + (i,), depth) for i, x in enumerate(value)])

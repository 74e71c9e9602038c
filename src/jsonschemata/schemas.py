"""the json schema model.

a schema is one of a closed set of alternatives. the primitive alternatives
mirror the json types and carry the annotations and constraints that apply to
them; the rest compose other schema.

>>> person = Object(
...     title="Person",
...     properties=dict(name=String(min_length=1), age=Integer(minimum=0)),
...     required=["name"],
... )
>>> list(person.properties)
['name', 'age']
>>> person.schema()
{'type': 'object', 'title': 'Person', 'properties': {'name': {'type': 'string', 'minLength': 1}, 'age': {'type': 'integer', 'minimum': 0}}, 'required': ['name']}
"""
import collections.abc
import types

from . import mixins, utils, values
from .formats import Format
from .utils import EMPTY, register

__all__ = (
    "Schema",
    "Object",
    "Array",
    "String",
    "Number",
    "Integer",
    "Boolean",
    "Null",
    "Reference",
    "AnyOf",
    "AllOf",
    "OneOf",
    "Not",
    "Empty",
    "Any",
    "AdditionalProperties",
    "Properties",
    "get_schema",
)


def text(object):
    if not isinstance(object, str):
        raise TypeError(f"expected a string, not {type(object).__name__}")
    return str(object)


def flag(object):
    if not isinstance(object, bool):
        raise TypeError(f"expected a bool, not {type(object).__name__}")
    return bool(object)


def integer(object):
    if isinstance(object, bool) or not isinstance(object, (int, float)):
        raise TypeError(f"expected an integer, not {type(object).__name__}")
    if isinstance(object, float) and not object.is_integer():
        raise TypeError(f"expected an integer, not {object!r}")
    return int(object)


def number(object):
    if isinstance(object, bool) or not isinstance(object, (int, float)):
        raise TypeError(f"expected a number, not {type(object).__name__}")
    return float(object)


def value_list(object):
    return tuple(map(values.get_value, object))


def names(object):
    if isinstance(object, str):
        raise TypeError("expected a sequence of names, not a string")
    return tuple(map(text, object))


def schema_list(object):
    return tuple(map(get_schema, object))


class Schema(mixins.SchemaOps):
    """the base of the json schema alternatives.

    `keywords` maps each python keyword argument to the callable that coerces
    its input. unset keywords read as None, or as the `defaults` entry.
    """

    __slots__ = ("__schema__",)
    type = None
    keywords = {}
    defaults = {}
    positional = None
    # keywords where None is the json null rather than unset
    nullable = ("default", "const")

    def __init__(self, **schema):
        unknown = [k for k in schema if k not in self.keywords]
        if unknown:
            raise TypeError(f"{type(self).__name__} does not take {', '.join(unknown)}")
        data = {}
        for k, coerce in self.keywords.items():
            v = schema.get(k, EMPTY)
            if v is EMPTY or (v is None and k not in self.nullable):
                continue
            v = coerce(v)
            if k in self.defaults and not v:
                continue
            data[k] = v
        object.__setattr__(self, "__schema__", types.MappingProxyType(data))

    @classmethod
    def of(cls, object):
        """convert python literals to schema"""
        return get_schema(object)

    def __getattr__(self, key):
        if not key.startswith("__") and key in self.keywords:
            return self.__schema__.get(key, self.defaults.get(key))
        raise AttributeError(f"{type(self).__name__} has no attribute {key!r}")

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} schema are immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} schema are immutable")

    def __reduce__(self):
        return rebuild, (type(self), dict(self.__schema__))

    def __repr__(self):
        if self.positional:
            args = utils.enforce_tuple(self.__schema__.get(self.positional))
            return f"{type(self).__name__}({', '.join(map(repr, args))})"
        return f"{type(self).__name__}({', '.join(f'{k}={v!r}' for k, v in self.__schema__.items())})"

    def schema(self):
        """the json schema document for this schema as python data"""
        from .codec import dump

        return dump(self)

    def json(self, indent=None, sort_keys=False):
        """the json schema document for this schema as bytes"""
        from .codec import dumps

        return dumps(self, indent=indent, sort_keys=sort_keys)


def rebuild(cls, schema):
    self = cls.__new__(cls)
    object.__setattr__(self, "__schema__", types.MappingProxyType(schema))
    return self


class Properties(collections.abc.Mapping):
    """an immutable mapping of property names to schema that keeps its insertion order.

    equality ignores the order, iteration honors it.
    """

    __slots__ = ("_data",)

    def __init__(self, *args, **kwargs):
        data = {}
        for k, v in dict(*args, **kwargs).items():
            data[text(k)] = get_schema(v)
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self):
        return len(self._data)

    def __hash__(self):
        return hash(frozenset(self._data.items()))

    def __repr__(self):
        return f"Properties({self._data!r})"

    def ordered(self, order):
        """a copy with the names in `order` first and the rest after, in their current order.

        >>> list(Properties(a=Empty(), b=Empty(), c=Empty()).ordered(["c", "a"]))
        ['c', 'a', 'b']
        """
        keys = [k for k in dict.fromkeys(order) if k in self._data]
        keys += [k for k in self._data if k not in keys]
        return Properties((k, self._data[k]) for k in keys)


class AdditionalProperties:
    """the `additionalProperties` keyword: either a boolean flag or a schema.

    >>> AdditionalProperties(False).boolean
    False
    >>> AdditionalProperties(String()).subschema
    String()
    """

    __slots__ = ("value",)

    def __init__(self, value):
        if not isinstance(value, (bool, Schema)):
            raise TypeError(f"expected a bool or a schema, not {type(value).__name__}")
        object.__setattr__(self, "value", value)

    @classmethod
    def of(cls, object):
        if isinstance(object, AdditionalProperties):
            return object
        if isinstance(object, bool):
            return cls(object)
        return cls(get_schema(object))

    @property
    def boolean(self):
        if isinstance(self.value, bool):
            return self.value

    @property
    def subschema(self):
        if isinstance(self.value, Schema):
            return self.value

    def __setattr__(self, key, value):
        raise AttributeError("AdditionalProperties are immutable")

    def __eq__(self, object):
        if not isinstance(object, AdditionalProperties):
            return NotImplemented
        return type(self.value) is type(object.value) and self.value == object.value

    def __hash__(self):
        return hash((AdditionalProperties, self.value))

    def __repr__(self):
        return f"AdditionalProperties({self.value!r})"


META = dict(
    title=text,
    description=text,
    default=values.get_value,
    examples=value_list,
    enum=value_list,
    const=values.get_value,
)


class Object(Schema):
    type = "object"
    keywords = dict(
        META,
        properties=Properties,
        required=names,
        additional_properties=AdditionalProperties.of,
    )
    defaults = dict(properties=Properties(), required=())


class Array(Schema):
    type = "array"
    keywords = dict(
        META,
        items=lambda x: get_schema(x),
        min_items=integer,
        max_items=integer,
        unique_items=flag,
    )


class String(Schema):
    type = "string"
    keywords = dict(
        META, min_length=integer, max_length=integer, pattern=text, format=Format
    )


class Number(Schema):
    type = "number"
    keywords = dict(
        META,
        minimum=number,
        maximum=number,
        exclusive_minimum=number,
        exclusive_maximum=number,
        multiple_of=number,
    )


class Integer(Schema):
    type = "integer"
    keywords = dict(
        META,
        minimum=integer,
        maximum=integer,
        exclusive_minimum=integer,
        exclusive_maximum=integer,
        multiple_of=integer,
    )


class Boolean(Schema):
    type = "boolean"
    keywords = dict(META)


class Null(Schema):
    type = "null"


class Reference(Schema):
    """a `$ref` to another schema; references are never resolved"""

    keywords = dict(ref_=text)
    positional = "ref_"

    def __init__(self, ref):
        super().__init__(ref_=ref)

    @property
    def ref(self):
        return self.ref_


class Composite(Schema):
    keywords = {}

    def __init__(self, *schemas):
        if len(schemas) == 1 and isinstance(schemas[0], (list, tuple)):
            schemas = schemas[0]
        super().__init__(**{self.positional: tuple(schemas)})

    @property
    def schemas(self):
        return self.__schema__.get(self.positional, ())

    def __iter__(self):
        return iter(self.schemas)


class AnyOf(Composite):
    keywords = dict(any_of=schema_list)
    positional = "any_of"


class AllOf(Composite):
    keywords = dict(all_of=schema_list)
    positional = "all_of"


class OneOf(Composite):
    keywords = dict(one_of=schema_list)
    positional = "one_of"


class Not(Schema):
    """the negation of a schema. `Not(Any())` is the schema that rejects everything."""

    keywords = dict(not_=lambda x: get_schema(x))
    positional = "not_"

    def __init__(self, schema):
        super().__init__(not_=schema)

    @property
    def subschema(self):
        return self.not_


class Empty(Schema):
    """the `{}` schema, without any constraint"""


class Any(Schema):
    """the `true` schema, accepting everything"""


@register
def get_schema(object):
    raise TypeError(f"{type(object).__name__} is not a schema")


@get_schema.register
def get_schema_schema(object: Schema):
    return object


@get_schema.register
def get_schema_bool(object: bool):
    return Any() if object else Not(Any())


@get_schema.register(type(None))
def get_schema_none(object):
    return Empty()


@get_schema.register(collections.abc.Mapping)
def get_schema_mapping(object):
    return Object(properties=object)

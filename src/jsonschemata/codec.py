"""read and write json schema documents.

>>> from jsonschemata import schemas
>>> dumps(schemas.Any()), dumps(schemas.Not(schemas.Any())), dumps(schemas.Empty())
(b'true', b'false', b'{}')
>>> loads("true"), loads("{}"), loads('{"x": 1}')
(Any(), Empty(), Any())
>>> list(loads('{"type": "object", "properties": {"b": {}, "a": {}}}', property_order=["a"]).properties)
['a', 'b']
"""
import json

from . import builders, schemas, utils, values
from .exceptions import DecodeError, EncodeError
from .formats import Format
from .utils import register

__all__ = ("DecodeOptions", "dump", "dumps", "load", "loads")

MAX_DEPTH = 128


class DecodeOptions:
    """the options of a single decode.

    property_order
        names that lead the `properties` of every object schema decoded;
        names that are not listed follow in their natural order.
    max_depth
        the deepest schema nesting accepted before decoding fails.
    """

    __slots__ = ("property_order", "max_depth")

    def __init__(self, property_order=(), max_depth=MAX_DEPTH):
        if isinstance(property_order, str):
            raise TypeError("property_order is a sequence of names, not a string")
        self.property_order = tuple(property_order or ())
        self.max_depth = max_depth

    @classmethod
    def of(cls, options=None, **kwargs):
        if options is None:
            return cls(**kwargs)
        if kwargs:
            raise TypeError("pass either options or keyword arguments, not both")
        return options

    @property
    def property_names(self):
        """the property order, with escaped names also matching their unescaped form"""
        names = []
        for name in self.property_order:
            names.append(name)
            if "\\" in name:
                try:
                    names.append(json.loads(f'"{name}"'))
                except ValueError:
                    pass
        return names

    def __repr__(self):
        return f"DecodeOptions(property_order={list(self.property_order)!r}, max_depth={self.max_depth!r})"


def load(object, options=None, **kwargs):
    """build a schema from a json schema document given as python data"""
    options = DecodeOptions.of(options, **kwargs)
    try:
        return builders.build(object, options)
    except RecursionError as e:
        raise DecodeError("maximum nesting depth exceeded") from e


def loads(data, options=None, **kwargs):
    """build a schema from json schema text or bytes"""
    return load(values.load_text(data), options, **kwargs)


def dumps(object, indent=None, sort_keys=False):
    """the json schema document of a schema as bytes"""
    try:
        tree = dump(object)
    except RecursionError as e:
        raise EncodeError("maximum nesting depth exceeded") from e
    return values.dump_text(tree, indent=indent, sort_keys=sort_keys)


@register
def dump(object):
    """the json schema document of a schema as python data"""
    raise TypeError(f"{type(object).__name__} is not a schema")


@dump.register
def dump_schema(object: schemas.Schema):
    data = dict(type=object.type)
    for k, v in object.__schema__.items():
        data[utils.normalize_json_key(k)] = get_json(v)
    return data


@dump.register
def dump_any(object: schemas.Any):
    return True


@dump.register
def dump_empty(object: schemas.Empty):
    return {}


@dump.register
def dump_not(object: schemas.Not):
    if isinstance(object.subschema, schemas.Any):
        return False
    return {"not": dump(object.subschema)}


@dump.register
def dump_reference(object: schemas.Reference):
    return {"$ref": object.ref}


@dump.register(schemas.AnyOf)
@dump.register(schemas.AllOf)
@dump.register(schemas.OneOf)
def dump_composite(object):
    return {utils.normalize_json_key(object.positional): list(map(dump, object.schemas))}


@register
def get_json(object):
    return object


@get_json.register
def get_json_value(object: values.Value):
    return object.py()


@get_json.register
def get_json_schema(object: schemas.Schema):
    return dump(object)


@get_json.register
def get_json_properties(object: schemas.Properties):
    return {k: dump(v) for k, v in object.items()}


@get_json.register
def get_json_additional(object: schemas.AdditionalProperties):
    return get_json(object.value)


@get_json.register
def get_json_format(object: Format):
    return str(object)


@get_json.register
def get_json_tuple(object: tuple):
    return list(map(get_json, object))

"""the json value model.

every json document maps onto exactly one of seven alternatives. each
alternative subclasses the builtin it carries so values read like native
python data, but equality keeps the json tag in mind.

>>> Value.of({"a": [1, 2.0, None]})
Object({'a': Array((Int(1), Double(2.0), Null()))})
>>> Int(42) == Double(42.0)
False
>>> loads("42"), loads("42.0")
(Int(42), Double(42.0))
"""
import collections.abc
import json
import math
import re

from . import exceptions, utils
from .utils import register

__all__ = (
    "Value",
    "Null",
    "Bool",
    "Int",
    "Double",
    "String",
    "Array",
    "Object",
    "loads",
    "dumps",
    "to_bool",
    "to_int",
    "to_float",
    "to_str",
)


class Value:
    """the base of the json value alternatives"""

    __slots__ = ()
    type = None
    _base = object

    @classmethod
    def of(cls, object):
        """convert native python data to a json value"""
        return get_value(object)

    def py(self):
        """the plain python representation of the value"""
        return self._base(self)

    def __eq__(self, object):
        if not isinstance(object, Value):
            try:
                object = get_value(object)
            except TypeError:
                return NotImplemented
        return type(self) is type(object) and self._base.__eq__(self, object) is True

    def __ne__(self, object):
        eq = self.__eq__(object)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return self._base.__hash__(self)

    def __repr__(self):
        return f"{type(self).__name__}({self._base.__repr__(self)})"

    @property
    def is_null(self):
        return isinstance(self, Null)

    @property
    def bool_value(self):
        return to_bool(self)

    @property
    def int_value(self):
        return to_int(self)

    @property
    def double_value(self):
        return to_float(self)

    @property
    def string_value(self):
        return to_str(self)

    @property
    def array_value(self):
        if isinstance(self, Array):
            return tuple(self)

    @property
    def object_value(self):
        if isinstance(self, Object):
            return dict(self)

    def is_compatible(self, schema, strict=True):
        from .compat import is_compatible

        return is_compatible(self, schema, strict=strict)


class Null(Value):
    __slots__ = ()
    type = "null"

    def py(self):
        return None

    def __eq__(self, object):
        if object is None:
            return True
        return isinstance(object, Null)

    def __hash__(self):
        return hash(None)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Null()"

    def __str__(self):
        return ""


class Bool(Value, int):
    __slots__ = ()
    type = "boolean"
    _base = int

    def __new__(cls, object=False):
        return int.__new__(cls, bool(object))

    def py(self):
        return bool(self)

    def __repr__(self):
        return f"Bool({bool(self)})"

    def __str__(self):
        return "true" if self else "false"


class Int(Value, int):
    __slots__ = ()
    type = "integer"
    _base = int

    def __new__(cls, object=0):
        self = int.__new__(cls, object)
        if not utils.fits_int64(self):
            raise OverflowError(f"{int.__repr__(self)} does not fit a 64-bit integer")
        return self

    def __str__(self):
        return int.__repr__(self)


class Double(Value, float):
    __slots__ = ()
    type = "number"
    _base = float

    def __str__(self):
        return float.__repr__(self)


class String(Value, str):
    __slots__ = ()
    type = "string"
    _base = str

    def __str__(self):
        return str.__str__(self)


class Array(Value, tuple):
    """an ordered, immutable sequence of values"""

    __slots__ = ()
    type = "array"
    _base = tuple

    def __new__(cls, object=()):
        return tuple.__new__(cls, map(get_value, object))

    def py(self):
        return [x.py() for x in self]

    def __str__(self):
        return dumps(self).decode("utf-8")


class Object(Value, dict):
    """a mapping of names to values; key order is not significant"""

    type = "object"
    _base = dict

    def __init__(self, *args, **kwargs):
        items = dict(*args, **kwargs)
        for k in items:
            if not isinstance(k, str):
                raise TypeError(f"object keys must be strings, not {type(k).__name__}")
        dict.update(self, zip(items, map(get_value, items.values())))

    def py(self):
        return {k: v.py() for k, v in self.items()}

    def __hash__(self):
        return hash(frozenset(self.items()))

    def __reduce__(self):
        return type(self), (dict(self),)

    def __str__(self):
        return dumps(self).decode("utf-8")

    def __immutable__(self, *args, **kwargs):
        raise TypeError(f"{type(self).__name__} values are immutable")

    for k in "setitem delitem ior".split():
        locals()[f"__{k}__"] = __immutable__
    for k in "clear pop popitem setdefault update".split():
        locals()[k] = __immutable__

    del k


@register
def get_value(object):
    raise TypeError(f"{type(object).__name__} is not a json value")


@get_value.register
def get_value_value(object: Value):
    return object


@get_value.register(type(None))
def get_value_null(object):
    return Null()


@get_value.register
def get_value_bool(object: bool):
    return Bool(object)


@get_value.register
def get_value_int(object: int):
    if utils.fits_int64(object):
        return Int(object)
    return Double(object)


@get_value.register
def get_value_float(object: float):
    return Double(object)


@get_value.register
def get_value_str(object: str):
    return String(object)


@get_value.register(list)
@get_value.register(tuple)
def get_value_iter(object):
    return Array(object)


@get_value.register(collections.abc.Mapping)
def get_value_mapping(object):
    return Object(object)


def parse_int(s):
    try:
        x = int(s)
    except ValueError as e:
        raise exceptions.DecodeError(str(e)) from e
    if utils.fits_int64(x):
        return x
    return parse_float(s)


def parse_float(s):
    x = float(s)
    if math.isfinite(x):
        return x
    raise exceptions.DecodeError(f"{s} is out of the range of a double")


def parse_constant(s):
    raise exceptions.DecodeError(f"{s} is not a json value")


def load_text(data):
    """parse json text to plain python, translating failures to DecodeError"""
    try:
        return json.loads(
            data,
            parse_int=parse_int,
            parse_float=parse_float,
            parse_constant=parse_constant,
        )
    except json.JSONDecodeError as e:
        raise exceptions.DecodeError(e.msg, position=e.pos) from e
    except UnicodeDecodeError as e:
        raise exceptions.DecodeError(f"the text is not unicode: {e.reason}") from e
    except RecursionError as e:
        raise exceptions.DecodeError("maximum nesting depth exceeded") from e
    except TypeError as e:
        raise exceptions.DecodeError(str(e)) from e


def dump_text(object, indent=None, sort_keys=False):
    """serialize plain python to json bytes, translating failures to EncodeError"""
    separators = (",", ":") if indent is None else None
    try:
        text = json.dumps(
            object,
            indent=indent,
            sort_keys=sort_keys,
            separators=separators,
            allow_nan=False,
            ensure_ascii=False,
        )
        return text.encode("utf-8")
    except (ValueError, TypeError, RecursionError) as e:
        raise exceptions.EncodeError(str(e)) from e


def loads(data):
    """decode json bytes or text to a value"""
    data = load_text(data)
    try:
        return get_value(data)
    except RecursionError as e:
        raise exceptions.DecodeError("maximum nesting depth exceeded") from e


def dumps(object, indent=None, sort_keys=False):
    """encode a value to json bytes"""
    return dump_text(get_value(object).py(), indent=indent, sort_keys=sort_keys)


TRUE_TOKENS = frozenset("true t yes y on 1".split())
FALSE_TOKENS = frozenset("false f no n off 0".split())
INTEGER = re.compile(r"[+-]?[0-9]+")


def redispatch(callable, object, strict):
    if isinstance(object, Value):
        return None
    try:
        return callable(get_value(object), strict=strict)
    except (TypeError, OverflowError):
        return None


@register
def to_bool(object, strict=True):
    """convert a value to a bool, or None when there is no conversion.

    strict conversions only accept `Bool`.

    >>> to_bool(String("yes")), to_bool(String("yes"), strict=False)
    (None, True)
    """
    return redispatch(to_bool, object, strict)


@to_bool.register
def to_bool_bool(object: Bool, strict=True):
    return bool(object)


@to_bool.register
def to_bool_int(object: Int, strict=True):
    if not strict and int(object) in (0, 1):
        return bool(int(object))


@to_bool.register
def to_bool_double(object: Double, strict=True):
    if not strict and float(object) in (0.0, 1.0):
        return bool(float(object))


@to_bool.register
def to_bool_string(object: String, strict=True):
    if not strict:
        if object in TRUE_TOKENS:
            return True
        if object in FALSE_TOKENS:
            return False


@register
def to_int(object, strict=True):
    """convert a value to an int, or None when there is no conversion.

    >>> to_int(Double(42.0)), to_int(Double(42.0), strict=False)
    (None, 42)
    >>> to_int(Double(42.5), strict=False)
    """
    return redispatch(to_int, object, strict)


@to_int.register
def to_int_int(object: Int, strict=True):
    return int(object)


@to_int.register
def to_int_double(object: Double, strict=True):
    if not strict and float(object).is_integer():
        if utils.fits_int64(int(object)):
            return int(object)


@to_int.register
def to_int_string(object: String, strict=True):
    if not strict and INTEGER.fullmatch(object):
        if utils.fits_int64(int(object)):
            return int(object)


@register
def to_float(object, strict=True):
    """convert a value to a float, or None when there is no conversion.

    integers always convert, strings only when not strict.
    """
    return redispatch(to_float, object, strict)


@to_float.register
def to_float_double(object: Double, strict=True):
    return float(object)


@to_float.register
def to_float_int(object: Int, strict=True):
    return float(object)


@to_float.register
def to_float_string(object: String, strict=True):
    if strict or object != object.strip() or "_" in object:
        return None
    try:
        return float(object)
    except ValueError:
        return None


@register
def to_str(object, strict=True):
    """convert a value to a str, or None when there is no conversion.

    >>> to_str(Bool(True), strict=False), to_str(Double(42.0), strict=False)
    ('true', '42.0')
    """
    return redispatch(to_str, object, strict)


@to_str.register
def to_str_string(object: String, strict=True):
    return str(object)


@to_str.register(Int)
@to_str.register(Double)
@to_str.register(Bool)
def to_str_scalar(object, strict=True):
    if not strict:
        return str(object)

import abc
import collections.abc
import re
from contextlib import suppress
from functools import singledispatch as register

__all__ = ("EMPTY", "register", "normalize_json_key", "enforce_tuple")

INT64_MIN, INT64_MAX = -(2 ** 63), 2 ** 63 - 1


class Ø(abc.ABCMeta):
    def __bool__(self):
        return False


class EMPTY(metaclass=Ø):
    """a false sentinel"""

    pass


def enforce_tuple(x):
    """make sure the input is a tuple"""
    with suppress(TypeError):
        if x in {None, EMPTY}:
            return ()
    if isinstance(x, list):
        return tuple(x)
    if not isinstance(x, tuple):
        return (x,)
    return x


def lowercase(s):
    """return a lower string"""
    if s:
        return s[0].lower() + s[1:]
    return ""


def uppercase(s):
    return s[0].upper() + s[1:]


def normalize_json_key(s):
    """convert a python name to its json schema keyword

    * one trailing `_` refers to a `$` key
    * snake case becomes camel case

    >>> normalize_json_key("min_length")
    'minLength'
    >>> normalize_json_key("ref_")
    '$ref'
    >>> normalize_json_key("any_of")
    'anyOf'
    """
    prefix = ""
    if s.endswith("_"):
        prefix, s = "$", s[:-1]
    head, *tail = s.split("_")
    return prefix + lowercase(head) + "".join(map(uppercase, filter(bool, tail)))


def normalize_py_key(s):
    """convert a json schema keyword to its python name

    >>> normalize_py_key("additionalProperties")
    'additional_properties'
    >>> normalize_py_key("$ref")
    'ref_'
    """
    suffix = ""
    if s.startswith("$"):
        s, suffix = s[1:], "_"
    return re.sub(r"(?<!^)([A-Z])", r"_\1", s).lower() + suffix


def munge(s):
    """the builder method name for a json schema keyword

    >>> munge("minLength"), munge("$ref")
    ('MinLength', 'Ref_')
    """
    if s.startswith("$"):
        s = s[1:] + "_"
    return uppercase(s) if s else s


def fits_int64(x):
    return INT64_MIN <= x <= INT64_MAX


@register
def get_hashable(x):
    return x


@get_hashable.register(collections.abc.Mapping)
def get_hashable_mapping(x):
    return frozenset(zip(x.keys(), map(get_hashable, x.values())))


@get_hashable.register(list)
@get_hashable.register(tuple)
def get_hashable_iter(x):
    return tuple(map(get_hashable, x))


# map a jsonschema type name to the python type
JSONSCHEMA_PY_MAPPING = dict(
    null=type(None),
    boolean=bool,
    string=str,
    integer=int,
    number=float,
    array=list,
    object=dict,
)

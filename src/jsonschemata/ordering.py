"""recover the order of object keys from json text.

decoded mappings forget where their keys came from, so the order is read off
the raw text with a scanner that only tracks strings and nesting.

>>> extract_schema_property_order(b'{"properties": {"zebra": {}, "apple": {"properties": {"x": 1}}}}')
['zebra', 'apple']
>>> extract_property_order("[1, 2, 3]")
"""
import json
import logging

import jsonpointer

from . import values
from .exceptions import DecodeError

__all__ = ("extract_property_order", "extract_schema_property_order")

logger = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"


def extract_property_order(data, keypath=()):
    """the keys of the object found at `keypath`, in the order they are written.

    `keypath` is a sequence of keys or a json pointer string. keys are
    returned as written, escape sequences included, and repeated keys are
    kept. invalid json, a missing key, or a target that is not an object
    yields None.
    """
    try:
        values.load_text(data)
    except DecodeError as e:
        logger.debug("no property order for invalid json: %s", e)
        return None

    if isinstance(keypath, str):
        try:
            keypath = jsonpointer.JsonPointer(keypath).parts
        except jsonpointer.JsonPointerException as e:
            logger.debug("no property order for the key path %r: %s", keypath, e)
            return None

    text = get_text(data)
    i = skip_whitespace(text, 0)
    for key in keypath:
        i = find_key(text, i, str(key))
        if i is None:
            logger.debug("no property order, %r is missing", key)
            return None

    if not text.startswith("{", i):
        logger.debug("no property order, the target is not an object")
        return None
    return [key for key, _ in members(text, i)]


def extract_schema_property_order(data):
    """the order of the top level `properties` of a json schema document"""
    return extract_property_order(data, ("properties",))


def get_text(data):
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode(json.detect_encoding(data), "surrogatepass")
    return data


def skip_whitespace(text, i):
    while i < len(text) and text[i] in WHITESPACE:
        i += 1
    return i


def scan_string(text, i):
    """the raw content of the string starting at `i` and the offset past it"""
    j = i + 1
    while text[j] != '"':
        j += 2 if text[j] == "\\" else 1
    return text[i + 1 : j], j + 1


def skip_value(text, i):
    if text[i] == '"':
        return scan_string(text, i)[1]
    if text[i] in "{[":
        depth = 0
        while True:
            c = text[i]
            if c == '"':
                i = scan_string(text, i)[1]
                continue
            if c in "{[":
                depth += 1
            elif c in "}]":
                depth -= 1
                if not depth:
                    return i + 1
            i += 1
    while i < len(text) and text[i] not in ",]}" + WHITESPACE:
        i += 1
    return i


def members(text, i):
    """yield the raw key and the value offset of each member of the object at `i`"""
    i = skip_whitespace(text, i + 1)
    while text[i] != "}":
        key, i = scan_string(text, i)
        i = skip_whitespace(text, skip_whitespace(text, i) + 1)
        yield key, i
        i = skip_whitespace(text, skip_value(text, i))
        if text[i] == ",":
            i = skip_whitespace(text, i + 1)


def unescape(key):
    return json.loads(f'"{key}"')


def find_key(text, i, key):
    """the value offset of the first member named `key` of the object at `i`"""
    if not text.startswith("{", i):
        return None
    for raw, start in members(text, i):
        if raw == key or unescape(raw) == key:
            return start
    return None

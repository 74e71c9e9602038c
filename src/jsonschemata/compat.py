"""a shallow check that a value has the json type a schema asks for.

only the type is compared, constraints are never validated.

>>> from jsonschemata import schemas, values
>>> is_compatible(values.Int(1), schemas.Number()), is_compatible(values.Int(1), schemas.Number(), strict=False)
(False, True)
"""
from . import schemas, values
from .utils import register

__all__ = ("is_compatible",)

VALUES = {
    schemas.Object: values.Object,
    schemas.Array: values.Array,
    schemas.String: values.String,
    schemas.Number: values.Double,
    schemas.Integer: values.Int,
    schemas.Boolean: values.Bool,
    schemas.Null: values.Null,
}


def is_compatible(value, schema, strict=True):
    """is `value` of the json type `schema` describes?

    references, composites, negations, `Empty` and `Any` accept every value.
    an `Int` is a `Number` only when not strict.
    """
    return compatible(schemas.get_schema(schema), values.get_value(value), strict)


@register
def compatible(schema, value, strict):
    return True


@compatible.register(schemas.Object)
@compatible.register(schemas.Array)
@compatible.register(schemas.String)
@compatible.register(schemas.Integer)
@compatible.register(schemas.Boolean)
@compatible.register(schemas.Null)
def compatible_type(schema, value, strict):
    return isinstance(value, VALUES[type(schema)])


@compatible.register
def compatible_number(schema: schemas.Number, value, strict):
    return isinstance(value, values.Double) or (
        not strict and isinstance(value, values.Int)
    )

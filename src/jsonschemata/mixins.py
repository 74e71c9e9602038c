"mixins.py"
from . import utils


class SchemaOps:
    """operators that compose schema

    >>> from jsonschemata.schemas import Integer, String
    >>> String() | Integer()
    AnyOf(String(), Integer())
    >>> -String()
    Not(String())
    """

    __slots__ = ()

    def __neg__(self):
        from .schemas import Not

        return Not(self)

    def __and__(self, object):
        from .schemas import AllOf

        return AllOf(*flatten(AllOf, self, object))

    def __or__(self, object):
        from .schemas import AnyOf

        return AnyOf(*flatten(AnyOf, self, object))

    def __xor__(self, object):
        from .schemas import OneOf

        return OneOf(*flatten(OneOf, self, object))

    def __eq__(self, object):
        if type(self) is not type(object):
            return NotImplemented
        return dict(self.__schema__) == dict(object.__schema__)

    def __ne__(self, object):
        eq = self.__eq__(object)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash((type(self).__name__, utils.get_hashable(dict(self.__schema__))))


def flatten(cls, *object):
    for x in object:
        if type(x) is cls:
            yield from x.schemas
        else:
            yield x

"""errors raised while reading and writing json values and schema"""
from . import utils

__all__ = ("SchemataError", "DecodeError", "EncodeError")


class SchemataError(ValueError):
    pass


class DecodeError(SchemataError):
    """the input is not json, or not a shape the model recognizes.

    `path` holds the keys and indexes that lead to the offending value and
    `position` the character offset when the failure came from the json text.
    """

    def __init__(self, message, path=(), position=None):
        self.message = message
        self.path = utils.enforce_tuple(path)
        self.position = position
        super().__init__(message)

    @property
    def pointer(self):
        import jsonpointer

        return jsonpointer.JsonPointer.from_parts(self.path).path

    def push(self, *path):
        """prefix the error with the location of its parent"""
        return DecodeError(self.message, path + self.path, self.position)

    def __str__(self):
        where = ""
        if self.path:
            where = f" @{self.pointer}"
        elif self.position is not None:
            where = f" @char {self.position}"
        return f"{self.message}{where}"


class EncodeError(SchemataError):
    pass

"""string formats named by draft-2020-12.

a `Format` is the wire string itself, so any string is a format. the standard
names are exposed as constants and everything else is a custom format.

>>> Format("date-time") == Format.DATE_TIME
True
>>> Format("x-my-format").is_custom
True
"""

__all__ = ("Format",)

STANDARD = dict(
    DATE_TIME="date-time",
    DATE="date",
    TIME="time",
    DURATION="duration",
    EMAIL="email",
    IDN_EMAIL="idn-email",
    HOSTNAME="hostname",
    IDN_HOSTNAME="idn-hostname",
    IPV4="ipv4",
    IPV6="ipv6",
    URI="uri",
    URI_REFERENCE="uri-reference",
    IRI_REFERENCE="iri-reference",
    URI_TEMPLATE="uri-template",
    JSON_POINTER="json-pointer",
    RELATIVE_JSON_POINTER="relative-json-pointer",
    REGEX="regex",
    UUID="uuid",
)

NAMES = {v: k for k, v in STANDARD.items()}


class Format(str):
    __slots__ = ()

    def __new__(cls, object):
        if not isinstance(object, str):
            raise TypeError(f"a format is a string, not {type(object).__name__}")
        return super().__new__(cls, object)

    @classmethod
    def custom(cls, object):
        """a format outside of the standard vocabulary"""
        return cls(object)

    @property
    def is_custom(self):
        return str(self) not in NAMES

    @property
    def name(self):
        return NAMES.get(str(self), "CUSTOM")

    @property
    def raw(self):
        return str(self)

    def __repr__(self):
        if self.is_custom:
            return f"Format.custom({str.__repr__(self)})"
        return f"Format.{self.name}"


for k, v in STANDARD.items():
    setattr(Format, k, Format(v))

del k, v

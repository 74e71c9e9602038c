"""json values and draft-2020-12 json schema as immutable python data"""
__version__ = "0.0.1"
import logging

from . import builders, codec, compat, exceptions, formats, ordering, schemas, utils, values
from .codec import *
from .compat import *
from .exceptions import *
from .formats import *
from .ordering import *
from .schemas import *
from .values import Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

"""Top-level public API for the ``smart_enum`` package.

Smart enumerations are immutable, strongly-typed values with a numeric code and
three string keys, declared as a closed set of members on a subclass:

>>> from smart_enum import Enumeration, EnumerationCodec, member
>>> class Color(Enumeration):
...     RED = member(1, "red", "red", "Red")
...     BLUE = member(2, "blue", "blue", "Blue")
>>> EnumerationCodec(Color).encode(Color.RED)
'red'

The package re-exports the base type, the codec, the generic lookup helpers
and the exception types so users can import from a single namespace.
"""

from .Enumeration import DISPLAY_NAME_UNKNOWN, Enumeration, member
from .EnumerationCodec import CodecOptions, EnumerationCodec, json_default
from .enumeration_operations import (
    absolute_difference,
    compare,
    equals,
    from_display_name,
    from_object_name,
    from_uri_name,
    from_value,
    get_all,
)
from .errors import (
    EnumerationDecodeError,
    EnumerationError,
    EnumerationTypeMismatch,
    InvalidEnumerationDeclaration,
)

__all__ = [
    "CodecOptions",
    "DISPLAY_NAME_UNKNOWN",
    "Enumeration",
    "EnumerationCodec",
    "EnumerationDecodeError",
    "EnumerationError",
    "EnumerationTypeMismatch",
    "InvalidEnumerationDeclaration",
    "absolute_difference",
    "compare",
    "equals",
    "from_display_name",
    "from_object_name",
    "from_uri_name",
    "from_value",
    "get_all",
    "json_default",
    "member",
]

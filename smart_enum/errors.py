"""Exception types raised by smart enumerations and their codecs.

Lookup misses are not errors: every ``from_*`` helper returns ``None`` instead.
The exceptions here cover declaration mistakes (caught while the ``class``
statement runs) and misuse of a codec.
"""

from __future__ import annotations


class EnumerationError(Exception):
    """Base class for every error raised by ``smart_enum``."""


class InvalidEnumerationDeclaration(EnumerationError, TypeError):
    """A concrete enumeration type declares its members incorrectly.

    Raised at class-creation time, for example when two members share a
    ``value`` or a string key, or when the type cannot be constructed without
    arguments.
    """


class EnumerationTypeMismatch(EnumerationError, TypeError):
    """A codec received a value that is not a member of its enumeration type."""


class EnumerationDecodeError(EnumerationError, ValueError):
    """A serialized token could not be turned into an enumeration member.

    Subclasses ``ValueError`` so validation layers such as pydantic report it
    as an ordinary validation failure.
    """


__all__ = [
    "EnumerationDecodeError",
    "EnumerationError",
    "EnumerationTypeMismatch",
    "InvalidEnumerationDeclaration",
]

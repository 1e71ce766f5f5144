"""String-token codec for smart enumerations.

An :class:`EnumerationCodec` converts between members of one concrete
enumeration type and their serialized form: a single string equal to the
member's ``object_name``. Over JSON that is a bare string, never an object or
a number.

Decoding rules
--------------
- ``None`` decodes to ``None``.
- ``""`` decodes to the type's "Unknown" sentinel (``T()``).
- Any other string is looked up by ``object_name``. A miss returns ``None``
  unless the codec is strict, in which case it raises
  :class:`~smart_enum.errors.EnumerationDecodeError`.

Encoding rules
--------------
- A member of exactly the codec's type encodes to its ``object_name``.
- ``None`` encodes to ``None`` (JSON ``null``) unless ``allow_none`` is off.
- Anything else raises :class:`~smart_enum.errors.EnumerationTypeMismatch`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from typing import Any, Generic, Optional, Type, TypeVar

from .Enumeration import Enumeration
from .enumeration_operations import from_object_name
from .errors import EnumerationDecodeError, EnumerationTypeMismatch

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

E = TypeVar("E", bound=Enumeration)


@dataclass(frozen=True)
class CodecOptions:
    """Behavior switches for :class:`EnumerationCodec`.

    Parameters
    ----------
    strict : bool
        Raise on unknown object names instead of returning ``None``.
    allow_none : bool
        Encode ``None`` as ``None``. When ``False``, encoding ``None`` raises.
    """

    strict: bool = False
    allow_none: bool = True


class EnumerationCodec(Generic[E]):
    """Encode and decode members of *enum_type* as object-name strings.

    Parameters
    ----------
    enum_type:
        Concrete :class:`~smart_enum.Enumeration` subtype handled by this codec.
    options:
        Base options; defaults to :class:`CodecOptions()`.
    strict, allow_none:
        Keyword overrides applied on top of *options*.

    Examples
    --------
    >>> codec = EnumerationCodec(Color)  # doctest: +SKIP
    >>> codec.encode(Color.RED)  # doctest: +SKIP
    'red'
    >>> codec.decode("")  # doctest: +SKIP
    Color(value=0, object_name='', uri_name='', display_name='Unknown')
    """

    def __init__(
        self,
        enum_type: Type[E],
        *,
        options: Optional[CodecOptions] = None,
        strict: Optional[bool] = None,
        allow_none: Optional[bool] = None,
    ) -> None:
        if not (isinstance(enum_type, type) and issubclass(enum_type, Enumeration)):
            raise TypeError(f"EnumerationCodec needs an Enumeration subclass, got {enum_type!r}.")
        if enum_type is Enumeration:
            raise TypeError("EnumerationCodec needs a concrete Enumeration subclass.")

        resolved = options if options is not None else CodecOptions()
        overrides: dict[str, bool] = {}
        if strict is not None:
            overrides["strict"] = bool(strict)
        if allow_none is not None:
            overrides["allow_none"] = bool(allow_none)
        if overrides:
            resolved = replace(resolved, **overrides)

        self._enum_type = enum_type
        self._options = resolved

    @property
    def enum_type(self) -> Type[E]:
        return self._enum_type

    @property
    def options(self) -> CodecOptions:
        return self._options

    def can_convert(self, representation_type: type) -> bool:
        """Return ``True`` only when the serialized representation is ``str``."""
        return representation_type is str

    def decode(self, token: Optional[str]) -> Optional[E]:
        """Turn a serialized token into a member of the codec's type."""
        if token is None:
            return None
        if not isinstance(token, str):
            raise EnumerationDecodeError(
                f"{self._enum_type.__name__} tokens must be str, got {type(token).__name__}."
            )
        if token == "":
            return self._enum_type()

        found = from_object_name(self._enum_type, token)
        if found is None:
            if self._options.strict:
                raise EnumerationDecodeError(
                    f"Unknown {self._enum_type.__name__} object name {token!r}."
                )
            logger.debug(f"no {self._enum_type.__name__} member named {token!r}; decoding to None")
        return found

    def encode(self, value: Optional[E]) -> Optional[str]:
        """Return the serialized token (``object_name``) for *value*."""
        if value is None:
            if not self._options.allow_none:
                raise EnumerationTypeMismatch(
                    f"Cannot encode None as {self._enum_type.__name__} (allow_none=False)."
                )
            return None
        if type(value) is not self._enum_type:
            raise EnumerationTypeMismatch(
                f"Expected {self._enum_type.__name__}, got {type(value).__name__}."
            )
        return value.object_name

    def dumps(self, value: Optional[E]) -> str:
        """Serialize *value* as JSON text: a bare string, or ``null``."""
        return json.dumps(self.encode(value))

    def loads(self, text: str) -> Optional[E]:
        """Parse JSON text holding one token and decode it."""
        try:
            token = json.loads(text)
        except ValueError as exc:
            raise EnumerationDecodeError(
                f"Invalid JSON for {self._enum_type.__name__}: {exc}"
            ) from exc
        return self.decode(token)

    def __repr__(self) -> str:
        return f"EnumerationCodec({self._enum_type.__name__}, options={self._options!r})"


def json_default(obj: Any) -> Any:
    """``default=`` hook for :func:`json.dumps` that writes enumerations as object names.

    Examples
    --------
    >>> json.dumps({"color": Color.RED}, default=json_default)  # doctest: +SKIP
    '{"color": "red"}'
    """
    if isinstance(obj, Enumeration):
        return obj.object_name
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


__all__ = ["CodecOptions", "EnumerationCodec", "json_default"]

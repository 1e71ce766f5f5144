"""pydantic v2 support for smart enumerations.

:meth:`Enumeration.__get_pydantic_core_schema__` calls
:func:`enumeration_core_schema`, so any concrete enumeration type can be used
directly as a model field:

>>> class Swatch(BaseModel):  # doctest: +SKIP
...     color: Color
>>> Swatch(color="red").model_dump_json()  # doctest: +SKIP
'{"color":"red"}'

Validation accepts a member of exactly the field's type (python mode) or its
object name. Instances of a subtype are rejected, matching the equality and
codec rule. Inside pydantic the codec runs strict, so an unknown name is a
``ValidationError`` rather than ``None``. ``""`` still yields the "Unknown"
sentinel. Both validation and serialization JSON schemas describe a string.
"""

from __future__ import annotations

from typing import Any, Type

from pydantic_core import CoreSchema, core_schema

from .Enumeration import Enumeration
from .EnumerationCodec import EnumerationCodec


def enumeration_core_schema(enum_type: Type[Enumeration]) -> CoreSchema:
    """Build the pydantic core schema for *enum_type*."""
    codec = EnumerationCodec(enum_type, strict=True, allow_none=False)

    def _validate_python(value: Any) -> Enumeration:
        if type(value) is enum_type:
            return value
        if isinstance(value, str):
            return codec.decode(value)
        raise ValueError(
            f"Expected {enum_type.__name__} or one of its object names, "
            f"got {type(value).__name__}."
        )

    from_token = core_schema.chain_schema(
        [
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(codec.decode),
        ]
    )
    return core_schema.json_or_python_schema(
        json_schema=from_token,
        python_schema=core_schema.no_info_plain_validator_function(_validate_python),
        serialization=core_schema.plain_serializer_function_ser_schema(
            codec.encode,
            return_schema=core_schema.str_schema(),
        ),
    )


__all__ = ["enumeration_core_schema"]

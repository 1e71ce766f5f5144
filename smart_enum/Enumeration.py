"""Smart enumeration base type.

An :class:`Enumeration` is an immutable value carrying a numeric code and three
string keys. Concrete enumeration types declare a closed set of members in the
class body with :func:`member`; the members are built once, while the ``class``
statement runs, and stored in declaration order on the type.

Examples
--------
>>> class Color(Enumeration):
...     RED = member(1, "red", "red", "Red")
...     BLUE = member(2, "blue", "blue", "Blue")
>>> Color.from_object_name("blue") is Color.BLUE
True
>>> Color.RED < Color.BLUE
True
>>> str(Color())
'Unknown'

Notes
-----
Members compare equal when their concrete types are identical and their
``value`` codes match. Ordering only looks at ``value``.

Declaration mistakes (two members sharing a key, a ``value`` that is not an
``int``, a subtype that cannot be built without arguments) raise
:class:`~smart_enum.errors.InvalidEnumerationDeclaration` as soon as the class
statement executes, instead of surfacing later as a silent first match.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Iterator, Optional, Tuple, Type, TypeVar

from .errors import InvalidEnumerationDeclaration

# Module logger
# - Uses a NullHandler so importing this module never configures global logging.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

DISPLAY_NAME_UNKNOWN = "Unknown"

E = TypeVar("E", bound="Enumeration")

_KEY_FIELDS: Tuple[str, ...] = ("value", "object_name", "uri_name", "display_name")


@dataclass(frozen=True)
class _MemberSpec:
    """Placeholder left in a class body by :func:`member` until registration."""

    value: int
    object_name: str
    uri_name: str
    display_name: str


def member(value: int, object_name: str, uri_name: str, display_name: str) -> Any:
    """Declare one member of a concrete enumeration type.

    Parameters
    ----------
    value : int
        Numeric code, unique within the enumeration type.
    object_name : str
        Key used for serialization; must be non-empty.
    uri_name : str
        Key used when the member appears in a URI path segment.
    display_name : str
        Human-readable label, returned by ``str(member)``.

    Returns
    -------
    Any
        A placeholder that the enclosing class replaces with an instance of
        itself. Typed as ``Any`` so ``RED = member(...)`` reads as a member of
        the enumeration for type checkers.
    """
    return _MemberSpec(value, object_name, uri_name, display_name)


@dataclass(frozen=True, eq=False, repr=False)
class Enumeration:
    """Abstract base for smart enumerations.

    Parameters
    ----------
    value : int
        Numeric code. Defaults to ``0``.
    object_name : str
        Serialization key. Defaults to ``""``.
    uri_name : str
        URI path key. Defaults to ``""``.
    display_name : str
        Human-readable label. Defaults to ``"Unknown"``.

    Calling a concrete type with no arguments yields its "Unknown" sentinel.
    ``Enumeration`` itself cannot be instantiated.
    """

    value: int = 0
    object_name: str = ""
    uri_name: str = ""
    display_name: str = DISPLAY_NAME_UNKNOWN

    _members_: ClassVar[Tuple["Enumeration", ...]] = ()
    _member_name: ClassVar[Optional[str]] = None

    def __post_init__(self) -> None:
        if type(self) is Enumeration:
            raise TypeError(
                "Enumeration is abstract; declare a subclass with member(...) entries."
            )

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _register_members(cls)

    # -- value semantics ---------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Enumeration):
            return NotImplemented
        return self.value >= other.value

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._member_name is not None:
            return f"<{name}.{self._member_name}: {self.value!r}>"
        return (
            f"{name}(value={self.value!r}, object_name={self.object_name!r}, "
            f"uri_name={self.uri_name!r}, display_name={self.display_name!r})"
        )

    @property
    def member_name(self) -> Optional[str]:
        """Attribute name the member was declared under, or ``None``."""
        return self._member_name

    # -- discovery and lookup ----------------------------------------------

    @classmethod
    def unknown(cls: Type[E]) -> E:
        """Return the ``value=0`` / ``"Unknown"`` sentinel of this type."""
        return cls()

    @classmethod
    def get_all(cls: Type[E]) -> Iterator[E]:
        """Iterate the declared members of this type in declaration order."""
        return _operations.get_all(cls)

    @classmethod
    def from_value(cls: Type[E], value: int) -> Optional[E]:
        """Return the member whose ``value`` equals *value*, or ``None``."""
        return _operations.from_value(cls, value)

    @classmethod
    def from_object_name(cls: Type[E], object_name: str) -> Optional[E]:
        """Return the member whose ``object_name`` equals *object_name*, or ``None``."""
        return _operations.from_object_name(cls, object_name)

    @classmethod
    def from_uri_name(cls: Type[E], uri_name: str) -> Optional[E]:
        """Return the member whose ``uri_name`` equals *uri_name*, or ``None``."""
        return _operations.from_uri_name(cls, uri_name)

    @classmethod
    def from_display_name(cls: Type[E], display_name: str) -> Optional[E]:
        """Return the member whose ``display_name`` equals *display_name*, or ``None``."""
        return _operations.from_display_name(cls, display_name)

    @staticmethod
    def compare(first: "Enumeration", second: "Enumeration") -> int:
        """Return ``-1``, ``0`` or ``1`` by comparing ``value`` codes."""
        return _operations.compare(first, second)

    @staticmethod
    def absolute_difference(first: "Enumeration", second: "Enumeration") -> int:
        """Return ``abs(first.value - second.value)``."""
        return _operations.absolute_difference(first, second)

    # -- pydantic integration ----------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        return _pydantic_schema.enumeration_core_schema(cls)


def _register_members(cls: Type[Enumeration]) -> None:
    """Replace ``member(...)`` placeholders on *cls* and store its registry."""
    try:
        cls()
    except (TypeError, ValueError) as exc:
        raise InvalidEnumerationDeclaration(
            f"{cls.__name__} must be constructible without arguments "
            f"to produce its '{DISPLAY_NAME_UNKNOWN}' value: {exc}"
        ) from exc

    members: list[Enumeration] = []

    for attr_name, declared in list(vars(cls).items()):
        if not isinstance(declared, _MemberSpec):
            continue
        if hasattr(Enumeration, attr_name):
            raise InvalidEnumerationDeclaration(
                f"{cls.__name__}.{attr_name} shadows Enumeration.{attr_name}; "
                "choose another member name."
            )
        _check_member_spec(cls, attr_name, declared)
        try:
            instance = cls(
                declared.value,
                declared.object_name,
                declared.uri_name,
                declared.display_name,
            )
        except (TypeError, ValueError) as exc:
            raise InvalidEnumerationDeclaration(
                f"Could not build {cls.__name__}.{attr_name}: {exc}"
            ) from exc
        object.__setattr__(instance, "_member_name", attr_name)
        setattr(cls, attr_name, instance)
        members.append(instance)

    _check_unique_keys(cls, members)
    cls._members_ = tuple(members)
    logger.debug(f"registered {len(members)} members for {cls.__qualname__}")


def _check_member_spec(cls: type, attr_name: str, spec: _MemberSpec) -> None:
    if not isinstance(spec.value, int) or isinstance(spec.value, bool):
        raise InvalidEnumerationDeclaration(
            f"{cls.__name__}.{attr_name}: value must be int, "
            f"got {type(spec.value).__name__}."
        )
    for key in _KEY_FIELDS[1:]:
        key_value = getattr(spec, key)
        if not isinstance(key_value, str):
            raise InvalidEnumerationDeclaration(
                f"{cls.__name__}.{attr_name}: {key} must be str, "
                f"got {type(key_value).__name__}."
            )
    # "" is the serialized form of the Unknown sentinel.
    if not spec.object_name:
        raise InvalidEnumerationDeclaration(
            f"{cls.__name__}.{attr_name}: object_name must be non-empty."
        )


def _check_unique_keys(cls: type, members: list[Enumeration]) -> None:
    for key in _KEY_FIELDS:
        seen: dict[Any, Enumeration] = {}
        for candidate in members:
            key_value = getattr(candidate, key)
            previous = seen.get(key_value)
            if previous is not None:
                raise InvalidEnumerationDeclaration(
                    f"{cls.__name__}.{candidate.member_name} reuses {key}={key_value!r} "
                    f"already declared by {cls.__name__}.{previous.member_name}."
                )
            seen[key_value] = candidate


__all__ = ["DISPLAY_NAME_UNKNOWN", "Enumeration", "member"]

# Bound after the class exists; both modules import Enumeration from here.
from . import enumeration_operations as _operations  # noqa: E402
from . import pydantic_schema as _pydantic_schema  # noqa: E402

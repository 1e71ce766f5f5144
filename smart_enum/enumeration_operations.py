"""Generic discovery, lookup and comparison helpers for enumeration types.

Every helper takes the concrete enumeration type explicitly, so the same
function serves any :class:`~smart_enum.Enumeration` subtype. The classmethods
on :class:`~smart_enum.Enumeration` delegate here.

Lookups scan the declared members in declaration order and compare keys with
plain ``==``: no case folding, trimming or partial matching. A miss returns
``None``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, Type, TypeVar

from .Enumeration import Enumeration

E = TypeVar("E", bound=Enumeration)


def _require_enumeration_type(enum_type: Any) -> None:
    if not (isinstance(enum_type, type) and issubclass(enum_type, Enumeration)):
        raise TypeError(
            f"Expected an Enumeration subclass, got {enum_type!r}."
        )


def _require_enumeration(value: Any, *, what: str) -> None:
    if not isinstance(value, Enumeration):
        raise TypeError(f"{what} must be an Enumeration, got {type(value).__name__}.")


def get_all(enum_type: Type[E]) -> Iterator[E]:
    """Return a fresh iterator over the members declared by *enum_type*.

    Only members declared in *enum_type*'s own class body are produced;
    members inherited from a parent enumeration belong to the parent.
    A type that declares no members yields nothing.
    """
    _require_enumeration_type(enum_type)
    return iter(enum_type.__dict__.get("_members_", ()))


def _search(enum_type: Type[E], predicate: Callable[[E], bool]) -> Optional[E]:
    for candidate in get_all(enum_type):
        if predicate(candidate):
            return candidate
    return None


def from_value(enum_type: Type[E], value: int) -> Optional[E]:
    """Return the member of *enum_type* whose ``value`` is *value*."""
    return _search(enum_type, lambda e: e.value == value)


def from_object_name(enum_type: Type[E], object_name: str) -> Optional[E]:
    """Return the member of *enum_type* whose ``object_name`` is *object_name*."""
    return _search(enum_type, lambda e: e.object_name == object_name)


def from_uri_name(enum_type: Type[E], uri_name: str) -> Optional[E]:
    """Return the member of *enum_type* whose ``uri_name`` is *uri_name*."""
    return _search(enum_type, lambda e: e.uri_name == uri_name)


def from_display_name(enum_type: Type[E], display_name: str) -> Optional[E]:
    """Return the member of *enum_type* whose ``display_name`` is *display_name*."""
    return _search(enum_type, lambda e: e.display_name == display_name)


def compare(first: Enumeration, second: Enumeration) -> int:
    """Order two enumerations by ``value``.

    Returns
    -------
    int
        ``-1``, ``0`` or ``1``. Operands of different concrete types are
        compared by ``value`` as well.
    """
    _require_enumeration(first, what="first")
    _require_enumeration(second, what="second")
    return (first.value > second.value) - (first.value < second.value)


def equals(first: Optional[Enumeration], second: Optional[Enumeration]) -> bool:
    """Return ``True`` iff both operands exist, share a concrete type and a ``value``."""
    if first is None or second is None:
        return False
    return first == second


def absolute_difference(first: Enumeration, second: Enumeration) -> int:
    """Return the absolute difference of the two ``value`` codes."""
    _require_enumeration(first, what="first")
    _require_enumeration(second, what="second")
    return abs(first.value - second.value)


__all__ = [
    "absolute_difference",
    "compare",
    "equals",
    "from_display_name",
    "from_object_name",
    "from_uri_name",
    "from_value",
    "get_all",
]

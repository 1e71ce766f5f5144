"""Equality, ordering and lookup semantics of smart enumerations."""

from __future__ import annotations

import pytest

from smart_enum import (
    Enumeration,
    absolute_difference,
    compare,
    equals,
    from_display_name,
    from_object_name,
    from_uri_name,
    from_value,
    get_all,
    member,
)


class Color(Enumeration):
    RED = member(1, "red", "red", "Red")
    BLUE = member(2, "blue", "blue", "Blue")
    SKY_BLUE = member(5, "skyBlue", "sky-blue", "Sky Blue")


class Priority(Enumeration):
    LOW = member(1, "low", "low", "Low")
    HIGH = member(2, "high", "high", "High")


def test_equality_requires_same_type_and_value() -> None:
    assert Color.RED == Color(1, "other", "other", "Other")
    assert Color.RED != Color.BLUE
    assert Color.RED != Priority.LOW
    assert Color.RED != 1
    assert not equals(Color.RED, None)
    assert not equals(None, Color.RED)
    assert equals(Color.RED, Color.from_value(1))


def test_hash_follows_value() -> None:
    assert hash(Color.RED) == hash(1)
    assert hash(Color.RED) == hash(Priority.LOW)
    assert {Color.RED, Color(1, "red", "red", "Red"), Priority.LOW} == {Color.RED, Priority.LOW}


def test_ordering_uses_value_only() -> None:
    assert Color.RED < Color.BLUE < Color.SKY_BLUE
    assert Color.SKY_BLUE >= Color.BLUE
    assert sorted([Color.SKY_BLUE, Color.RED, Color.BLUE]) == [Color.RED, Color.BLUE, Color.SKY_BLUE]
    assert compare(Color.RED, Color.BLUE) < 0
    assert compare(Color.BLUE, Color.RED) > 0
    assert compare(Color.BLUE, Color.BLUE) == 0
    assert Enumeration.compare(Color.RED, Color.BLUE) == -1


def test_cross_type_ordering_is_allowed() -> None:
    assert compare(Color.BLUE, Priority.HIGH) == 0
    assert Priority.LOW < Color.BLUE
    assert Color.BLUE != Priority.HIGH


def test_ordering_against_non_enumeration_is_unsupported() -> None:
    with pytest.raises(TypeError):
        _ = Color.RED < 3
    with pytest.raises(TypeError, match="must be an Enumeration"):
        compare(Color.RED, 3)  # type: ignore[arg-type]


def test_str_is_display_name() -> None:
    assert str(Color.SKY_BLUE) == "Sky Blue"
    assert f"{Color.RED}" == "Red"


def test_absolute_difference_is_symmetric() -> None:
    assert absolute_difference(Color.RED, Color.SKY_BLUE) == 4
    assert absolute_difference(Color.SKY_BLUE, Color.RED) == 4
    assert Color.absolute_difference(Color.BLUE, Color.BLUE) == 0


def test_get_all_returns_fresh_iterators() -> None:
    first = get_all(Color)
    assert next(first) is Color.RED
    assert list(get_all(Color)) == [Color.RED, Color.BLUE, Color.SKY_BLUE]
    assert list(first) == [Color.BLUE, Color.SKY_BLUE]


@pytest.mark.parametrize("item", [Color.RED, Color.BLUE, Color.SKY_BLUE])
def test_every_key_finds_its_member(item: Color) -> None:
    assert from_value(Color, item.value) is item
    assert from_object_name(Color, item.object_name) is item
    assert from_uri_name(Color, item.uri_name) is item
    assert from_display_name(Color, item.display_name) is item
    assert Color.from_value(item.value) is item
    assert Color.from_object_name(item.object_name) is item
    assert Color.from_uri_name(item.uri_name) is item
    assert Color.from_display_name(item.display_name) is item


def test_lookups_match_exactly() -> None:
    assert Color.from_object_name("Red") is None
    assert Color.from_object_name(" red") is None
    assert Color.from_object_name("sky-blue") is None
    assert Color.from_uri_name("skyBlue") is None
    assert Color.from_display_name("sky blue") is None
    assert Color.from_value(0) is None
    assert Color.from_value(3) is None
    assert Color.from_object_name("") is None


def test_lookups_are_scoped_to_the_requested_type() -> None:
    assert Priority.from_value(1) is Priority.LOW
    assert Color.from_value(1) is Color.RED
    assert from_object_name(Priority, "red") is None


def test_lookup_helpers_reject_non_enumeration_types() -> None:
    with pytest.raises(TypeError, match="Expected an Enumeration subclass"):
        get_all(int)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="Expected an Enumeration subclass"):
        from_value(Color.RED, 1)  # type: ignore[arg-type]

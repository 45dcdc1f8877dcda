"""Equality, copying and recursive merging of JSON values."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from jsonval.values import (
    JsonArray,
    JsonBoolean,
    JsonInteger,
    JsonNull,
    JsonObject,
    JsonReal,
    JsonString,
    JsonType,
    JsonValue,
)


@contextmanager
def _visiting(parents: set[int], container: JsonValue) -> Iterator[None]:
    """Mark ``container`` as an ancestor while its children are walked.

    Raises ValueError when the container is already an ancestor, which
    means the structure refers back to itself.
    """
    key = id(container)
    if key in parents:
        raise ValueError("circular reference in JSON value")
    parents.add(key)
    try:
        yield
    finally:
        parents.discard(key)


def _objects_equal(first: JsonObject, second: JsonObject) -> bool:
    if len(first) != len(second):
        return False
    return all(equal(value, second.get(key)) for key, value in first.items())


def _arrays_equal(first: JsonArray, second: JsonArray) -> bool:
    if len(first) != len(second):
        return False
    return all(equal(a, b) for a, b in zip(first, second))


def equal(first: JsonValue | None, second: JsonValue | None) -> bool:
    """Return True if two values have the same type and contents.

    Objects compare regardless of key order; arrays compare item by item.
    A missing value (None) is never equal to anything.
    """
    if first is None or second is None:
        return False
    if first.type is not second.type:
        return False
    if first is second:
        return True

    kind = first.type
    if kind is JsonType.OBJECT:
        return _objects_equal(first, second)  # type: ignore[arg-type]
    if kind is JsonType.ARRAY:
        return _arrays_equal(first, second)  # type: ignore[arg-type]
    if kind is JsonType.STRING:
        return first.data == second.data  # type: ignore[attr-defined]
    if kind in (JsonType.INTEGER, JsonType.REAL):
        return first.value == second.value  # type: ignore[attr-defined]
    # true, false and null are singletons and were handled above
    return False


def _scalar_copy(json: JsonValue) -> JsonValue:
    if isinstance(json, JsonString):
        return JsonString.nocheck(json.data)
    if isinstance(json, JsonInteger):
        return JsonInteger(json.value)
    if isinstance(json, JsonReal):
        return JsonReal(json.value)
    if isinstance(json, (JsonBoolean, JsonNull)):
        return json
    raise TypeError(f"cannot copy {type(json).__name__}")


def copy(json: JsonValue | None) -> JsonValue | None:
    """Return a shallow copy.

    Containers are new, but hold the same member values as the original.
    true, false and null are returned as they are.
    """
    if json is None:
        return None
    if isinstance(json, JsonObject):
        result = JsonObject()
        for key, value in json.items():
            result.set_nocheck(key, value)
        return result
    if isinstance(json, JsonArray):
        return JsonArray(json)
    return _scalar_copy(json)


def _deep_copy(json: JsonValue, parents: set[int]) -> JsonValue:
    if isinstance(json, JsonObject):
        with _visiting(parents, json):
            result = JsonObject()
            for key, value in json.items():
                result.set_nocheck(key, _deep_copy(value, parents))
            return result
    if isinstance(json, JsonArray):
        with _visiting(parents, json):
            return JsonArray(_deep_copy(value, parents) for value in json)
    return _scalar_copy(json)


def deep_copy(json: JsonValue | None) -> JsonValue | None:
    """Return a copy in which every container is copied too.

    Raises ValueError when the value contains itself.
    """
    if json is None:
        return None
    return _deep_copy(json, set())


def _require_object(value: object) -> JsonObject:
    if not isinstance(value, JsonObject):
        raise TypeError(f"expected a JSON object, not {type(value).__name__}")
    return value


def _update_recursive(target: JsonObject, other: JsonObject, parents: set[int]) -> None:
    with _visiting(parents, other):
        for key, value in other.items():
            current = target.get(key)
            if isinstance(current, JsonObject) and isinstance(value, JsonObject):
                _update_recursive(current, value, parents)
            else:
                target.set_nocheck(key, value)


def update_recursive(target: JsonObject, other: JsonObject) -> None:
    """Merge ``other`` into ``target``.

    Where both hold an object under the same key the two objects are merged
    in turn; any other value from ``other`` replaces the one in ``target``.
    Raises TypeError if either argument is not an object and ValueError if
    ``other`` contains itself.
    """
    _update_recursive(_require_object(target), _require_object(other), set())
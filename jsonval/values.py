"""JSON value types: objects, arrays, strings, numbers, booleans and null."""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Iterator, Mapping, Union

from jsonval.seed import current_seed, object_seed
from jsonval.utf import utf8_check_string


class JsonType(Enum):
    """The kind of a JSON value; the value is its display name."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    REAL = "real"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"

    def __str__(self) -> str:
        return self.value


class JsonValue:
    """Base class of every JSON value."""

    type: JsonType

    @property
    def is_number(self) -> bool:
        return self.type in (JsonType.INTEGER, JsonType.REAL)

    @property
    def is_boolean(self) -> bool:
        return self.type in (JsonType.TRUE, JsonType.FALSE)


KeyLike = Union[str, bytes, bytearray]


def _key_text(key: KeyLike, check: bool) -> str:
    if isinstance(key, str):
        if check:
            try:
                key.encode("utf-8")
            except UnicodeEncodeError:
                raise ValueError(f"invalid UTF-8 key: {key!r}") from None
        return key
    if isinstance(key, (bytes, bytearray)):
        data = bytes(key)
        if check and not utf8_check_string(data):
            raise ValueError(f"invalid UTF-8 key: {data!r}")
        return data.decode("utf-8", "surrogateescape")
    raise TypeError(f"object key must be str or bytes, not {type(key).__name__}")


def _check_member(container: JsonValue, value: object) -> JsonValue:
    if not isinstance(value, JsonValue):
        raise TypeError(f"expected a JSON value, not {type(value).__name__}")
    if value is container:
        raise ValueError("a container cannot hold itself")
    return value


class JsonObject(JsonValue):
    """An insertion-ordered mapping of string keys to JSON values."""

    type = JsonType.OBJECT

    def __init__(
        self,
        items: Mapping[KeyLike, JsonValue] | Iterable[tuple[KeyLike, JsonValue]] | None = None,
    ) -> None:
        if not current_seed():
            object_seed(0)
        self._table: dict[str, JsonValue] = {}
        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self.set(key, value)

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._table))

    def __contains__(self, key: object) -> bool:
        if isinstance(key, (bytes, bytearray)):
            key = bytes(key).decode("utf-8", "surrogateescape")
        return key in self._table

    def get(self, key: KeyLike) -> JsonValue | None:
        """Return the value under ``key``, or None if there is none."""
        return self._table.get(_key_text(key, check=False))

    def set(self, key: KeyLike, value: JsonValue) -> None:
        """Store ``value`` under ``key``; the key must be valid UTF-8."""
        text = _key_text(key, check=True)
        self._table[text] = _check_member(self, value)

    def set_nocheck(self, key: KeyLike, value: JsonValue) -> None:
        """Store ``value`` under ``key`` without checking the key's encoding."""
        text = _key_text(key, check=False)
        self._table[text] = _check_member(self, value)

    def delete(self, key: KeyLike) -> None:
        """Remove ``key``; raises KeyError if it is absent."""
        del self._table[_key_text(key, check=False)]

    def clear(self) -> None:
        """Remove every item."""
        self._table.clear()

    def items(self) -> list[tuple[str, JsonValue]]:
        """Return the (key, value) pairs in insertion order."""
        return list(self._table.items())

    def update(self, other: JsonObject) -> None:
        """Copy every item of ``other`` into this object."""
        for key, value in _require_object(other).items():
            self.set_nocheck(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Copy the items of ``other`` whose keys this object already has."""
        for key, value in _require_object(other).items():
            if key in self._table:
                self.set_nocheck(key, value)

    def update_missing(self, other: JsonObject) -> None:
        """Copy the items of ``other`` whose keys this object lacks."""
        for key, value in _require_object(other).items():
            if key not in self._table:
                self.set_nocheck(key, value)

    def __repr__(self) -> str:
        return f"JsonObject({self._table!r})"


def _require_object(other: object) -> JsonObject:
    if not isinstance(other, JsonObject):
        raise TypeError(f"expected a JSON object, not {type(other).__name__}")
    return other


def _check_index(index: int, size: int) -> int:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError("array index must be an integer")
    if index < 0 or index >= size:
        raise IndexError(f"array index {index} out of range")
    return index


class JsonArray(JsonValue):
    """An ordered sequence of JSON values.

    Indexes run from 0 to ``len - 1``; negative indexes are rejected.
    """

    type = JsonType.ARRAY

    def __init__(self, items: Iterable[JsonValue] | None = None) -> None:
        self._items: list[JsonValue] = []
        for value in items or ():
            self.append(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> JsonValue:
        return self._items[_check_index(index, len(self._items))]

    def set(self, index: int, value: JsonValue) -> None:
        """Replace the item at ``index``."""
        position = _check_index(index, len(self._items))
        self._items[position] = _check_member(self, value)

    def append(self, value: JsonValue) -> None:
        """Add ``value`` at the end."""
        self._items.append(_check_member(self, value))

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the length."""
        _check_index(index, len(self._items) + 1)
        self._items.insert(index, _check_member(self, value))

    def remove(self, index: int) -> None:
        """Remove the item at ``index``."""
        del self._items[_check_index(index, len(self._items))]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def extend(self, other: JsonArray) -> None:
        """Append every item of ``other``."""
        if not isinstance(other, JsonArray):
            raise TypeError(f"expected a JSON array, not {type(other).__name__}")
        self._items.extend(list(other._items))

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


def _checked_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError(f"invalid UTF-8 string: {value!r}") from None
    if isinstance(value, (bytes, bytearray)):
        data = bytes(value)
        if not utf8_check_string(data):
            raise ValueError(f"invalid UTF-8 string: {data!r}")
        return data
    raise TypeError(f"expected str or bytes, not {type(value).__name__}")


def _raw_bytes(value: str | bytes | bytearray) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, not {type(value).__name__}")


class JsonString(JsonValue):
    """A string, held as UTF-8 bytes that may contain NUL."""

    type = JsonType.STRING

    def __init__(self, value: str | bytes = "") -> None:
        self._data = _checked_bytes(value)

    @classmethod
    def nocheck(cls, data: str | bytes) -> JsonString:
        """Create a string without validating its encoding."""
        string = cls.__new__(cls)
        string._data = _raw_bytes(data)
        return string

    @property
    def data(self) -> bytes:
        """The raw bytes."""
        return self._data

    @property
    def value(self) -> str:
        """The text; undecodable bytes are kept as escaped surrogates."""
        return self._data.decode("utf-8", "surrogateescape")

    @property
    def length(self) -> int:
        """The length in bytes."""
        return len(self._data)

    def set(self, value: str | bytes) -> None:
        """Replace the contents; they must be valid UTF-8."""
        self._data = _checked_bytes(value)

    def set_nocheck(self, data: str | bytes) -> None:
        """Replace the contents without validating the encoding."""
        self._data = _raw_bytes(data)

    def __repr__(self) -> str:
        return f"JsonString({self._data!r})"


def json_sprintf(fmt: str | bytes, *args: object) -> JsonString:
    """Build a string value from a %-style format; the result must be UTF-8."""
    return JsonString(fmt % args)


def _check_int(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected an integer, not {type(value).__name__}")
    return value


class JsonInteger(JsonValue):
    """An integer number."""

    type = JsonType.INTEGER

    def __init__(self, value: int = 0) -> None:
        self.value = _check_int(value)

    def set(self, value: int) -> None:
        """Replace the number."""
        self.value = _check_int(value)

    def __repr__(self) -> str:
        return f"JsonInteger({self.value!r})"


def _check_real(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, not {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"real value must be finite, not {number!r}")
    return number


class JsonReal(JsonValue):
    """A finite floating-point number."""

    type = JsonType.REAL

    def __init__(self, value: float = 0.0) -> None:
        self.value = _check_real(value)

    def set(self, value: float) -> None:
        """Replace the number; NaN and infinities raise ValueError."""
        self.value = _check_real(value)

    def __repr__(self) -> str:
        return f"JsonReal({self.value!r})"


class JsonBoolean(JsonValue):
    """``true`` or ``false``; there is one instance of each."""

    _instances: dict[bool, JsonBoolean] = {}
    value: bool

    def __new__(cls, value: bool = False) -> JsonBoolean:
        flag = bool(value)
        instance = cls._instances.get(flag)
        if instance is None:
            instance = super().__new__(cls)
            instance.value = flag
            instance.type = JsonType.TRUE if flag else JsonType.FALSE
            cls._instances[flag] = instance
        return instance

    def __repr__(self) -> str:
        return f"JsonBoolean({self.value!r})"


class JsonNull(JsonValue):
    """``null``; there is a single instance."""

    type = JsonType.NULL
    _instance: JsonNull | None = None

    def __new__(cls) -> JsonNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "JsonNull()"


def number_value(json: JsonValue | None) -> float:
    """Return an integer or real as a float, and 0.0 for anything else."""
    if isinstance(json, (JsonInteger, JsonReal)):
        return float(json.value)
    return 0.0
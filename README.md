# jsonval

`jsonval` is an in-memory JSON value model. It provides typed value classes,
strict UTF-8 checking, locale-independent number conversion, and operations
for comparing, copying and merging values.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Values

The value classes live in `jsonval.values`. Each one reports its kind through
a `type` attribute holding a `JsonType` member.

- `JsonObject` maps string keys to values and keeps the keys in insertion
  order.
  - `set(key, value)` requires the key to be valid UTF-8. The key may be
    given as `str` or `bytes`.
  - `set_nocheck` skips the encoding check.
  - `get(key)` returns `None` when the key is absent.
  - `delete(key)` raises `KeyError` when the key is absent.
  - `update`, `update_existing` and `update_missing` copy items from another
    object.
- `JsonArray` is an ordered sequence of values.
  - It supports indexing, `set`, `append`, `insert`, `remove`, `clear` and
    `extend`.
  - Negative and out-of-range indexes raise `IndexError`.
- `JsonString` holds UTF-8 bytes, which may contain NUL.
  - `data` gives the bytes, `value` gives the text and `length` gives the
    byte count.
  - `JsonString.nocheck(...)` and `set_nocheck(...)` skip validation.
- `JsonInteger` holds an integer.
- `JsonReal` holds a finite float. NaN and infinities raise `ValueError`.
- `JsonBoolean(True)` and `JsonBoolean(False)` are singletons, and so is
  `JsonNull()`.

No container can be stored inside itself; an attempt raises `ValueError`.

```python
from jsonval.values import JsonArray, JsonInteger, JsonObject, JsonString

obj = JsonObject()
obj.set("name", JsonString("pool"))
arr = JsonArray()
arr.append(JsonInteger(1))
obj.set("items", arr)
```

Two helper functions also live in `jsonval.values`:

- `json_sprintf(fmt, *args)` builds a `JsonString` from a `%`-style format.
- `number_value(json)` returns an integer or a real as a float, and `0.0` for
  anything else.

## Comparing, copying and merging

The following operations are in `jsonval.ops`:

- `equal(first, second)` compares two values by type and contents. Object key
  order is ignored, and `None` is never equal to anything.
- `copy(json)` makes a shallow copy. Containers are new but share their
  members.
- `deep_copy(json)` copies every container. It raises `ValueError` if the
  value contains itself.
- `update_recursive(target, other)` merges `other` into `target`. Nested
  objects are merged, and any other value is replaced.

## Lower-level helpers

`jsonval.utf` works on UTF-8:

- `utf8_encode`
- `utf8_check_first`
- `utf8_check_full`
- `utf8_iterate`
- `utf8_check_string`

`jsonval.strconv` converts between text and floats:

- `strtod(text)` raises `ValueError` for malformed text and `OverflowError`
  when the value is out of range.
- `dtostr(value, precision)` formats a float so that it always reads back as a
  real. A precision of `0` means 17 significant digits.

`jsonval.strbuffer.StrBuffer` is a growable byte buffer. It provides `append`,
`append_byte`, `pop`, `clear`, `steal` and `steal_with_newline`.

`jsonval.seed` holds the process-wide 32-bit hash seed:

- `object_seed(seed)` sets it once.
- `current_seed()` reads it.
- `generate_seed()` makes a fresh seed.

`jsonval.version` provides `version_str()` and
`version_cmp(major, minor, micro)`.

## What this package does not do

The package does not read or write JSON text. It has no parser and no
serializer. It also has no format-string mini-language for building or taking
apart values. Values are built and inspected through the classes above.
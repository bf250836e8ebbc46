# fieldreflect

Treat the fields of a plain record as an ordered tuple, without writing any
per-class boilerplate.

A record ("aggregate") is any of:

- a dataclass instance,
- a named tuple,
- a plain tuple (its fields are positional and have no names),
- an instance of a class that declares `__slots__` (slots from every class
  in the hierarchy, base classes first; `__dict__` and `__weakref__` are
  ignored).

Fields are always visited in declaration order. Anything else raises
`fieldreflect.core.ReflectionError`, a subclass of `TypeError`.

The package has no dependencies beyond the standard library.

## Installation

    pip install fieldreflect

## Field access — `fieldreflect.core`

```python
from dataclasses import dataclass
from fieldreflect.core import tuple_size, get, structure_to_tuple, for_each_field

@dataclass
class Person:
    name: str
    birth_year: int

val = Person("Edgar Allan Poe", 1809)

tuple_size(val)          # 2  (a record type works too: tuple_size(Person))
get(0, val)              # 'Edgar Allan Poe'
structure_to_tuple(val)  # ('Edgar Allan Poe', 1809)

for_each_field(val, lambda field, index: print(index, field))
for_each_field(val, print)   # called with the field alone
```

- `get` raises `IndexError` for an index outside the record.
- `tuple_size` of a plain `tuple` *type* raises `ReflectionError`: its length
  is only known for a value.
- `for_each_field` calls `func(field, index)` when `func` accepts two
  positional arguments, and `func(field)` otherwise.

## Field names — `fieldreflect.names`

```python
from fieldreflect.names import get_name, names_as_array, for_each_field_with_name

get_name(0, Person)      # 'name'
names_as_array(Person)   # ('name', 'birth_year')
for_each_field_with_name(val, lambda name, field: print(name, field))
```

`for_each_field_with_name` calls `func(name, field, index)` when `func`
accepts three positional arguments, and `func(name, field)` otherwise. Plain
tuples have no field names; asking for them raises `ReflectionError`.

## Field-wise comparison and hashing — `fieldreflect.functional`

```python
from fieldreflect.functional import eq_fields, lt_fields, hash_fields

eq_fields(Person("a", 1), Person("a", 1))  # True
lt_fields(Person("a", 1), Person("a", 2))  # True
hash_fields(val)                           # combined hash of every field
```

`eq_fields`, `ne_fields`, `lt_fields`, `le_fields`, `gt_fields` and
`ge_fields` compare the fields lexicographically, the way tuples compare;
when one record is a prefix of the other, the field counts decide. The two
records need not be of the same type.

`hash_fields` combines the built-in `hash()` of every field into an unsigned
64-bit value (an empty record hashes to 0). Since it relies on `hash()`,
values of `str` fields hash differently from one process to another.

The mixing steps are available on their own: `hash_combine` (the
golden-ratio step), `hash_combine32` (a MurmurHash3 32-bit block step),
`hash_combine64` (the MurmurHash2 64-bit step) and `rotl32`.

## Operators that prefer a type's own — `fieldreflect.ops`

`eq`, `ne`, `lt`, `gt`, `le`, `ge` use the values' own comparison methods
(including the reflected one on the right-hand value); only when both return
`NotImplemented` do they fall back to the field-wise functions above.
`hash_value` uses the type's own `__hash__` and falls back to `hash_fields`
when the type has none or only inherits `object.__hash__`.

## Text I/O — `fieldreflect.io`

Records are written as `{field, field, ...}`. String fields are
double-quoted, with `"` and `\` escaped by a backslash; booleans are written
as `1` and `0`; nested records are written the same way.

```python
from fieldreflect.io import io, io_fields, read_fields, read_io, join_fields

io_fields(val)                                   # '{"Edgar Allan Poe", 1809}'
read_fields('{"Joseph Brodsky", 1940}', Person)  # Person(name='Joseph Brodsky', birth_year=1940)
join_fields(val, ", ")                           # 'Edgar Allan Poe, 1809'
```

- `io(value)` uses the value's own `__str__` when its type defines one (or
  when it is not a record at all), and `io_fields` otherwise.
- `read_fields(text, cls)` reads a record of type `cls`; it raises
  `ReflectionError` if `cls` is not a record type. Field types are taken from
  the class annotations (built-in type names written as strings are
  understood too); unannotated fields are read as `int`, then `float`, then
  as text. Malformed input raises `ValueError`.
- `read_io(text, cls)` reads any value: field by field for record types,
  otherwise by calling `cls` on the token read.
- `join_fields(value, sep=", ")` writes the fields unquoted.

## Adding operators to a class — `fieldreflect.functions_for`

```python
from fieldreflect.functions_for import functions_for

@functions_for
class Point:
    __slots__ = ("x", "y")

    def __init__(self, x, y):
        self.x, self.y = x, y

Point(1, 2) < Point(1, 3)     # True
str(Point(1, 2))              # '{1, 2}'
Point.parse("{4, 5}").y       # 5
```

The decorator sets field-wise `__eq__`, `__ne__`, `__lt__`, `__gt__`,
`__le__` and `__ge__` (between instances of the class only; other operands
get `NotImplemented`), a `__str__` that writes like `io_fields`, a `__hash__`
based on `hash_fields`, and a `parse` class method that reads like
`read_fields`.

## Reflectability — `fieldreflect.traits`

```python
from fieldreflect.traits import set_reflectable, is_reflectable, is_implicitly_reflectable

is_reflectable(Person)              # None: nothing recorded
is_implicitly_reflectable(Person)   # True: judged by its shape
set_reflectable(Person, False, "serialisation")
is_implicitly_reflectable(Person, "serialisation")  # False
```

A decision recorded for a specific purpose takes precedence over one
recorded for every purpose (`what_for=None`). Without any decision,
`is_implicitly_reflectable` judges the type by its shape. Decisions are kept
in process memory only. The text readers consult `is_implicitly_reflectable`
to decide whether a field type is read as a record.

## What it does not do

The package is a library only: it has no command-line tool. Classes whose
fields live only in an instance `__dict__` (without dataclass, named-tuple or
`__slots__` declarations) are not treated as records.
"""Text input and output of aggregates, field by field.

Aggregates are written as ``{field, field, ...}``. String fields are
double-quoted, with ``"`` and ``\\`` escaped by a backslash, and booleans
are written as ``1`` and ``0``.
"""

from __future__ import annotations

import dataclasses
import types
from typing import Any

from .core import ReflectionError, _field_names, structure_to_tuple
from .traits import is_implicitly_reflectable

__all__ = ["io_fields", "read_fields", "io", "read_io", "join_fields"]

_QUOTE = '"'
_ESCAPE = "\\"
_TOKEN_STOPS = frozenset(',{}"')

_BUILTIN_HINTS: dict[str, type] = {
    "int": int,
    "float": float,
    "complex": complex,
    "str": str,
    "bool": bool,
    "bytes": bytes,
    "tuple": tuple,
    "list": list,
    "dict": dict,
    "set": set,
    "frozenset": frozenset,
}


def _quoted(text: str) -> str:
    escaped = text.replace(_ESCAPE, _ESCAPE * 2).replace(_QUOTE, _ESCAPE + _QUOTE)
    return f"{_QUOTE}{escaped}{_QUOTE}"


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _is_aggregate_value(value: Any) -> bool:
    try:
        structure_to_tuple(value)
    except ReflectionError:
        return False
    return True


def _has_own_str(value: Any) -> bool:
    return type(value).__str__ is not object.__str__


def _format_field(value: Any) -> str:
    if isinstance(value, str):
        return _quoted(value)
    return io(value)


def io_fields(value: Any) -> str:
    """Write every field of ``value`` as ``{a, b, ...}``."""
    return "{" + ", ".join(_format_field(field) for field in structure_to_tuple(value)) + "}"


def io(value: Any) -> str:
    """Write ``value`` with its own ``__str__`` if it has one, else field by field."""
    if isinstance(value, bool) or not _is_aggregate_value(value) or _has_own_str(value):
        return _scalar(value)
    return io_fields(value)


def join_fields(value: Any, sep: str = ", ") -> str:
    """Write the fields of ``value`` unquoted, separated by ``sep``."""
    return sep.join(_scalar(field) for field in structure_to_tuple(value))


def _is_real_type(hint: Any) -> bool:
    return isinstance(hint, type) and not isinstance(hint, types.GenericAlias)


def _is_aggregate_type(hint: Any) -> bool:
    return _is_real_type(hint) and is_implicitly_reflectable(hint)


def _class_annotations(cls: type) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        annotations = klass.__dict__.get("__annotations__")
        if isinstance(annotations, dict):
            merged.update(annotations)
    return merged


def _resolve_hint(hint: Any) -> type | None:
    if isinstance(hint, str):
        hint = _BUILTIN_HINTS.get(hint.strip())
    return hint if _is_real_type(hint) else None


def _field_hints(cls: type, names: tuple[str, ...]) -> list[type | None]:
    hints = _class_annotations(cls)
    return [_resolve_hint(hints.get(name)) for name in names]


def _convert(token: str, hint: type | None) -> Any:
    if hint is bool:
        lowered = token.lower()
        if lowered in ("1", "true"):
            return True
        if lowered in ("0", "false"):
            return False
        raise ValueError(f"cannot read {token!r} as a boolean")
    if hint is None:
        for number in (int, float):
            try:
                return number(token)
            except ValueError:
                continue
        return token
    if hint is str:
        return token
    try:
        return hint(token)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"cannot read {token!r} as {hint.__name__}") from exc


def _build(cls: type, values: list[Any]) -> Any:
    if dataclasses.is_dataclass(cls):
        return cls(*values)
    if issubclass(cls, tuple):
        if isinstance(getattr(cls, "_fields", None), tuple):
            return cls(*values)
        return cls(values)
    obj = cls.__new__(cls)
    for name, value in zip(_field_names(cls), values):
        setattr(obj, name, value)
    return obj


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_ws(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def peek(self) -> str:
        self.skip_ws()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def expect(self, char: str) -> None:
        found = self.peek()
        if found != char:
            where = repr(found) if found else "end of input"
            raise ValueError(f"expected {char!r} at position {self.pos}, found {where}")
        self.pos += 1

    def at_end(self) -> bool:
        return self.peek() == ""

    def read_quoted(self) -> str:
        self.expect(_QUOTE)
        chars: list[str] = []
        while self.pos < len(self.text):
            char = self.text[self.pos]
            self.pos += 1
            if char == _ESCAPE:
                if self.pos >= len(self.text):
                    break
                chars.append(self.text[self.pos])
                self.pos += 1
            elif char == _QUOTE:
                return "".join(chars)
            else:
                chars.append(char)
        raise ValueError("unterminated quoted string")

    def read_token(self) -> str:
        self.skip_ws()
        start = self.pos
        while (
            self.pos < len(self.text)
            and self.text[self.pos] not in _TOKEN_STOPS
            and not self.text[self.pos].isspace()
        ):
            self.pos += 1
        token = self.text[start:self.pos]
        if not token:
            raise ValueError(f"expected a value at position {start}")
        return token

    def read_value(self, hint: type | None) -> Any:
        if _is_aggregate_type(hint):
            return self.read_aggregate(hint)
        head = self.peek()
        if head == _QUOTE:
            text = self.read_quoted()
            return text if hint in (None, str) else _convert(text, hint)
        if head == "{":
            return self.read_aggregate(tuple)
        return _convert(self.read_token(), hint)

    def read_aggregate(self, cls: type) -> Any:
        self.expect("{")
        values: list[Any] = []
        if issubclass(cls, tuple) and not isinstance(getattr(cls, "_fields", None), tuple):
            while self.peek() != "}":
                if values:
                    self.expect(",")
                values.append(self.read_value(None))
        else:
            names = _field_names(cls)
            for index, hint in enumerate(_field_hints(cls, names)):
                if index:
                    self.expect(",")
                values.append(self.read_value(hint))
        self.expect("}")
        return _build(cls, values)


def _read_all(text: str, cls: type) -> Any:
    reader = _Reader(text)
    value = reader.read_value(cls)
    if not reader.at_end():
        raise ValueError(f"unexpected text after the value at position {reader.pos}")
    return value


def read_fields(text: str, cls: type) -> Any:
    """Read an aggregate of type ``cls`` written as ``{a, b, ...}``."""
    if not _is_aggregate_type(cls):
        raise ReflectionError(f"{getattr(cls, '__name__', cls)!r} is not a reflectable aggregate")
    return _read_all(text, cls)


def read_io(text: str, cls: type) -> Any:
    """Read a value of type ``cls``: field by field for aggregates, else by its constructor."""
    return _read_all(text, cls)
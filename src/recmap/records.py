# recmap/records.py

from __future__ import annotations

import dataclasses
from typing import Any, Tuple


class InvalidFieldPosition(IndexError):
    """A field spec points outside the record's fields."""


def _is_namedtuple(obj: Any) -> bool:
    return isinstance(obj, tuple) and hasattr(obj, "_fields")


def field_names(record: Any) -> Tuple[str, ...]:
    """
    Ordered attribute names of a record (type or instance).

    Plain tuples have no names; an empty tuple is returned for them.
    """
    if dataclasses.is_dataclass(record):
        return tuple(f.name for f in dataclasses.fields(record))
    if isinstance(record, type) and issubclass(record, tuple) and hasattr(record, "_fields"):
        return tuple(record._fields)
    if _is_namedtuple(record):
        return tuple(record._fields)
    if isinstance(record, tuple):
        return ()
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def field_position(record_type: Any, attribute: str) -> int:
    """Return the 0-based position of ``attribute`` on a dataclass or named tuple."""
    names = field_names(record_type)
    try:
        return names.index(attribute)
    except ValueError:
        type_name = getattr(record_type, "__name__", type(record_type).__name__)
        raise InvalidFieldPosition(
            f"{type_name} has no field {attribute!r} (fields: {', '.join(names)})"
        ) from None


def _check_position(record: Any, position: int) -> int:
    if isinstance(record, tuple):
        arity = len(record)
    else:
        arity = len(field_names(record))
    if not isinstance(position, int) or isinstance(position, bool) or not 0 <= position < arity:
        raise InvalidFieldPosition(
            f"Invalid field position {position!r} for {type(record).__name__} "
            f"with {arity} field(s)"
        )
    return position


def get_field(record: Any, position: int) -> Any:
    if isinstance(record, tuple):
        return record[_check_position(record, position)]
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        name = field_names(record)[_check_position(record, position)]
        return getattr(record, name)
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def set_field(record: Any, position: int, value: Any) -> Any:
    """
    Return a copy of ``record`` with the field at ``position`` replaced.

    The input record is left untouched.
    """
    if _is_namedtuple(record):
        name = record._fields[_check_position(record, position)]
        return record._replace(**{name: value})
    if isinstance(record, tuple):
        i = _check_position(record, position)
        return record[:i] + (value,) + record[i + 1:]
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        name = field_names(record)[_check_position(record, position)]
        return dataclasses.replace(record, **{name: value})
    raise TypeError(f"Unsupported record type: {type(record).__name__}")

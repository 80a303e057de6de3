from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Hashable, List, Tuple


class _Undefined:
    """Absence marker for record fields that were never set."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

Transform = Callable[[Any], Any]
Property = Tuple[Hashable, Any]
PropList = List[Property]


def identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class FieldSpec:
    """
    Mapping rule for one record field.

    - name: key used in the property list (usually a str)
    - position: 0-based index into the record's fields
    - transform: applied to the value on the way out (encode)
      or on the way in (decode)
    """

    name: Hashable
    position: int
    transform: Transform = identity


def field_spec(name: Hashable, position: int, transform: Transform = identity) -> FieldSpec:
    """Create the specification for a field.

    Position bounds are not checked here; an invalid position only fails
    when the spec is applied to a record.

    Example:
        field_spec("name", field_position(Country, "name"), str.title)
    """
    return FieldSpec(name=name, position=position, transform=transform)

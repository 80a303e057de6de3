from .types import UNDEFINED, FieldSpec, field_spec, identity
from .records import InvalidFieldPosition, field_position, get_field, set_field
from .mapper import decode, encode, spec_to_map
from .transforms import get_transform, register_transform
from .load import build_specs, load_specs_yaml, specs_to_dict

__all__ = [
    "UNDEFINED",
    "FieldSpec",
    "field_spec",
    "identity",
    "InvalidFieldPosition",
    "field_position",
    "get_field",
    "set_field",
    "encode",
    "decode",
    "spec_to_map",
    "get_transform",
    "register_transform",
    "build_specs",
    "load_specs_yaml",
    "specs_to_dict",
]

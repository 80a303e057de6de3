from __future__ import annotations

import json
import re
from typing import Any, Dict

from .types import Transform, identity


def _strip(v: Any):
    return v.strip() if isinstance(v, str) else v


def _lower(v: Any):
    return v.lower() if isinstance(v, str) else v


def _upper(v: Any):
    return v.upper() if isinstance(v, str) else v


def _slug(v: Any):
    if not isinstance(v, str):
        return v
    s = v.strip().lower()
    return re.sub(r"[^a-z0-9]+", "-", s).strip("-")


def _from_json(v: Any):
    return json.loads(v) if isinstance(v, str) else v


def _to_json(v: Any) -> str:
    return json.dumps(v, sort_keys=True)


def _to_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return bool(v)


def to_ddb_string(value: Any):
    """Wrap a value as a DynamoDB-style string attribute: ("s", value)."""
    return ("s", value)


def from_ddb_string(attr: Any):
    tag, value = attr
    if tag != "s":
        raise ValueError(f"Expected a string attribute, got tag {tag!r}")
    return value


TRANSFORMS: Dict[str, Transform] = {
    "identity": identity,
    "str": str,
    "int": int,
    "float": float,
    "bool": _to_bool,
    "strip": _strip,
    "lower": _lower,
    "upper": _upper,
    "slug": _slug,
    "json": _from_json,
    "to_json": _to_json,
    "to_ddb_string": to_ddb_string,
    "from_ddb_string": from_ddb_string,
}


def register_transform(name: str, fn: Transform) -> None:
    if not callable(fn):
        raise TypeError(f"Transform {name!r} must be callable")
    TRANSFORMS[name] = fn


def get_transform(name: str) -> Transform:
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise KeyError(
            f"Unknown transform {name!r}; known: {sorted(TRANSFORMS)}"
        ) from None


def transform_name(fn: Transform):
    """Reverse lookup in the registry; None if ``fn`` is not registered."""
    for name, registered in TRANSFORMS.items():
        if registered is fn:
            return name
    return None

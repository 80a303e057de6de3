# recmap/load.py

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .records import field_names, field_position
from .transforms import get_transform, transform_name
from .types import FieldSpec, identity

log = logging.getLogger(__name__)


class FieldRule(BaseModel):
    # One entry of the "fields" list in a spec document
    model_config = ConfigDict(extra="forbid")

    name: Any
    field: Optional[str] = None
    position: Optional[int] = Field(default=None, ge=0)
    transform: Optional[str] = None


class SpecDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: Union[str, int] = Field(default="1")
    rules: List[FieldRule] = Field(default_factory=list, alias="fields")


def _parse_document(doc: Union[Dict[str, Any], str, None]) -> SpecDocument:
    if isinstance(doc, str):
        try:
            doc = yaml.safe_load(doc)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in spec document: {e}") from e
    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise ValueError(f"Spec document must be a mapping, got {type(doc).__name__}")
    try:
        return SpecDocument.model_validate(doc)
    except ValidationError as e:
        raise ValueError(f"Invalid spec document: {e}") from e


def _resolve_position(rule: FieldRule, record_type: Any) -> int:
    if rule.field is not None and rule.position is not None:
        raise ValueError(f"Field {rule.name!r}: give either 'field' or 'position', not both")
    if rule.position is not None:
        return rule.position
    if rule.field is None:
        raise ValueError(f"Field {rule.name!r}: missing 'field' or 'position'")
    if record_type is None:
        raise ValueError(
            f"Field {rule.name!r}: 'field: {rule.field}' needs a record_type to resolve"
        )
    return field_position(record_type, rule.field)


def build_specs(
    doc: Union[Dict[str, Any], str, None],
    record_type: Any = None,
) -> List[FieldSpec]:
    """
    Build a specification from a config document (dict or YAML text).

    Expected shape:

        version: "1"
        fields:
          - { name: name,         field: name }
          - { name: country_code, field: country_code, transform: upper }
          - { name: currency,     position: 2 }
    """
    parsed = _parse_document(doc)
    specs: List[FieldSpec] = []
    for rule in parsed.rules:
        transform = get_transform(rule.transform) if rule.transform else identity
        specs.append(FieldSpec(
            name=rule.name,
            position=_resolve_position(rule, record_type),
            transform=transform,
        ))
    log.debug("built %d field spec(s) from document version %s", len(specs), parsed.version)
    return specs


def load_specs_yaml(path: Union[str, Path], record_type: Any = None) -> List[FieldSpec]:
    path = Path(path).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            doc = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML") from e
    try:
        return build_specs(doc, record_type=record_type)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e


def specs_to_dict(specs: List[FieldSpec], record_type: Any = None) -> Dict[str, Any]:
    """
    Serialize specs back into the document shape read by build_specs.

    With a record_type, positions are written as field names.
    Every transform must be registered by name.
    """
    names = field_names(record_type) if record_type is not None else ()
    rules: List[Dict[str, Any]] = []
    for spec in specs:
        rule: Dict[str, Any] = {"name": spec.name}
        if names and 0 <= spec.position < len(names):
            rule["field"] = names[spec.position]
        else:
            rule["position"] = spec.position
        if spec.transform is not identity:
            tname = transform_name(spec.transform)
            if tname is None:
                raise ValueError(
                    f"Field {spec.name!r}: transform {spec.transform!r} is not registered"
                )
            rule["transform"] = tname
        rules.append(rule)
    return {"version": "1", "fields": rules}

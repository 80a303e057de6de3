from __future__ import annotations

import logging
from typing import Any, Dict, Hashable, Iterable

from .records import get_field, set_field
from .types import UNDEFINED, FieldSpec, PropList

log = logging.getLogger(__name__)


def spec_to_map(specs: Iterable[FieldSpec]) -> Dict[Hashable, FieldSpec]:
    """Index specs by name. With duplicate names the last spec wins."""
    out: Dict[Hashable, FieldSpec] = {}
    for spec in specs:
        out[spec.name] = spec
    return out


def encode(record: Any, specs: Iterable[FieldSpec]) -> PropList:
    """
    Encode a record to a property list.

    Fields holding UNDEFINED are skipped. The result comes out in reverse
    spec order:

        encode(Country("Netherlands", "NL", "EUR"), [name, country_code, currency_code])
        -> [("currency_code", "EUR"), ("country_code", "NL"), ("name", "Netherlands")]
    """
    props: PropList = []
    for spec in specs:
        value = get_field(record, spec.position)
        if value is UNDEFINED:
            log.debug("encode: skipping undefined field %r", spec.name)
            continue
        props.append((spec.name, spec.transform(value)))
    props.reverse()
    return props


def decode(record: Any, specs: Iterable[FieldSpec], props: Iterable[Any]) -> Any:
    """
    Decode a property list onto a copy of ``record``.

    Keys without a spec are ignored. When a key repeats, the last value wins.
    """
    spec_map = spec_to_map(specs)
    out = record
    for key, value in props:
        spec = spec_map.get(key)
        if spec is None:
            log.debug("decode: ignoring unknown key %r", key)
            continue
        out = set_field(out, spec.position, spec.transform(value))
    return out

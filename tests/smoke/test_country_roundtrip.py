import json
from typing import Any, NamedTuple

from recmap import UNDEFINED, decode, encode, field_position, field_spec


class Country(NamedTuple):
    name: Any = UNDEFINED
    country_code: Any = UNDEFINED
    currency_code: Any = UNDEFINED


def test_country_json_roundtrip():
    """
    Record → property list → JSON → property list → Record.

    The same record type is mapped with one spec per format.
    """
    specs = [
        field_spec("name", field_position(Country, "name")),
        field_spec("countryCode", field_position(Country, "country_code")),
        field_spec("currency", field_position(Country, "currency_code"), str.upper),
    ]

    record = Country(name="Netherlands", country_code="NL", currency_code="eur")
    text = json.dumps(dict(encode(record, specs)))

    loaded = decode(Country(), specs, list(json.loads(text).items()))

    assert loaded == Country(name="Netherlands", country_code="NL", currency_code="EUR")


def test_partial_record_skips_undefined():
    specs = [
        field_spec("name", 0),
        field_spec("countryCode", 1),
    ]
    assert encode(Country(name="Netherlands"), specs) == [("name", "Netherlands")]
    assert decode(Country(), specs, []) == Country()
